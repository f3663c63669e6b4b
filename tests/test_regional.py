import pytest

from amrsim.regional import (
    Region,
    build_regional_parameters,
    drug_availability_for_region,
    infection_risk_multiplier,
)

DRUGS = ("amoxicillin", "tedizolid", "teicoplanin", "meropenem", "clindamycin")


def test_region_round_trips_through_value():
    for region in Region:
        assert Region(region.value) is region


def test_home_is_not_geographic():
    home = Region("home")
    africa = Region("africa")
    assert not home.is_geographic
    assert africa.is_geographic
    assert infection_risk_multiplier(home, "vibrio cholerae") == 1.0
    assert infection_risk_multiplier(africa, "vibrio cholerae") == 6.0


def test_unknown_region_raises():
    with pytest.raises(ValueError):
        drug_availability_for_region("atlantis", "amoxicillin")
    with pytest.raises(ValueError):
        infection_risk_multiplier("atlantis", "vibrio cholerae")


def test_availability_pinned_values():
    assert drug_availability_for_region(Region.ASIA, "tedizolid") == 0.3
    assert drug_availability_for_region(Region.AFRICA, "teicoplanin") == 0.0
    assert drug_availability_for_region("south_america", "ertapenem") == 0.6
    assert drug_availability_for_region(Region.AFRICA, "clindamycin") == 0.1


def test_north_america_and_europe_fully_available():
    for drug in DRUGS:
        assert drug_availability_for_region(Region.NORTH_AMERICA, drug) == 1.0
        assert drug_availability_for_region(Region.EUROPE, drug) == 1.0
        assert drug_availability_for_region(Region.HOME, drug) == 1.0


def test_availability_accepts_string_or_enum():
    for region in Region:
        for drug in DRUGS:
            assert drug_availability_for_region(region, drug) == drug_availability_for_region(
                region.value, drug
            )


def test_infection_risk_pinned_values():
    assert infection_risk_multiplier(Region.AFRICA, "vibrio cholerae") == 6.0
    assert infection_risk_multiplier(Region.EUROPE, "vibrio cholerae") == 0.05
    assert infection_risk_multiplier(
        Region.AFRICA, "invasive non-typhoidal salmonella spp."
    ) == 8.0


def test_infection_risk_falls_back_to_home_default():
    assert infection_risk_multiplier(Region.HOME, "vibrio cholerae") == 1.0
    assert infection_risk_multiplier(Region.ASIA, "listeria_monocytogenes") == 1.0


def test_build_has_availability_for_every_region_and_drug():
    params = build_regional_parameters(DRUGS)
    for region in Region:
        for drug in DRUGS:
            key = f"{region.value}_drug_{drug}_availability"
            assert params[key] == drug_availability_for_region(region, drug)
            assert 0.0 <= params[key] <= 1.0


def test_build_contains_regional_multipliers():
    params = build_regional_parameters([])
    assert params["europe_travel_multiplier"] == 3.5
    assert params["africa_sepsis_mortality_multiplier"] == 2.0
    assert params["africa_mosquito_exposure_multiplier"] == 8.0
    assert params["home_infection_risk_multiplier_default"] == 1.0
    assert not any(key.endswith("_availability") for key in params)


def test_build_infection_risk_keys_match_lookup():
    params = build_regional_parameters([])
    key = "asia_salmonella_enterica_serovar_paratyphi_a_infection_risk_multiplier"
    assert params[key] == infection_risk_multiplier(
        Region.ASIA, "salmonella enterica serovar paratyphi a"
    )


def test_home_has_no_region_multipliers():
    params = build_regional_parameters(DRUGS)
    assert "home_travel_multiplier" not in params
    assert "home_mortality_multiplier" not in params