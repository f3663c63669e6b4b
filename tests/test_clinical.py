import pytest

from amrsim.clinical import (
    SepsisRisk,
    age_group_index,
    age_risk_template,
    build_potency_parameters,
    cross_resistance_groups,
    sepsis_risk_category,
)

DRUGS = [
    "penicilling",
    "ampicillin",
    "piperacillin",
    "ceftriaxone",
    "ceftazidime",
    "meropenem",
    "vancomycin",
    "linezolid",
    "azithromycin",
    "ciprofloxacin",
    "gentamicin",
    "trim_sulf",
    "nitrofurantoin",
    "metronidazole",
    "furazolidone",
]
BACTERIA = [
    "staphylococcus aureus",
    "streptococcus pneumoniae",
    "enterococcus faecalis",
    "escherichia coli",
    "pseudomonas aeruginosa",
    "acinetobacter baumannii",
    "chlamydia trachomatis",
    "clostridioides_difficile",
    "vibrio cholerae",
]

TEMPLATE_NAMES = [
    "respiratory",
    "gastrointestinal",
    "urogenital",
    "skin_soft_tissue",
    "bloodstream",
    "vector_borne",
    "sexually_transmitted",
    "flat",
]


@pytest.fixture
def params():
    return build_potency_parameters(DRUGS, BACTERIA)


def potency(params, drug, bacteria):
    return params[f"drug_{drug}_for_bacteria_{bacteria}_potency_when_no_r"]


def baseline(params):
    return potency(params, "furazolidone", "vibrio cholerae")


def test_every_pair_has_three_parameters(params):
    assert len(params) == 3 * len(DRUGS) * len(BACTERIA)
    for drug in DRUGS:
        for bug in BACTERIA:
            assert f"drug_{drug}_for_bacteria_{bug}_initiation_multiplier" in params
            assert f"drug_{drug}_for_bacteria_{bug}_resistance_emergence_rate_per_day_baseline" in params


def test_unlisted_drugs_get_no_entries(params):
    assert not any("amoxicillin" in key for key in params)
    assert not any("klebsiella" in key for key in params)


def test_unlisted_pairs_share_default_potency(params):
    assert potency(params, "gentamicin", "vibrio cholerae") == baseline(params)
    assert potency(params, "ceftriaxone", "enterococcus faecalis") == baseline(params)


def test_penicillin_better_for_strep_than_staph(params):
    assert potency(params, "penicilling", "streptococcus pneumoniae") > potency(
        params, "penicilling", "staphylococcus aureus"
    )


def test_piperacillin_stands_out_among_penicillins(params):
    assert potency(params, "piperacillin", "escherichia coli") > potency(params, "ampicillin", "escherichia coli")
    assert potency(params, "piperacillin", "pseudomonas aeruginosa") > potency(
        params, "ampicillin", "pseudomonas aeruginosa"
    )


def test_antipseudomonal_cephalosporin(params):
    assert potency(params, "ceftazidime", "pseudomonas aeruginosa") > potency(
        params, "ceftriaxone", "pseudomonas aeruginosa"
    )


def test_carbapenem_weaker_for_acinetobacter(params):
    assert potency(params, "meropenem", "acinetobacter baumannii") < potency(
        params, "meropenem", "pseudomonas aeruginosa"
    )


def test_azithromycin_for_chlamydia_is_strongest(params):
    potencies = [v for k, v in params.items() if k.endswith("_potency_when_no_r")]
    assert potency(params, "azithromycin", "chlamydia trachomatis") == max(potencies)


def test_specific_overrides_raise_potency(params):
    assert potency(params, "nitrofurantoin", "escherichia coli") > baseline(params)
    assert potency(params, "metronidazole", "clostridioides_difficile") > baseline(params)
    assert potency(params, "trim_sulf", "escherichia coli") > baseline(params)


def test_overrides_skipped_when_drug_missing():
    result = build_potency_parameters(["ampicillin"], ["escherichia coli"])
    assert not any("nitrofurantoin" in key for key in result)
    assert len(result) == 3


def test_cross_resistance_groups_contents():
    groups = cross_resistance_groups()
    assert ("ciprofloxacin", "levofloxacin") in groups["escherichia coli"]
    assert any("clindamycin" in group for group in groups["staphylococcus aureus"])
    for bug_groups in groups.values():
        for group in bug_groups:
            assert len(group) >= 2
            assert len(set(group)) == len(group)


def test_cross_resistance_groups_not_shared_between_calls():
    first = cross_resistance_groups()
    first.pop("escherichia coli")
    assert "escherichia coli" in cross_resistance_groups()


@pytest.mark.parametrize(
    "name, expected",
    [
        ("staphylococcus aureus", SepsisRisk.HIGH),
        ("klebsiella pneumoniae", SepsisRisk.HIGH),
        ("chlamydia trachomatis", SepsisRisk.LOW),
        ("haemophilus influenzae", SepsisRisk.LOW),
        ("escherichia coli", SepsisRisk.MODERATE),
        ("unknown bug", SepsisRisk.MODERATE),
    ],
)
def test_sepsis_risk_category(name, expected):
    assert sepsis_risk_category(name) is expected


def test_sepsis_risk_defaults_ordered():
    high = sepsis_risk_category("staphylococcus aureus")
    moderate = sepsis_risk_category("escherichia coli")
    low = sepsis_risk_category("chlamydia trachomatis")
    assert high.default_multiplier > moderate.default_multiplier
    assert moderate.default_multiplier > low.default_multiplier
    assert high.parameter_key == "high_sepsis_risk_multiplier"


def test_age_group_index_monotonic_and_bounded():
    ages = list(range(0, 365 * 100, 30))
    indices = [age_group_index(age) for age in ages]
    assert indices == sorted(indices)
    assert set(indices) == set(range(len(age_risk_template("flat"))))


def test_age_group_boundaries():
    assert age_group_index(364) < age_group_index(365)
    assert age_group_index(365 * 18 - 1) < age_group_index(365 * 18)
    assert age_group_index(365 * 70) == age_group_index(365 * 120)


def test_unknown_template_is_none():
    assert age_risk_template("no_such_template") is None


def test_templates_share_reference_group():
    reference = age_group_index(365 * 30)
    flat = age_risk_template("flat")
    assert all(value == flat[0] for value in flat)
    for name in TEMPLATE_NAMES:
        template = age_risk_template(name)
        assert len(template) == len(flat)
        assert template[reference] == flat[reference]


def test_sexually_transmitted_peaks_in_young_adults():
    template = age_risk_template("sexually_transmitted")
    assert template[age_group_index(365 * 25)] == max(template)
    assert template[age_group_index(0)] == min(template)