"""Region-dependent parameters: travel, mortality, exposure, infection risk and drug access."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum


class Region(Enum):
    """A world region; ``HOME`` stands for the individual's region of residence."""

    NORTH_AMERICA = "north_america"
    SOUTH_AMERICA = "south_america"
    AFRICA = "africa"
    ASIA = "asia"
    EUROPE = "europe"
    OCEANIA = "oceania"
    HOME = "home"

    @property
    def is_geographic(self) -> bool:
        """True for every region other than ``HOME``."""
        return self is not Region.HOME


_GEOGRAPHIC = tuple(region for region in Region if region.is_geographic)

# Outbound travel: higher-income regions travel more.
_TRAVEL_MULTIPLIERS: dict[Region, float] = {
    Region.NORTH_AMERICA: 3.0,
    Region.EUROPE: 3.5,
    Region.OCEANIA: 2.5,
    Region.ASIA: 1.5,
    Region.SOUTH_AMERICA: 0.8,
    Region.AFRICA: 0.3,
}

_MORTALITY_MULTIPLIERS: dict[Region, float] = {
    Region.NORTH_AMERICA: 1.0,
    Region.SOUTH_AMERICA: 1.0,
    Region.AFRICA: 1.2,
    Region.ASIA: 1.1,
    Region.EUROPE: 0.9,
    Region.OCEANIA: 1.0,
}

# Reflects quality of intensive care.
_SEPSIS_MORTALITY_MULTIPLIERS: dict[Region, float] = {
    Region.NORTH_AMERICA: 0.8,
    Region.EUROPE: 0.7,
    Region.OCEANIA: 0.8,
    Region.ASIA: 1.2,
    Region.SOUTH_AMERICA: 1.4,
    Region.AFRICA: 2.0,
}

_MOSQUITO_EXPOSURE_MULTIPLIERS: dict[Region, float] = {
    Region.NORTH_AMERICA: 0.5,
    Region.SOUTH_AMERICA: 5.0,
    Region.AFRICA: 8.0,
    Region.ASIA: 6.0,
    Region.EUROPE: 0.2,
    Region.OCEANIA: 3.0,
}

HOME_INFECTION_RISK_DEFAULT_KEY = "home_infection_risk_multiplier_default"
_HOME_INFECTION_RISK_DEFAULT = 1.0


def _risk_row(
    north_america: float,
    south_america: float,
    africa: float,
    asia: float,
    europe: float,
    oceania: float,
) -> dict[Region, float]:
    return {
        Region.NORTH_AMERICA: north_america,
        Region.SOUTH_AMERICA: south_america,
        Region.AFRICA: africa,
        Region.ASIA: asia,
        Region.EUROPE: europe,
        Region.OCEANIA: oceania,
    }


# Keyed by bacterium name with spaces replaced by underscores.
_INFECTION_RISK: dict[str, dict[Region, float]] = {
    "acinetobacter_baumannii": _risk_row(0.8, 1.5, 2.0, 1.8, 0.9, 1.0),
    "citrobacter_spp.": _risk_row(0.9, 1.4, 1.8, 1.6, 0.8, 1.1),
    "enterobacter_spp.": _risk_row(1.0, 1.3, 1.7, 1.5, 0.9, 1.0),
    "enterococcus_faecalis": _risk_row(1.1, 1.0, 0.9, 1.0, 1.2, 1.1),
    "enterococcus_faecium": _risk_row(1.3, 1.0, 0.7, 1.1, 1.4, 1.2),
    "escherichia_coli": _risk_row(0.9, 1.3, 1.6, 1.4, 0.8, 1.0),
    "klebsiella_pneumoniae": _risk_row(0.9, 1.4, 1.8, 1.6, 0.8, 1.1),
    "pseudomonas_aeruginosa": _risk_row(1.1, 1.3, 1.0, 1.2, 1.0, 1.2),
    "staphylococcus_aureus": _risk_row(0.9, 1.2, 1.5, 1.3, 0.8, 1.0),
    "streptococcus_pneumoniae": _risk_row(1.1, 1.0, 1.4, 1.2, 1.2, 1.0),
    "salmonella_enterica_serovar_typhi": _risk_row(0.2, 2.0, 5.0, 4.0, 0.1, 0.8),
    "salmonella_enterica_serovar_paratyphi_a": _risk_row(0.3, 1.8, 3.5, 4.5, 0.2, 1.0),
    "invasive_non-typhoidal_salmonella_spp.": _risk_row(0.5, 1.2, 8.0, 1.5, 0.3, 1.0),
    "shigella_spp.": _risk_row(0.6, 1.8, 3.0, 2.5, 0.4, 1.0),
    "neisseria_gonorrhoeae": _risk_row(1.2, 1.1, 2.0, 0.8, 0.9, 1.3),
    "vibrio_cholerae": _risk_row(0.1, 2.5, 6.0, 4.0, 0.05, 1.5),
    "chlamydia_trachomatis": _risk_row(1.3, 1.0, 1.8, 0.7, 1.1, 1.4),
    "campylobacter_jejuni": _risk_row(0.8, 1.5, 2.2, 1.8, 0.9, 1.1),
    "morganella_spp.": _risk_row(1.0, 1.2, 1.4, 1.3, 0.9, 1.0),
    "proteus_spp.": _risk_row(0.9, 1.3, 1.6, 1.4, 0.8, 1.0),
    "serratia_spp.": _risk_row(1.0, 1.3, 1.5, 1.4, 0.9, 1.0),
}

# Drug availability: 1.0 fully available, 0.0 not available.
_AFRICA_AVAILABILITY: dict[str, float] = {
    "penicilling": 1.0,
    "ampicillin": 1.0,
    "amoxicillin": 1.0,
    "cephalexin": 0.9,
    "cefazolin": 0.9,
    "cefuroxime": 0.7,
    "ceftriaxone": 0.6,
    "ceftazidime": 0.4,
    "erythromycin": 0.8,
    "azithromycin": 0.8,
    "ciprofloxacin": 0.7,
    "levofloxacin": 0.5,
    "gentamicin": 0.8,
    "tobramycin": 0.4,
    "amikacin": 0.4,
    "tetracycline": 0.9,
    "doxyclycline": 0.9,
    "trim_sulf": 0.9,
    "chlorampheni": 0.8,
    "metronidazole": 0.9,
    "vancomycin": 0.3,
    "meropenem": 0.2,
    "imipenem_c": 0.2,
    "ertapenem": 0.1,
    "linezolid": 0.1,
    "tedizolid": 0.0,
    "ceftaroline": 0.0,
    "teicoplanin": 0.0,
    "aztreonam": 0.1,
    "cefepime": 0.3,
    "moxifloxacin": 0.2,
    "minocycline": 0.4,
    "quinu_dalfo": 0.1,
    "nitrofurantoin": 0.6,
    "retapamulin": 0.2,
    "fusidic_a": 0.2,
    "furazolidone": 0.3,
}

_AVAILABILITY: dict[Region, tuple[Mapping[str, float], float]] = {
    Region.NORTH_AMERICA: ({}, 1.0),
    Region.EUROPE: ({}, 1.0),
    Region.ASIA: ({"tedizolid": 0.3, "ceftaroline": 0.3, "teicoplanin": 0.7}, 1.0),
    Region.OCEANIA: ({"tedizolid": 0.5, "ceftaroline": 0.5}, 1.0),
    Region.SOUTH_AMERICA: (
        {
            "tedizolid": 0.1,
            "ceftaroline": 0.1,
            "teicoplanin": 0.3,
            "linezolid": 0.5,
            "ertapenem": 0.6,
            "meropenem": 0.7,
            "imipenem_c": 0.7,
            "cefepime": 0.8,
        },
        1.0,
    ),
    Region.AFRICA: (_AFRICA_AVAILABILITY, 0.1),
    Region.HOME: ({}, 1.0),
}


def drug_availability_for_region(region: Region | str, drug: str) -> float:
    """Return how available a drug is in a region (0.0 to 1.0).

    ``HOME`` has a flat fallback of full availability; callers resolve it to the
    region of residence where that is known.
    """
    overrides, default = _AVAILABILITY[Region(region)]
    return overrides.get(drug, default)


def _risk_name(bacteria_name: str) -> str:
    return bacteria_name.replace(" ", "_")


def infection_risk_multiplier(region: Region | str, bacteria_name: str) -> float:
    """Return the regional infection-risk multiplier for a bacterium.

    Falls back to the home default for ``HOME`` and for unlisted combinations.
    """
    region = Region(region)
    row = _INFECTION_RISK.get(_risk_name(bacteria_name), {})
    return row.get(region, _HOME_INFECTION_RISK_DEFAULT)


def build_regional_parameters(drugs: Iterable[str]) -> dict[str, float]:
    """Build every region-keyed numeric parameter for the given drugs."""
    drugs = tuple(drugs)
    params: dict[str, float] = {}

    for region, value in _TRAVEL_MULTIPLIERS.items():
        params[f"{region.value}_travel_multiplier"] = value
    for region, value in _MORTALITY_MULTIPLIERS.items():
        params[f"{region.value}_mortality_multiplier"] = value
    for region, value in _SEPSIS_MORTALITY_MULTIPLIERS.items():
        params[f"{region.value}_sepsis_mortality_multiplier"] = value
    for region, value in _MOSQUITO_EXPOSURE_MULTIPLIERS.items():
        params[f"{region.value}_mosquito_exposure_multiplier"] = value

    for bacteria_key, row in _INFECTION_RISK.items():
        for region, value in row.items():
            params[f"{region.value}_{bacteria_key}_infection_risk_multiplier"] = value
    params[HOME_INFECTION_RISK_DEFAULT_KEY] = _HOME_INFECTION_RISK_DEFAULT

    for region in (*_GEOGRAPHIC, Region.HOME):
        for drug in drugs:
            params[f"{region.value}_drug_{drug}_availability"] = drug_availability_for_region(
                region, drug
            )

    return params