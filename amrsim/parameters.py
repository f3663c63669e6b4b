"""The simulation's parameter set: numeric and string parameters with typed lookups."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from amrsim.clinical import (
    age_group_index,
    age_risk_template,
    build_potency_parameters,
    sepsis_risk_category,
)
from amrsim.regional import Region, build_regional_parameters

DEFAULT_AGE_RISK_TEMPLATE = "respiratory"
DEFAULT_AVAILABILITY_REGION = Region.NORTH_AMERICA.value

# Defaults applied to every bacterium, keyed by parameter suffix.
_BACTERIA_DEFAULTS: dict[str, float] = {
    "acquisition_prob_baseline": 0.001,
    "initial_infection_level": 0.01,
    "environmental_acquisition_proportion": 0.8,
    "hospital_acquired_multiplier": 10.0,
    "adult_contact_acq_rate_ratio_per_unit": 1.0,
    "child_contact_acq_rate_ratio_per_unit": 1.0,
    "oral_exposure_acq_rate_ratio_per_unit": 1.0,
    "sexual_contact_acq_rate_ratio_per_unit": 1.0,
    "mosquito_exposure_acq_rate_ratio_per_unit": 1.0,
    "vaccine_efficacy": 0.0,
    "base_bacteria_level_change": 0.5,
    "max_level": 5.0,
    "immunity_effect_on_level_change": 0.005,
    "immunity_base_response": 0.1,
    "immunity_increase_per_unit_higher_bacteria_level": 0.05,
    "immunity_increase_per_infection_day": 0.05,
    "immunity_age_modifier": 1.0,
    "immunity_immunodeficiency_modifier": 0.1,
    "max_immune_response": 10.0,
    "age_effect_scaling": 1.0,
}

_GENERAL_DRUG_PARAMETERS: dict[str, float] = {
    "drug_base_initiation_rate_per_day": 0.0001,
    "drug_infection_present_multiplier": 50.0,
    "drug_test_identified_multiplier": 50.0,
    "drug_decay_per_day": 1.0,
}

# Elimination half-lives in days.
_HALF_LIVES_DAYS: dict[str, float] = {
    "penicilling": 0.04,
    "ampicillin": 0.04,
    "amoxicillin": 0.04,
    "piperacillin": 0.04,
    "ticarcillin": 0.046,
    "cephalexin": 0.04,
    "cefazolin": 0.08,
    "cefuroxime": 0.05,
    "ceftriaxone": 0.33,
    "ceftazidime": 0.08,
    "cefepime": 0.08,
    "ceftaroline": 0.11,
    "meropenem": 0.04,
    "imipenem_c": 0.04,
    "ertapenem": 0.17,
    "aztreonam": 0.08,
    "erythromycin": 0.08,
    "azithromycin": 2.8,
    "clarithromycin": 0.25,
    "clindamycin": 0.125,
    "gentamicin": 0.08,
    "tobramycin": 0.08,
    "amikacin": 0.08,
    "ciprofloxacin": 0.17,
    "levofloxacin": 0.33,
    "moxifloxacin": 0.5,
    "ofloxacin": 0.25,
    "tetracycline": 0.33,
    "doxyclycline": 0.75,
    "minocycline": 0.67,
    "vancomycin": 0.25,
    "teicoplanin": 3.5,
    "linezolid": 0.21,
    "tedizolid": 0.5,
    "quinu_dalfo": 0.5,
    "trim_sulf": 0.5,
    "chlorampheni": 0.125,
    "nitrofurantoin": 0.017,
    "retapamulin": 0.25,
    "fusidic_a": 0.375,
    "metronidazole": 0.33,
    "furazolidone": 0.25,
}

_GLOBAL_PARAMETERS: dict[str, float] = {
    "already_on_drug_initiation_multiplier": 1.0,
    "double_dose_probability_if_identified_infection": 0.1,
    "immune_decay_rate_per_day": 0.02,
    "random_drug_cessation_probability": 0.03,
    "environmental_majority_r_level_for_new_acquisition": 0.0,
    "hospital_majority_r_level_for_new_acquisition": 0.0,
    "max_resistance_level": 1.0,
    "majority_r_evolution_rate_per_day_when_drug_present": 0.001,
    "resistance_emergence_rate_per_day_baseline": 0.01,
    "microbiome_resistance_emergence_rate_per_day_baseline": 0.005,
    "resistance_emergence_bacteria_level_multiplier": 0.05,
    "any_r_emergence_level_on_first_emergence": 0.5,
    "microbiome_resistance_transfer_probability_per_day": 0.05,
    "test_delay_days": 3.0,
    "test_rate_per_day": 0.20,
    "prob_test_r_done": 0.95,
    "test_r_error_probability": 0.02,
    "test_r_error_value": 0.25,
    "syndrome_3_initiation_multiplier": 10.0,
    "syndrome_7_initiation_multiplier": 8.0,
    "syndrome_8_initiation_multiplier": 12.0,
    "hospitalization_baseline_rate_per_day": 0.00001,
    "hospitalization_age_multiplier_per_day": 0.000001,
    "hospitalization_recovery_rate_per_day": 0.1,
    "hospitalization_max_days": 30.0,
    "travel_probability_per_day": 0.00005,
    "empiric_therapy_broad_spectrum_bonus": 2.0,
    "targeted_therapy_narrow_spectrum_bonus": 3.0,
    "targeted_therapy_broad_spectrum_penalty": 0.4,
    "targeted_therapy_ineffective_drug_penalty": 0.1,
    "default_sepsis_baseline_risk_per_day": 0.00001,
    "default_sepsis_level_multiplier": 0.005,
    "default_sepsis_duration_multiplier": 0.000001,
    "high_sepsis_risk_multiplier": 2.0,
    "moderate_sepsis_risk_multiplier": 1.0,
    "low_sepsis_risk_multiplier": 0.3,
    "base_background_mortality_rate_per_day": 0.00001,
    "age_mortality_multiplier_per_year": 1.01,
    "male_mortality_multiplier": 1.1,
    "female_mortality_multiplier": 0.9,
    "immunosuppressed_mortality_multiplier": 2.5,
    "hospital_mortality_multiplier": 1.3,
    "age_squared_mortality_multiplier": 0.000001,
    "immunosuppression_onset_rate_per_day": 0.0001,
    "immunosuppression_recovery_rate_per_day": 0.0005,
    "base_sepsis_death_risk_per_day": 0.02,
    "sepsis_age_mortality_multiplier_infant": 3.0,
    "sepsis_age_mortality_multiplier_child": 0.5,
    "sepsis_age_mortality_multiplier_adult": 1.0,
    "sepsis_age_mortality_multiplier_elderly": 2.5,
    "sepsis_immunosuppressed_multiplier": 3.0,
    "default_drug_toxicity_per_unit_level_per_day": 0.005,
    "default_microbiome_acquisition_multiplier": 2.0,
    "default_microbiome_clearance_probability_per_day": 0.01,
    "default_microbiome_infection_acquisition_multiplier": 0.1,
    "contact_level_daily_fluctuation_range": 0.5,
    "min_contact_level": 0.0,
    "max_contact_level": 10.0,
    "sexual_contact_baseline": 5.0,
    "sexual_contact_age_peak_days": 25.0 * 365.0,
    "sexual_contact_age_rise_exponent": 2.0,
    "sexual_contact_age_decline_rate": 0.00005,
    "sexual_contact_hospital_multiplier": 0.0,
    "airborne_contact_adult_baseline": 5.0,
    "airborne_contact_adult_age_breakpoint_days": 18.0 * 365.0,
    "airborne_contact_adult_child_multiplier": 0.2,
    "airborne_contact_in_hospital_multiplier": 1.5,
    "airborne_contact_child_baseline": 3.0,
    "airborne_contact_child_age_breakpoint_days": 12.0 * 365.0,
    "airborne_contact_child_child_multiplier": 1.5,
    "airborne_contact_child_adult_multiplier": 0.5,
    "oral_exposure_baseline": 2.0,
    "oral_exposure_child_age_breakpoint_days": 5.0 * 365.0,
    "oral_exposure_child_multiplier": 3.0,
    "oral_exposure_in_hospital_multiplier": 0.8,
    "mosquito_exposure_baseline": 1.0,
    "mosquito_exposure_in_hospital_multiplier": 0.2,
}

# Per-drug defaults, keyed by parameter suffix.
_DRUG_DEFAULTS: dict[str, float] = {
    "initial_level": 10.0,
    "double_dose_multiplier": 2.0,
    "spectrum_breadth": 3.0,
}

# Spectrum breadth from 1.0 (narrow) to 5.0 (very broad).
_SPECTRUM_BREADTH: dict[str, float] = {
    "penicilling": 2.0,
    "amoxicillin": 3.0,
    "azithromycin": 4.0,
    "ciprofloxacin": 4.5,
    "trim_sulf": 3.5,
    "meropenem": 5.0,
    "cefepime": 4.0,
    "vancomycin": 2.5,
    "linezolid": 2.0,
    "ceftriaxone": 4.0,
}

_AGE_RISK_TEMPLATE_OVERRIDES: dict[str, str] = {
    "strep_pneu": "respiratory",
    "haem_infl": "respiratory",
    "salm_typhi": "gastrointestinal",
    "esch_coli": "urogenital",
    "pseud_aerug": "bloodstream",
    "staph_aureus": "skin_soft_tissue",
    "n_gonorrhoeae": "sexually_transmitted",
    "acinetobac_bau": "bloodstream",
}


def build_numeric_parameters(bacteria: Iterable[str], drugs: Iterable[str]) -> dict[str, float]:
    """Build every numeric simulation parameter for the given bacteria and drugs."""
    bacteria = tuple(bacteria)
    drugs = tuple(drugs)
    params: dict[str, float] = {}

    for bug in bacteria:
        for suffix, value in _BACTERIA_DEFAULTS.items():
            params[f"{bug}_{suffix}"] = value

    params.update(_GENERAL_DRUG_PARAMETERS)
    for drug, half_life in _HALF_LIVES_DAYS.items():
        params[f"drug_{drug}_half_life_days"] = half_life

    params.update(build_potency_parameters(drugs, bacteria))
    params.update(_GLOBAL_PARAMETERS)

    for drug in drugs:
        for suffix, value in _DRUG_DEFAULTS.items():
            params[f"drug_{drug}_{suffix}"] = value
    for drug, breadth in _SPECTRUM_BREADTH.items():
        params[f"drug_{drug}_spectrum_breadth"] = breadth

    params.update(build_regional_parameters(drugs))
    return params


def build_string_parameters(bacteria: Iterable[str]) -> dict[str, str]:
    """Build the string parameters: the age-risk template assigned to each bacterium."""
    params = {f"{bug}_age_risk_template": DEFAULT_AGE_RISK_TEMPLATE for bug in bacteria}
    for name, template in _AGE_RISK_TEMPLATE_OVERRIDES.items():
        params[f"{name}_age_risk_template"] = template
    return params


class ParameterSet(Mapping):
    """Numeric and string simulation parameters for a given set of bacteria and drugs.

    Behaves as a read-only mapping of the numeric parameters.
    """

    def __init__(self, bacteria: Iterable[str], drugs: Iterable[str]) -> None:
        self.bacteria = tuple(bacteria)
        self.drugs = tuple(drugs)
        self._numeric = build_numeric_parameters(self.bacteria, self.drugs)
        self._strings = build_string_parameters(self.bacteria)

    def __getitem__(self, key: str) -> float:
        return self._numeric[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._numeric)

    def __len__(self) -> int:
        return len(self._numeric)

    def global_param(self, key: str) -> float | None:
        """Return a numeric parameter by its full key, or None if absent."""
        return self._numeric.get(key)

    def bacteria_param(self, bacteria_name: str, suffix: str) -> float | None:
        """Return ``{bacteria_name}_{suffix}``, or None if absent."""
        return self._numeric.get(f"{bacteria_name}_{suffix}")

    def drug_param(self, drug_name: str, suffix: str) -> float | None:
        """Return ``drug_{drug_name}_{suffix}``, or None if absent."""
        return self._numeric.get(f"drug_{drug_name}_{suffix}")

    def string_param(self, key: str) -> str | None:
        """Return a string parameter by key, or None if absent."""
        return self._strings.get(key)

    def drug_availability(
        self,
        drug_name: str,
        region: Region | str,
        region_living: Region | str | None = None,
    ) -> float:
        """Return the availability (0.0 to 1.0) of a drug in a region.

        The home region resolves to ``region_living``, or to North America when
        that is not given. Unlisted combinations count as fully available.
        """
        region_name = region.value if isinstance(region, Region) else region
        if region_name == Region.HOME.value:
            if region_living is None:
                region_name = DEFAULT_AVAILABILITY_REGION
            elif isinstance(region_living, Region):
                region_name = region_living.value
            else:
                region_name = region_living
        return self._numeric.get(f"{region_name}_drug_{drug_name}_availability", 1.0)

    def age_infection_multiplier(self, bacteria_name: str, age_days: int) -> float:
        """Return the age-dependent infection-risk multiplier for a bacterium.

        The template's deviation from 1.0 is scaled by the bacterium's
        ``age_effect_scaling``; an unknown template gives 1.0.
        """
        template_name = self.string_param(f"{bacteria_name}_age_risk_template")
        if template_name is None:
            template_name = DEFAULT_AGE_RISK_TEMPLATE
        scaling = self.bacteria_param(bacteria_name, "age_effect_scaling")
        if scaling is None:
            scaling = 1.0
        template = age_risk_template(template_name)
        if template is None:
            return 1.0
        base = template[age_group_index(age_days)]
        return 1.0 + (base - 1.0) * scaling

    def sepsis_risk_multiplier(self, bacteria_name: str) -> float:
        """Return the sepsis-risk multiplier of the bacterium's risk category."""
        category = sepsis_risk_category(bacteria_name)
        value = self.global_param(category.parameter_key)
        return category.default_multiplier if value is None else value