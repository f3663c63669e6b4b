# amrsim

Parameter tables for an individual-based model of bacterial infection,
antibiotic treatment and antimicrobial resistance.

The package builds the model's numeric and string parameters for a given
list of bacteria and drugs: acquisition and immunity settings per
bacterium, drug half-lives, potencies and spectrum breadths,
cross-resistance groups, regional drug availability and infection risk,
age-based risk templates, sepsis risk categories, mortality, testing,
hospitalisation and contact-level settings.

## Installation

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Usage

```python
from amrsim.parameters import ParameterSet

params = ParameterSet(
    bacteria=["escherichia coli", "staphylococcus aureus"],
    drugs=["amoxicillin", "ciprofloxacin", "meropenem"],
)

params.global_param("test_delay_days")                      # 3.0
params.bacteria_param("escherichia coli", "max_level")      # 5.0
params.drug_param("ciprofloxacin", "half_life_days")        # 0.17
params.drug_availability("meropenem", "africa", None)       # 0.2
params.age_infection_multiplier("escherichia coli", 200)    # 3.0 (infant, respiratory template)
params.sepsis_risk_multiplier("staphylococcus aureus")      # 2.0
```

`ParameterSet` is a read-only mapping of the numeric parameters, so
`params["test_delay_days"]` works too and raises `KeyError` for a key
that is not there. The lookup methods `global_param`, `bacteria_param`,
`drug_param` and `string_param` return `None` instead.
`drug_availability` falls back to full availability (1.0) for an
unlisted region and drug, and the `home` region resolves to the
`region_living` argument, or to North America when that is not given.
`age_infection_multiplier` scales the template's deviation from 1.0 by
the bacterium's `age_effect_scaling`.

Other building blocks:

- `amrsim.clinical` – drug-by-bacterium potency defaults
  (`build_potency_parameters`), mechanism-based `cross_resistance_groups()`,
  `sepsis_risk_category` with the `SepsisRisk` enum, `age_group_index`
  (six groups: 0–1, 1–5, 5–18, 18–50, 50–70 and 70+ years) and
  `age_risk_template`.
- `amrsim.regional` – the `Region` enum, `drug_availability_for_region`,
  `infection_risk_multiplier` and `build_regional_parameters`.
- `amrsim.parameters` – `build_numeric_parameters`,
  `build_string_parameters` and the `ParameterSet` that wraps them.

## What this package does not do

It holds the parameters only. There is no population, no day-by-day
simulation loop and no command to run one or to report deaths and
resistance; those are for code built on top of these tables.