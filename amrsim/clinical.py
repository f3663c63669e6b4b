"""Clinical knowledge tables: drug potency, cross-resistance, sepsis risk and age risk."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

POTENCY_SUFFIX = "potency_when_no_r"
INITIATION_SUFFIX = "initiation_multiplier"
EMERGENCE_SUFFIX = "resistance_emergence_rate_per_day_baseline"

_DEFAULT_INITIATION_MULTIPLIER = 1.0
_DEFAULT_POTENCY = 0.01
_DEFAULT_EMERGENCE_RATE = 0.8

_PENICILLINS = ("penicilling", "ampicillin", "amoxicillin", "piperacillin", "ticarcillin")
_CEPHALOSPORINS_1_2 = ("cephalexin", "cefazolin", "cefuroxime")
_CEPHALOSPORINS_3_4 = ("ceftriaxone", "ceftazidime", "cefepime", "ceftaroline")
_CARBAPENEMS = ("meropenem", "imipenem_c", "ertapenem")
_MACROLIDES = ("erythromycin", "azithromycin", "clarithromycin")
_AMINOGLYCOSIDES = ("gentamicin", "tobramycin", "amikacin")
_FLUOROQUINOLONES = ("ciprofloxacin", "levofloxacin", "moxifloxacin", "ofloxacin")
_GLYCOPEPTIDES = ("vancomycin", "teicoplanin")
_OXAZOLIDINONES = ("linezolid", "tedizolid")

_GRAM_POS_COCCI = (
    "staphylococcus aureus",
    "streptococcus pneumoniae",
    "streptococcus pyogenes",
    "streptococcus agalactiae",
    "enterococcus faecalis",
    "enterococcus faecium",
)
_GRAM_NEG_ENTEROBACTERIA = (
    "escherichia coli",
    "klebsiella pneumoniae",
    "enterobacter spp.",
    "citrobacter spp.",
    "serratia spp.",
    "proteus spp.",
    "morganella spp.",
    "enterobacter_cloacae",
)
_GRAM_NEG_NON_FERMENTING = ("pseudomonas aeruginosa", "acinetobacter baumannii")


def _potency_key(drug: str, bacteria: str) -> str:
    return f"drug_{drug}_for_bacteria_{bacteria}_{POTENCY_SUFFIX}"


def build_potency_parameters(drugs: Iterable[str], bacteria: Iterable[str]) -> dict[str, float]:
    """Build the drug-by-bacteria initiation, potency and emergence parameters.

    Every pair starts with low default potency; clinically informed values then
    override pairs whose drug and bacterium are both in the given lists.
    """
    drugs = tuple(drugs)
    bacteria = tuple(bacteria)
    known_drugs = set(drugs)
    known_bacteria = set(bacteria)

    params: dict[str, float] = {}
    for drug in drugs:
        for bug in bacteria:
            params[f"drug_{drug}_for_bacteria_{bug}_{INITIATION_SUFFIX}"] = _DEFAULT_INITIATION_MULTIPLIER
            params[_potency_key(drug, bug)] = _DEFAULT_POTENCY
            params[f"drug_{drug}_for_bacteria_{bug}_{EMERGENCE_SUFFIX}"] = _DEFAULT_EMERGENCE_RATE

    def set_for(drug_class: Iterable[str], bug: str, potency) -> None:
        for drug in drug_class:
            if drug in known_drugs:
                value = potency(drug) if callable(potency) else potency
                params[_potency_key(drug, bug)] = value

    for bug in _GRAM_POS_COCCI:
        if bug not in known_bacteria:
            continue
        is_strep = "streptococcus" in bug
        is_entero = "enterococcus" in bug
        set_for(_PENICILLINS, bug, 0.18 if is_strep else 0.02)
        set_for(_CEPHALOSPORINS_1_2 + _CEPHALOSPORINS_3_4, bug, 0.01 if is_entero else 0.15)
        set_for(_CARBAPENEMS, bug, 0.05 if is_entero else 0.16)
        set_for(_MACROLIDES, bug, 0.12)
        set_for(_GLYCOPEPTIDES, bug, 0.20)
        set_for(_OXAZOLIDINONES, bug, 0.22)

    for bug in _GRAM_NEG_ENTEROBACTERIA:
        if bug not in known_bacteria:
            continue
        set_for(_PENICILLINS, bug, lambda d: 0.14 if d == "piperacillin" else 0.02)
        set_for(_CEPHALOSPORINS_1_2, bug, 0.08)
        set_for(_CEPHALOSPORINS_3_4, bug, 0.16)
        set_for(_CARBAPENEMS, bug, 0.21)
        set_for(_FLUOROQUINOLONES, bug, 0.17)
        set_for(_AMINOGLYCOSIDES, bug, 0.15)
        set_for(("trim_sulf",), bug, 0.10)

    for bug in _GRAM_NEG_NON_FERMENTING:
        if bug not in known_bacteria:
            continue
        set_for(_PENICILLINS, bug, lambda d: 0.13 if d == "piperacillin" else 0.005)
        set_for(_CEPHALOSPORINS_1_2, bug, 0.005)
        set_for(
            _CEPHALOSPORINS_3_4,
            bug,
            lambda d: 0.14 if d in ("ceftazidime", "cefepime") else 0.02,
        )
        set_for(_CARBAPENEMS, bug, 0.12 if "acinetobacter" in bug else 0.16)
        set_for(_FLUOROQUINOLONES, bug, 0.15)
        set_for(_AMINOGLYCOSIDES, bug, 0.14)

    if "azithromycin" in known_drugs:
        for bug in ("chlamydia trachomatis", "campylobacter_jejuni"):
            if bug in known_bacteria:
                params[_potency_key("azithromycin", bug)] = 0.25

    if "nitrofurantoin" in known_drugs and "escherichia coli" in known_bacteria:
        params[_potency_key("nitrofurantoin", "escherichia coli")] = 0.19

    if "metronidazole" in known_drugs and "clostridioides_difficile" in known_bacteria:
        params[_potency_key("metronidazole", "clostridioides_difficile")] = 0.18

    return params


# Groups of drugs sharing a resistance mechanism, per bacterium.
_CROSS_RESISTANCE_GROUPS: dict[str, tuple[tuple[str, ...], ...]] = {
    "escherichia coli": (
        ("penicilling", "ampicillin", "amoxicillin", "cephalexin", "cefazolin"),
        ("ciprofloxacin", "levofloxacin"),
        ("gentamicin", "tobramycin"),
    ),
    "acinetobacter baumannii": (
        ("penicilling", "ampicillin", "amoxicillin", "cephalexin", "cefazolin", "cefuroxime"),
        ("meropenem", "imipenem_c", "ertapenem"),
        ("ciprofloxacin", "levofloxacin", "moxifloxacin"),
        ("gentamicin", "tobramycin", "amikacin"),
    ),
    "klebsiella pneumoniae": (
        (
            "penicilling",
            "ampicillin",
            "amoxicillin",
            "cephalexin",
            "cefazolin",
            "cefuroxime",
            "ceftriaxone",
        ),
        ("meropenem", "imipenem_c", "ertapenem"),
        ("ciprofloxacin", "levofloxacin"),
    ),
    "streptococcus pneumoniae": (
        ("erythromycin", "azithromycin", "clarithromycin"),
        ("penicilling", "ampicillin", "amoxicillin"),
    ),
    "staphylococcus aureus": (
        ("penicilling", "ampicillin", "amoxicillin"),
        ("cephalexin", "cefazolin", "cefuroxime", "ceftriaxone"),
        ("erythromycin", "azithromycin", "clarithromycin", "clindamycin"),
    ),
    "pseudomonas aeruginosa": (
        ("piperacillin", "ceftazidime", "cefepime"),
        ("meropenem", "imipenem_c"),
        ("ciprofloxacin", "levofloxacin"),
        ("gentamicin", "tobramycin", "amikacin"),
    ),
    "enterobacter spp.": (
        ("ampicillin", "amoxicillin", "cephalexin", "cefazolin", "cefuroxime"),
        ("ceftriaxone", "ceftazidime", "cefepime"),
        ("ciprofloxacin", "levofloxacin"),
    ),
}


def cross_resistance_groups() -> dict[str, tuple[tuple[str, ...], ...]]:
    """Return the mechanism-based cross-resistance drug groups for each bacterium."""
    return dict(_CROSS_RESISTANCE_GROUPS)


class SepsisRisk(Enum):
    """Sepsis risk category of a bacterium, with its parameter key and fallback multiplier."""

    HIGH = ("high_sepsis_risk_multiplier", 2.0)
    MODERATE = ("moderate_sepsis_risk_multiplier", 1.0)
    LOW = ("low_sepsis_risk_multiplier", 0.3)

    def __init__(self, parameter_key: str, default_multiplier: float) -> None:
        self.parameter_key = parameter_key
        self.default_multiplier = default_multiplier


_HIGH_SEPSIS_RISK = frozenset(
    {
        "staphylococcus aureus",
        "pseudomonas aeruginosa",
        "acinetobacter baumannii",
        "enterococcus faecium",
        "streptococcus pneumoniae",
        "enterobacter spp.",
        "klebsiella pneumoniae",
    }
)

_LOW_SEPSIS_RISK = frozenset(
    {
        "chlamydia trachomatis",
        "neisseria gonorrhoeae",
        "campylobacter_jejuni",
        "shigella spp.",
        "moraxella_catarrhalis",
        "haemophilus influenzae",
    }
)


def sepsis_risk_category(bacteria_name: str) -> SepsisRisk:
    """Classify a bacterium as high, moderate or low sepsis risk."""
    if bacteria_name in _HIGH_SEPSIS_RISK:
        return SepsisRisk.HIGH
    if bacteria_name in _LOW_SEPSIS_RISK:
        return SepsisRisk.LOW
    return SepsisRisk.MODERATE


# Upper bounds in years of the age groups 0-1, 1-5, 5-18, 18-50, 50-70; the rest is 70+.
_AGE_GROUP_BOUNDS = (1.0, 5.0, 18.0, 50.0, 70.0)

# Risk multipliers per age group, relative to the 18-50 reference group.
_AGE_RISK_TEMPLATES: dict[str, tuple[float, ...]] = {
    "respiratory": (3.0, 1.8, 0.8, 1.0, 1.3, 2.5),
    "gastrointestinal": (2.5, 2.0, 1.2, 1.0, 1.1, 1.8),
    "urogenital": (1.2, 0.8, 0.9, 1.0, 1.4, 2.2),
    "skin_soft_tissue": (1.5, 1.3, 1.1, 1.0, 1.2, 1.8),
    "bloodstream": (4.0, 2.0, 0.7, 1.0, 1.5, 3.0),
    "vector_borne": (1.8, 1.5, 1.0, 1.0, 1.1, 1.4),
    "sexually_transmitted": (0.1, 0.2, 0.8, 1.0, 0.8, 0.3),
    "flat": (1.0, 1.0, 1.0, 1.0, 1.0, 1.0),
}


def age_group_index(age_days: int) -> int:
    """Return the age-group index (0 to 5) for an age given in days."""
    age_years = age_days / 365.0
    return next(
        (index for index, bound in enumerate(_AGE_GROUP_BOUNDS) if age_years < bound),
        len(_AGE_GROUP_BOUNDS),
    )


def age_risk_template(name: str) -> tuple[float, ...] | None:
    """Return the per-age-group risk multipliers of a named template, or None if unknown."""
    return _AGE_RISK_TEMPLATES.get(name)