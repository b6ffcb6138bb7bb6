"""
Constant lookup tables for the salary engine.

All amounts are in the reference currency (USD) until conversion.
Tables are read-only mappings built once at import.
"""
from types import MappingProxyType

from .errors import ConfigurationGapError


ROLES = (
    "Software Engineer",
    "Data Scientist",
    "Product Manager",
    "Designer",
    "DevOps Engineer",
    "QA Engineer",
)

LOCATION_TIERS = ("Tier 1", "Tier 2", "Tier 3")

EDUCATION_LEVELS = ("High School", "Bachelor's", "Master's", "PhD")

CURRENCY = "INR"

# Static FX for display purposes
USD_TO_INR = 83

ROLE_BASELINE_USD = MappingProxyType({
    "Software Engineer": 90000,
    "Data Scientist": 95000,
    "Product Manager": 105000,
    "Designer": 80000,
    "DevOps Engineer": 100000,
    "QA Engineer": 75000,
})

LOCATION_MULTIPLIERS = MappingProxyType({
    "Tier 1": 1.25,  # SF/NY/London
    "Tier 2": 1.0,   # major cities
    "Tier 3": 0.85,  # smaller markets / remote low COL
})

# Unrecognized tiers price like Tier 3
DEFAULT_LOCATION_MULTIPLIER = LOCATION_MULTIPLIERS["Tier 3"]

EDUCATION_MULTIPLIERS = MappingProxyType({
    "High School": 0.9,
    "Bachelor's": 1.0,
    "Master's": 1.08,
    "PhD": 1.12,
})

PREMIUM_SKILLS = MappingProxyType({
    "Software Engineer": ("system design", "distributed", "rust", "go", "aws", "kubernetes"),
    "Data Scientist": ("ml", "machine learning", "deep learning", "nlp", "pytorch", "tensorflow"),
    "Product Manager": ("growth", "a/b", "analytics", "strategy"),
    "Designer": ("ux research", "motion", "3d", "system"),
    "DevOps Engineer": ("kubernetes", "terraform", "aws", "gcp", "sre"),
    "QA Engineer": ("automation", "cypress", "playwright", "performance"),
})

# Clamp ranges
EXPERIENCE_YEARS_CAP = 30
EXPERIENCE_RANGE = (0.8, 1.8)
SKILLS_RANGE = (0.9, 1.3)
SKILL_BONUS = 0.025
SKILL_BONUS_CAP = 0.15
VARIANCE_RANGE = (0.12, 0.2)


def check_tables(
    roles=ROLES,
    education_levels=EDUCATION_LEVELS,
    role_baseline=ROLE_BASELINE_USD,
    premium_skills=PREMIUM_SKILLS,
    education_multipliers=EDUCATION_MULTIPLIERS,
) -> None:
    """
    Verify every enumerated role and education level has a table entry.

    Raises ConfigurationGapError listing each gap found.
    """
    gaps = []
    for role in roles:
        if role not in role_baseline:
            gaps.append(f"no base value for role '{role}'")
        if role not in premium_skills:
            gaps.append(f"no premium skills for role '{role}'")
    for level in education_levels:
        if level not in education_multipliers:
            gaps.append(f"no multiplier for education '{level}'")

    if gaps:
        raise ConfigurationGapError("Lookup tables incomplete: " + "; ".join(gaps))


check_tables()
