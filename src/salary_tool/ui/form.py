"""
Form schema for the salary page.

Validates the raw widget values before anything reaches the engine and
builds the same payload the HTTP endpoint accepts.
"""
from pydantic import BaseModel, Field, field_validator

from ..engine.tables import EDUCATION_LEVELS, LOCATION_TIERS, ROLES

MAX_FORM_YEARS = 40

DEFAULT_FORM = {
    "role": "Software Engineer",
    "years_experience": 3,
    "location_tier": "Tier 2",
    "education": "Bachelor's",
    "skills_csv": "TypeScript, React, AWS",
}


def split_skills(skills_csv: str) -> list[str]:
    """Split a comma-separated field into trimmed, non-empty skills."""
    if not skills_csv:
        return []
    return [s.strip() for s in skills_csv.split(",") if s.strip()]


def _check_choice(value: str, choices: tuple, label: str) -> str:
    if value not in choices:
        raise ValueError(f"{label} must be one of: {', '.join(choices)}")
    return value


class SalaryForm(BaseModel):
    """Validated contents of the salary form."""
    role: str
    years_experience: float = Field(ge=0, le=MAX_FORM_YEARS)
    location_tier: str
    education: str
    skills_csv: str = ""

    @field_validator("role")
    @classmethod
    def _role_choice(cls, v: str) -> str:
        return _check_choice(v, ROLES, "Role")

    @field_validator("location_tier")
    @classmethod
    def _location_choice(cls, v: str) -> str:
        return _check_choice(v, LOCATION_TIERS, "Location tier")

    @field_validator("education")
    @classmethod
    def _education_choice(cls, v: str) -> str:
        return _check_choice(v, EDUCATION_LEVELS, "Education")

    @property
    def skills(self) -> list[str]:
        return split_skills(self.skills_csv)

    def to_payload(self) -> dict:
        """Request body for POST /api/predict."""
        return {
            "role": self.role,
            "yearsExperience": self.years_experience,
            "locationTier": self.location_tier,
            "education": self.education,
            "skills": self.skills,
        }


def format_currency(amount: int, currency: str) -> str:
    """Whole-unit amount with thousands separators, e.g. 'INR 10,458,000'."""
    return f"{currency} {amount:,.0f}"


def range_position(expected: int, low: int, high: int) -> float:
    """Width of the result bar as a percentage, kept within [20, 100]."""
    return min(100.0, max(20.0, (expected - low) / (high - low + 1e-6) * 100))
