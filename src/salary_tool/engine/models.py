"""
Data models for the salary engine.

Uses frozen dataclasses so a profile or a result can be shared freely.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class TraceStep:
    """A single step in the salary resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class Profile:
    """An employee profile to estimate a salary for."""
    role: str
    years_experience: float
    location_tier: Optional[str]
    education: Optional[str]
    skills: tuple[str, ...] = ()

    def __post_init__(self):
        # Accept any iterable of skills, store as tuple
        object.__setattr__(self, 'skills', tuple(self.skills))


@dataclass(frozen=True)
class Breakdown:
    """Per-factor adjustments, each rounded independently (non-additive)."""
    base_by_role: int
    experience_adjustment: int
    location_adjustment: int
    education_adjustment: int
    skills_adjustment: int

    def to_dict(self) -> dict:
        return {
            "baseByRole": self.base_by_role,
            "experienceAdjustment": self.experience_adjustment,
            "locationAdjustment": self.location_adjustment,
            "educationAdjustment": self.education_adjustment,
            "skillsAdjustment": self.skills_adjustment,
        }


@dataclass(frozen=True)
class PredictionResult:
    """Complete result of a salary estimate."""
    currency: str
    low: int
    high: int
    expected: int
    breakdown: Breakdown

    def to_dict(self) -> dict:
        """Convert to the JSON response shape."""
        return {
            "currency": self.currency,
            "low": self.low,
            "high": self.high,
            "expected": self.expected,
            "breakdown": self.breakdown.to_dict(),
        }


@dataclass(frozen=True)
class Explanation:
    """A result together with the steps that produced it."""
    result: PredictionResult
    trace: list[TraceStep] = field(default_factory=list)

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)
