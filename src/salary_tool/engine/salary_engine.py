"""
Salary Engine - deterministic salary estimation with traceability.

Resolution order:
1. Look up the role base value (USD)
2. Apply experience, location, education and skills multipliers
3. Derive the range variance from experience
4. Convert to INR and round expected/low/high and the breakdown

The engine is a pure function over constant tables: no I/O, no shared
mutable state, safe to call concurrently.
"""
import math
from typing import Iterable, Optional

from ..utils.logger import get_logger
from .errors import UnsupportedProfileError
from .models import Breakdown, Explanation, PredictionResult, Profile, TraceStep
from .tables import (
    CURRENCY,
    DEFAULT_LOCATION_MULTIPLIER,
    EDUCATION_MULTIPLIERS,
    EXPERIENCE_RANGE,
    EXPERIENCE_YEARS_CAP,
    LOCATION_MULTIPLIERS,
    PREMIUM_SKILLS,
    ROLE_BASELINE_USD,
    SKILL_BONUS,
    SKILL_BONUS_CAP,
    SKILLS_RANGE,
    USD_TO_INR,
    VARIANCE_RANGE,
)

logger = get_logger(__name__)


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def round_half_up(value: float) -> int:
    """Round to nearest integer, ties toward +infinity."""
    return int(math.floor(value + 0.5))


def base_salary(role: str) -> int:
    """Reference-currency base value for a role."""
    try:
        return ROLE_BASELINE_USD[role]
    except KeyError:
        raise UnsupportedProfileError("role", role) from None


def experience_multiplier(years_experience: float) -> float:
    """0 yrs = 0.9x, 10 yrs = ~1.5x, saturates at 1.8x from ~11 yrs."""
    y = clamp(years_experience, 0, EXPERIENCE_YEARS_CAP)
    return clamp(0.9 + math.log2(1 + y) * 0.25, *EXPERIENCE_RANGE)


def location_multiplier(location_tier: str) -> float:
    return LOCATION_MULTIPLIERS.get(location_tier, DEFAULT_LOCATION_MULTIPLIER)


def education_multiplier(education: str) -> float:
    try:
        return EDUCATION_MULTIPLIERS[education]
    except (KeyError, TypeError):
        raise UnsupportedProfileError("education", education) from None


def count_premium_skills(skills: Iterable[str], role: str) -> int:
    """
    Count skills that contain at least one premium substring for the role.

    A skill matching several substrings still counts once; a skill listed
    twice counts twice.
    """
    premium = PREMIUM_SKILLS.get(role)
    if premium is None:
        raise UnsupportedProfileError("role", role)

    normalized = [s.strip().lower() for s in skills]
    return sum(1 for s in normalized if any(p in s for p in premium))


def skills_multiplier(skills: Iterable[str], role: str) -> float:
    """Each premium skill adds 2.5%, capped at +15%."""
    skills = list(skills)
    if not skills:
        return 1.0
    matches = count_premium_skills(skills, role)
    return clamp(1 + min(matches * SKILL_BONUS, SKILL_BONUS_CAP), *SKILLS_RANGE)


def variance_for(years_experience: float) -> float:
    """Range half-width: ±15%, widened up to ±20% below 5 years."""
    return clamp(0.15 + (5 - min(years_experience, 5)) * 0.01, *VARIANCE_RANGE)


def _resolve(profile: Profile, trace: Optional[list] = None) -> PredictionResult:
    """Compute the prediction, appending TraceStep records when a list is given."""
    def add_trace(step, description, value=None):
        if trace is not None:
            trace.append(TraceStep(step=step, description=description, value=value))

    base = base_salary(profile.role)
    add_trace("Role Base", f"Base salary for {profile.role}", f"${base:,} USD")

    exp_mul = experience_multiplier(profile.years_experience)
    add_trace("Experience", f"{profile.years_experience:g} years", f"×{exp_mul:.4f}")

    loc_mul = location_multiplier(profile.location_tier)
    if profile.location_tier in LOCATION_MULTIPLIERS:
        add_trace("Location", f"{profile.location_tier}", f"×{loc_mul:.2f}")
    else:
        add_trace("Location", f"Unrecognized tier '{profile.location_tier}', using Tier 3", f"×{loc_mul:.2f}")

    edu_mul = education_multiplier(profile.education)
    add_trace("Education", f"{profile.education}", f"×{edu_mul:.2f}")

    skl_mul = skills_multiplier(profile.skills, profile.role)
    if profile.skills:
        matches = count_premium_skills(profile.skills, profile.role)
        add_trace("Skills", f"{matches} of {len(profile.skills)} skills are premium", f"×{skl_mul:.3f}")
    else:
        add_trace("Skills", "No skills listed", f"×{skl_mul:.3f}")

    expected_usd = base * exp_mul * loc_mul * edu_mul * skl_mul
    add_trace("Expected", "Base × all multipliers", f"${expected_usd:,.2f} USD")

    variance = variance_for(profile.years_experience)
    add_trace("Range", "Variance around expected", f"±{variance:.0%}")

    result = PredictionResult(
        currency=CURRENCY,
        low=round_half_up(expected_usd * (1 - variance) * USD_TO_INR),
        high=round_half_up(expected_usd * (1 + variance) * USD_TO_INR),
        expected=round_half_up(expected_usd * USD_TO_INR),
        breakdown=Breakdown(
            base_by_role=round_half_up(base * USD_TO_INR),
            experience_adjustment=round_half_up(base * (exp_mul - 1) * USD_TO_INR),
            location_adjustment=round_half_up(base * (loc_mul - 1) * USD_TO_INR),
            education_adjustment=round_half_up(base * (edu_mul - 1) * USD_TO_INR),
            skills_adjustment=round_half_up(base * (skl_mul - 1) * USD_TO_INR),
        ),
    )
    add_trace("Conversion", f"USD → {CURRENCY} at {USD_TO_INR}", f"{result.expected:,} {CURRENCY}")
    return result


def predict_salary(profile: Profile) -> PredictionResult:
    """
    Estimate the salary range for a profile.

    Args:
        profile: Profile with an enumerated role and education level

    Returns:
        PredictionResult in INR with a per-factor breakdown

    Raises:
        UnsupportedProfileError: role or education has no table entry
    """
    result = _resolve(profile)
    logger.debug(
        "Predicted %s for %s (%s yrs, %s, %s): %s [%s-%s]",
        result.currency, profile.role, profile.years_experience,
        profile.location_tier, profile.education,
        result.expected, result.low, result.high,
    )
    return result


def explain_salary(profile: Profile) -> Explanation:
    """Estimate the salary range and record every resolution step."""
    trace = []
    result = _resolve(profile, trace)
    return Explanation(result=result, trace=trace)
