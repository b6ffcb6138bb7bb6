"""
Request-body normalization for the predict endpoint.

Turns a raw JSON body into a Profile. Only structural checks happen here;
enumeration checks for role and education are left to the engine.
"""
import json
import math
from typing import Any, Optional

from ..engine.errors import InvalidPayloadError, MalformedRequestError
from ..engine.models import Profile


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_body(raw: bytes) -> Any:
    """Decode a request body as strict JSON (no NaN or Infinity literals)."""
    if not raw or not raw.strip():
        raise MalformedRequestError()
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        raise MalformedRequestError() from None


def coerce_years(value: Any) -> float:
    """
    Coerce a number-like value to years of experience.

    Numbers pass through, numeric strings are parsed, booleans map to 0/1.
    Integers too large for a float become +/-infinity. Anything else
    (null, empty or unparsable strings, NaN) becomes 0.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        try:
            years = float(value)
        except OverflowError:
            # Integers beyond float range saturate like any huge value
            years = math.inf if value > 0 else -math.inf
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            years = float(text)
        except ValueError:
            return 0.0
    else:
        return 0.0

    if math.isnan(years):
        return 0.0
    return years


def coerce_skills(value: Any) -> tuple[str, ...]:
    """Keep string entries of a list; anything that is not a list is empty."""
    if not isinstance(value, list):
        return ()
    return tuple(s for s in value if isinstance(s, str))


def _is_missing(value: Any) -> bool:
    """Absent, null, false, zero or empty string; lists and objects count as present."""
    if value is None or value == "":
        return True
    return isinstance(value, (int, float)) and value == 0


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return str(value)


def profile_from_payload(body: Any) -> Profile:
    """
    Build a Profile from a decoded JSON body.

    Raises:
        InvalidPayloadError: body is not an object, role is missing or
            empty, or yearsExperience is missing
    """
    if not isinstance(body, dict) or _is_missing(body.get('role')) or 'yearsExperience' not in body:
        raise InvalidPayloadError()

    return Profile(
        role=_as_text(body['role']),
        years_experience=coerce_years(body['yearsExperience']),
        location_tier=_as_text(body.get('locationTier')),
        education=_as_text(body.get('education')),
        skills=coerce_skills(body.get('skills')),
    )
