import json
import os
import sys

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from fastapi.testclient import TestClient

from salary_tool.api.main import app
from salary_tool.api.payload import coerce_skills, coerce_years, parse_body, profile_from_payload
from salary_tool.engine.errors import InvalidPayloadError, MalformedRequestError


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


VALID_BODY = {
    "role": "Software Engineer",
    "yearsExperience": 3,
    "locationTier": "Tier 2",
    "education": "Bachelor's",
    "skills": [],
}


def post_raw(client, content):
    return client.post("/api/predict", content=content, headers={"Content-Type": "application/json"})


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "online"


def test_options(client):
    r = client.get("/api/options")
    assert r.status_code == 200
    body = r.json()
    assert len(body["roles"]) == 6
    assert body["location_tiers"] == ["Tier 1", "Tier 2", "Tier 3"]
    assert body["education_levels"] == ["High School", "Bachelor's", "Master's", "PhD"]
    assert body["currency"] == "INR"


def test_predict_valid(client):
    r = client.post("/api/predict", json=VALID_BODY)
    assert r.status_code == 200
    assert r.json() == {
        "currency": "INR",
        "low": 8680140,
        "high": 12235860,
        "expected": 10458000,
        "breakdown": {
            "baseByRole": 7470000,
            "experienceAdjustment": 2988000,
            "locationAdjustment": 0,
            "educationAdjustment": 0,
            "skillsAdjustment": 0,
        },
    }


def test_predict_skills_default_to_empty(client):
    body = {k: v for k, v in VALID_BODY.items() if k != "skills"}
    r = client.post("/api/predict", json=body)
    assert r.status_code == 200
    assert r.json()["expected"] == 10458000


@pytest.mark.parametrize("content", [
    "{not json",
    "",
    "   ",
    '{"role": "Designer", "yearsExperience": Infinity}',
    '{"role": "Designer", "yearsExperience": -Infinity}',
    '{"role": "Designer", "yearsExperience": NaN}',
])
def test_predict_malformed_json(client, content):
    r = post_raw(client, content)
    assert r.status_code == 400
    assert r.json() == {"error": "Malformed JSON"}


@pytest.mark.parametrize("body", [
    {"yearsExperience": 3},
    {"role": "Designer"},
    {"role": "", "yearsExperience": 3},
    [1, 2, 3],
    None,
])
def test_predict_invalid_payload(client, body):
    r = post_raw(client, json.dumps(body))
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid payload"}


def test_predict_unknown_location_tolerated(client):
    r = client.post("/api/predict", json={**VALID_BODY, "locationTier": "Mars"})
    assert r.status_code == 200
    tier3 = client.post("/api/predict", json={**VALID_BODY, "locationTier": "Tier 3"}).json()
    assert r.json() == tier3


def test_predict_unknown_role_rejected(client):
    r = client.post("/api/predict", json={**VALID_BODY, "role": "Astronaut"})
    assert r.status_code == 400
    assert r.json() == {"error": "Unsupported role: Astronaut"}


def test_predict_missing_education_rejected(client):
    body = {k: v for k, v in VALID_BODY.items() if k != "education"}
    r = client.post("/api/predict", json=body)
    assert r.status_code == 400
    assert r.json()["error"].startswith("Unsupported education")


def test_predict_years_as_string(client):
    as_number = client.post("/api/predict", json=VALID_BODY).json()
    as_string = client.post("/api/predict", json={**VALID_BODY, "yearsExperience": "3"}).json()
    assert as_string == as_number


def test_predict_huge_integer_years_saturates(client):
    huge = post_raw(client, '{"role": "Software Engineer", "yearsExperience": ' + "9" * 400 + ', "locationTier": "Tier 2", "education": "Bachelor\'s"}')
    thirty = client.post("/api/predict", json={**VALID_BODY, "yearsExperience": 30})
    assert huge.status_code == 200
    assert huge.json() == thirty.json()


@pytest.mark.parametrize("role, message", [
    ([], "Unsupported role: []"),
    ({"title": "SE"}, "Unsupported role: {'title': 'SE'}"),
    (7, "Unsupported role: 7"),
])
def test_predict_non_string_role_reaches_engine(client, role, message):
    r = client.post("/api/predict", json={**VALID_BODY, "role": role})
    assert r.status_code == 400
    assert r.json() == {"error": message}


@pytest.mark.parametrize("role", [0, False])
def test_predict_falsy_role_is_missing(client, role):
    r = client.post("/api/predict", json={**VALID_BODY, "role": role})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid payload"}


def test_predict_unparsable_years_treated_as_zero(client):
    zero = client.post("/api/predict", json={**VALID_BODY, "yearsExperience": 0}).json()
    junk = client.post("/api/predict", json={**VALID_BODY, "yearsExperience": "abc"}).json()
    null = client.post("/api/predict", json={**VALID_BODY, "yearsExperience": None}).json()
    assert junk == zero
    assert null == zero


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("value, expected", [
    (3, 3.0),
    (2.5, 2.5),
    ("7", 7.0),
    (" 12 ", 12.0),
    ("", 0.0),
    ("ten", 0.0),
    (None, 0.0),
    (True, 1.0),
    (False, 0.0),
    (float("nan"), 0.0),
    ([4], 0.0),
    (10 ** 400, float("inf")),
    (-(10 ** 400), float("-inf")),
    ("1e999", float("inf")),
])
def test_coerce_years(value, expected):
    assert coerce_years(value) == expected


def test_coerce_skills():
    assert coerce_skills(["aws", 3, None, "go"]) == ("aws", "go")
    assert coerce_skills("aws, go") == ()
    assert coerce_skills(None) == ()


def test_parse_body():
    assert parse_body(b'{"role": "Designer"}') == {"role": "Designer"}
    with pytest.raises(MalformedRequestError):
        parse_body(b"")
    with pytest.raises(MalformedRequestError):
        parse_body(b"\xff\xfe{")


def test_profile_from_payload():
    profile = profile_from_payload({**VALID_BODY, "skills": ["AWS", 5], "locationTier": 1})
    assert profile.role == "Software Engineer"
    assert profile.years_experience == 3.0
    assert profile.location_tier == "1"
    assert profile.skills == ("AWS",)

    with pytest.raises(InvalidPayloadError):
        profile_from_payload({"role": None, "yearsExperience": 1})
