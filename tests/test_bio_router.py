# /tests/test_bio_router.py

import json

import pytest
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from app.db.models.bio_models import GeneratedBio
from app.models.bio_model import Entitlement
from app.services.llm_service import LLMServiceError

SCENARIO_RESPONSE = (
    '{"bio":"Wanderer & foodie","score":80,"scoreDetails":{"readability":80,'
    '"engagement":80,"uniqueness":80,"platformRelevance":80}}'
)

PREMIUM_RESPONSE = json.dumps({
    "bio": "Chef on the road",
    "score": 91,
    "scoreDetails": {"readability": 90, "engagement": 92, "uniqueness": 88, "platformRelevance": 94},
    "branding": {"username": "alex.eats", "slogan": "Taste the world", "colors": ["#111111", "#222222", "#333333"]},
    "postIdeas": ["a", "b", "c", "d"],
    "hashtags": ["#a", "#b", "#c", "#d", "#e"],
    "resume": "Alex cooks.",
})


@pytest.fixture
def scenario_payload():
    return {
        "name": "Alex",
        "platform": "instagram",
        "style": "fun",
        "interests": "travel,food",
        "isPremium": False,
    }


def test_scenario_exact_pass_through(client, mock_llm, scenario_payload):
    mock_llm.generate_text.return_value = SCENARIO_RESPONSE

    r = client.post("/api/bios/generate", json=scenario_payload)

    assert r.status_code == 200
    assert r.json() == {
        "entitlement": "standard",
        "success": True,
        "bio": "Wanderer & foodie",
        "score": 80,
        "scoreDetails": {"readability": 80, "engagement": 80, "uniqueness": 80, "platformRelevance": 80},
    }


def test_anonymous_generation_is_not_stored(client, mock_llm, db_session, scenario_payload):
    mock_llm.generate_text.return_value = SCENARIO_RESPONSE

    client.post("/api/bios/generate", json=scenario_payload)

    assert db_session.query(GeneratedBio).count() == 0


def test_signed_in_generation_is_stored(client, mock_llm, db_session, make_user, auth_headers, scenario_payload):
    user = make_user()
    mock_llm.generate_text.return_value = SCENARIO_RESPONSE

    r = client.post("/api/bios/generate", json=scenario_payload, headers=auth_headers(user))

    assert r.json()["success"] is True
    stored = db_session.query(GeneratedBio).all()
    assert len(stored) == 1
    assert stored[0].user_id == user.id
    assert stored[0].content == "Wanderer & foodie"
    assert stored[0].interests == "travel,food"
    assert stored[0].score == 80


def test_off_shape_json_stores_the_parsed_bio(client, mock_llm, db_session, make_user, auth_headers, scenario_payload):
    user = make_user()
    mock_llm.generate_text.return_value = json.dumps({
        "bio": "Wanderer & foodie",
        "score": 80,
        "scoreDetails": {"readability": 80, "engagement": 80, "uniqueness": 80},
    })

    r = client.post("/api/bios/generate", json=scenario_payload, headers=auth_headers(user))

    body = r.json()
    assert body["bio"] == "Wanderer & foodie"
    assert "scoreDetails" not in body
    stored = db_session.query(GeneratedBio).one()
    assert stored.content == "Wanderer & foodie"
    assert stored.score == 80


def test_premium_flag_from_free_account_is_served_as_standard(
    client, mock_llm, make_user, auth_headers, scenario_payload
):
    user = make_user(is_premium=False)
    mock_llm.generate_text.return_value = PREMIUM_RESPONSE
    payload = dict(scenario_payload, isPremium=True, features={"branding": True, "resume": True})

    body = client.post("/api/bios/generate", json=payload, headers=auth_headers(user)).json()

    assert body["entitlement"] == "standard"
    for key in ("branding", "postIdeas", "hashtags", "resume"):
        assert key not in body
    prompt, entitlement = mock_llm.generate_text.call_args.args
    assert entitlement is Entitlement.STANDARD
    assert '"branding"' not in prompt


def test_premium_account_receives_requested_sections(
    client, mock_llm, make_user, auth_headers, scenario_payload
):
    user = make_user(is_premium=True)
    mock_llm.generate_text.return_value = PREMIUM_RESPONSE
    payload = dict(scenario_payload, isPremium=True,
                   features={"branding": True, "postIdeas": True, "resume": True})

    body = client.post("/api/bios/generate", json=payload, headers=auth_headers(user)).json()

    assert body["entitlement"] == "premium"
    assert body["branding"]["username"] == "alex.eats"
    assert body["hashtags"] == ["#a", "#b", "#c", "#d", "#e"]
    assert body["resume"] == "Alex cooks."
    prompt, entitlement = mock_llm.generate_text.call_args.args
    assert entitlement is Entitlement.PREMIUM
    assert '"resume"' in prompt


def test_upstream_failure_returns_structured_error(client, mock_llm, scenario_payload):
    mock_llm.generate_text.side_effect = LLMServiceError("timeout")

    r = client.post("/api/bios/generate", json=scenario_payload)

    assert r.status_code == 200
    body = r.json()
    assert body["success"] is False
    assert "try again" in body["error"]
    assert "bio" not in body


def test_free_text_response_degrades_to_bio(client, mock_llm, scenario_payload):
    mock_llm.generate_text.return_value = "Globe-trotting foodie sharing bites from everywhere."

    body = client.post("/api/bios/generate", json=scenario_payload).json()

    assert body["success"] is True
    assert body["bio"] == "Globe-trotting foodie sharing bites from everywhere."
    assert body["score"] == 70


def test_storage_failure_still_returns_the_bio(client, mock_llm, make_user, auth_headers, scenario_payload):
    user = make_user()
    mock_llm.generate_text.return_value = SCENARIO_RESPONSE

    with patch(
        "app.services.database_service.DatabaseService.add_bio",
        side_effect=OperationalError("INSERT", {}, Exception("database is locked")),
    ):
        r = client.post("/api/bios/generate", json=scenario_payload, headers=auth_headers(user))

    assert r.status_code == 200
    assert r.json()["bio"] == "Wanderer & foodie"


@pytest.mark.parametrize("field, value", [
    ("platform", "myspace"),
    ("style", "grumpy"),
    ("interests", ""),
    ("interests", "   "),
    ("name", ""),
])
def test_invalid_input_is_rejected_with_field_details(client, mock_llm, scenario_payload, field, value):
    payload = dict(scenario_payload, **{field: value})

    r = client.post("/api/bios/generate", json=payload)

    assert r.status_code == 422
    body = r.json()
    assert body["success"] is False
    assert any(d["field"] == field for d in body["details"])
    mock_llm.generate_text.assert_not_called()


def test_missing_llm_client_answers_503(client, scenario_payload):
    from app.core.deps import get_llm_client
    from app.main import app

    del app.dependency_overrides[get_llm_client]
    app.state.llm_client = None

    r = client.post("/api/bios/generate", json=scenario_payload)

    assert r.status_code == 503
    assert r.json()["success"] is False
