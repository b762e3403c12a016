# /tests/test_response_interpreter.py

import json

import pytest

from app.models.bio_model import Entitlement, PremiumGenerationResult, StandardGenerationResult
from app.services.bio_helpers.response_interpreter import interpret

PREMIUM_KEYS = ("branding", "postIdeas", "hashtags", "resume")


@pytest.fixture
def full_payload():
    """A model answer that includes every premium section."""
    return {
        "bio": "Wanderer & foodie",
        "score": 80,
        "scoreDetails": {"readability": 81, "engagement": 82, "uniqueness": 83, "platformRelevance": 84},
        "branding": {"username": "alex.eats", "slogan": "Taste the world", "colors": ["#FF5733", "#33FF57", "#3357FF"]},
        "postIdeas": ["Street food tour", "Packing tips", "Hidden cafes", "Budget travel"],
        "hashtags": ["#travel", "#food", "#foodie", "#wanderlust", "#eats"],
        "resume": "Alex is a travel and food creator.",
    }


def test_scenario_standard_pass_through():
    raw = ('{"bio":"Wanderer & foodie","score":80,"scoreDetails":{"readability":80,'
           '"engagement":80,"uniqueness":80,"platformRelevance":80}}')

    result = interpret(raw, Entitlement.STANDARD)
    dumped = result.model_dump(mode="json", exclude_none=True)

    assert dumped == {
        "entitlement": "standard",
        "success": True,
        "bio": "Wanderer & foodie",
        "score": 80,
        "scoreDetails": {"readability": 80, "engagement": 80, "uniqueness": 80, "platformRelevance": 80},
    }


def test_standard_result_never_contains_premium_keys(full_payload):
    result = interpret(json.dumps(full_payload), Entitlement.STANDARD)
    dumped = result.model_dump()

    assert isinstance(result, StandardGenerationResult)
    assert not isinstance(result, PremiumGenerationResult)
    for key in PREMIUM_KEYS:
        assert key not in dumped


def test_premium_result_keeps_premium_sections(full_payload):
    result = interpret(json.dumps(full_payload), Entitlement.PREMIUM)

    assert isinstance(result, PremiumGenerationResult)
    assert result.branding.username == "alex.eats"
    assert result.branding.colors == ["#FF5733", "#33FF57", "#3357FF"]
    assert len(result.postIdeas) == 4
    assert result.hashtags[0] == "#travel"
    assert result.resume.startswith("Alex")


def test_numeric_fields_round_trip_exactly(full_payload):
    result = interpret(json.dumps(full_payload), Entitlement.STANDARD)

    assert result.score == 80
    assert result.scoreDetails.model_dump() == full_payload["scoreDetails"]


@pytest.mark.parametrize("fence", ["```json\n{}\n```", "```\n{}\n```", "  ```JSON{}```  "])
def test_code_fences_are_stripped(fence):
    body = json.dumps({"bio": "Fenced bio", "score": 90})
    raw = fence.replace("{}", body)

    result = interpret(raw, Entitlement.STANDARD)

    assert result.success is True
    assert result.bio == "Fenced bio"
    assert result.score == 90


def test_free_text_falls_back_to_truncated_bio():
    raw = "Just a plain bio without any JSON at all. " * 20

    result = interpret(raw, Entitlement.STANDARD)

    assert result.success is True
    assert result.bio == raw[:500]
    assert len(result.bio) == 500
    assert result.score == 70
    assert result.scoreDetails.model_dump() == {
        "readability": 70, "engagement": 70, "uniqueness": 70, "platformRelevance": 70,
    }


def test_short_free_text_is_a_failure():
    result = interpret("oops", Entitlement.STANDARD)

    assert result.success is False
    assert result.error == "generation failed"
    assert result.bio is None


@pytest.mark.parametrize("raw", ["", None, "0123456789"])
def test_empty_or_ten_char_text_is_a_failure(raw):
    assert interpret(raw, Entitlement.PREMIUM).success is False


def test_json_array_is_not_accepted_as_a_result():
    raw = '["not", "an", "object", "but", "long"]'

    result = interpret(raw, Entitlement.STANDARD)

    # Long enough to fall back, so the raw text becomes the bio.
    assert result.success is True
    assert result.bio == raw


def test_model_cannot_override_envelope_fields():
    raw = json.dumps({"bio": "Hi there", "success": False, "error": "nope", "entitlement": "premium",
                      "resume": "leak"})

    result = interpret(raw, Entitlement.STANDARD)

    assert result.success is True
    assert result.error is None
    assert result.entitlement == Entitlement.STANDARD
    assert "resume" not in result.model_dump()


def test_out_of_range_scores_are_clamped():
    raw = json.dumps({"bio": "Bold", "score": 140,
                      "scoreDetails": {"readability": -5, "engagement": 100, "uniqueness": 0,
                                       "platformRelevance": 101}})

    result = interpret(raw, Entitlement.STANDARD)

    assert result.score == 100
    assert result.scoreDetails.readability == 0
    assert result.scoreDetails.engagement == 100
    assert result.scoreDetails.platformRelevance == 100


def test_json_with_wrong_typed_score_keeps_the_bio():
    raw = json.dumps({"bio": "Typed wrong", "score": "very high"})

    result = interpret(raw, Entitlement.STANDARD)

    assert result.success is True
    assert result.bio == "Typed wrong"
    assert result.score is None


def test_missing_sub_score_drops_only_score_details():
    raw = json.dumps({"bio": "Wanderer & foodie", "score": 80,
                      "scoreDetails": {"readability": 80, "engagement": 80, "uniqueness": 80}})

    result = interpret(raw, Entitlement.STANDARD)

    assert result.success is True
    assert result.bio == "Wanderer & foodie"
    assert result.score == 80
    assert result.scoreDetails is None


def test_fractional_scores_are_rounded():
    raw = json.dumps({"bio": "Wanderer & foodie", "score": 85.5,
                      "scoreDetails": {"readability": 79.4, "engagement": 80.6, "uniqueness": 81.0,
                                       "platformRelevance": 150.2}})

    result = interpret(raw, Entitlement.STANDARD)

    assert result.bio == "Wanderer & foodie"
    assert result.score == 86
    assert result.scoreDetails.model_dump() == {
        "readability": 79, "engagement": 81, "uniqueness": 81, "platformRelevance": 100,
    }


def test_partial_branding_drops_only_branding(full_payload):
    full_payload["branding"] = {"username": "alex.eats", "colors": ["#FF5733", "#33FF57", "#3357FF"]}

    result = interpret(json.dumps(full_payload), Entitlement.PREMIUM)

    assert isinstance(result, PremiumGenerationResult)
    assert result.bio == "Wanderer & foodie"
    assert result.branding is None
    assert len(result.postIdeas) == 4
    assert result.hashtags[0] == "#travel"
    assert result.resume.startswith("Alex")


@pytest.mark.parametrize("colors", [
    ["#FF5733", "#33FF57"],
    ["#FF5733", "#33FF57", "#3357FF", "#000000"],
    ["red", "#33FF57", "#3357FF"],
    ["#FF573", "#33FF57", "#3357FF"],
    ["FF5733", "#33FF57", "#3357FF"],
])
def test_branding_requires_three_hex_colors(full_payload, colors):
    full_payload["branding"]["colors"] = colors

    result = interpret(json.dumps(full_payload), Entitlement.PREMIUM)

    assert result.success is True
    assert result.branding is None
    assert result.resume.startswith("Alex")
    assert result.score == 80


def test_json_without_a_bio_is_a_failure():
    raw = json.dumps({"score": 80, "scoreDetails": {"readability": 80}})

    result = interpret(raw, Entitlement.STANDARD)

    assert result.success is False
    assert result.error == "generation failed"
    assert result.bio is None
