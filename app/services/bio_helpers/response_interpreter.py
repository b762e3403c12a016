# /app/services/bio_helpers/response_interpreter.py

import json
import logging
import re
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from ...models.bio_model import (
    Entitlement,
    PremiumGenerationResult,
    ScoreDetails,
    StandardGenerationResult,
)

logger = logging.getLogger(__name__)

FALLBACK_MIN_LENGTH = 10
FALLBACK_MAX_BIO_LENGTH = 500
FALLBACK_SCORE = 70
GENERATION_FAILED_MESSAGE = "generation failed"

_CODE_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)

# Keys the caller controls; a model echoing them must not override the envelope.
_ENVELOPE_KEYS = ("entitlement", "success", "error")

AnyGenerationResult = Union[StandardGenerationResult, PremiumGenerationResult]


def _result_class(entitlement: Entitlement):
    if entitlement is Entitlement.PREMIUM:
        return PremiumGenerationResult
    return StandardGenerationResult


def _strip_code_fences(raw_text: str) -> str:
    return _CODE_FENCE_RE.sub("", raw_text.strip()).strip()


def _parse_json_object(text: str) -> Optional[Dict[str, Any]]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


def _fallback_result(raw_text: str, entitlement: Entitlement) -> AnyGenerationResult:
    """Free text is still a usable bio: keep its head and give it neutral scores."""
    return _result_class(entitlement)(
        success=True,
        bio=raw_text[:FALLBACK_MAX_BIO_LENGTH],
        score=FALLBACK_SCORE,
        scoreDetails=ScoreDetails(
            readability=FALLBACK_SCORE,
            engagement=FALLBACK_SCORE,
            uniqueness=FALLBACK_SCORE,
            platformRelevance=FALLBACK_SCORE,
        ),
    )


def failed_result(message: str) -> StandardGenerationResult:
    return StandardGenerationResult(success=False, error=message)


def _validate_json_result(payload: Dict[str, Any], entitlement: Entitlement) -> AnyGenerationResult:
    """
    Validates a parsed JSON object section by section. A top-level field the
    result model rejects is dropped and the rest is validated again.
    """
    result_class = _result_class(entitlement)
    payload = dict(payload)
    while True:
        try:
            return result_class.model_validate({"success": True, **payload})
        except ValidationError as e:
            rejected = {err["loc"][0] for err in e.errors() if err["loc"] and err["loc"][0] in payload}
            if not rejected:
                raise
            logger.warning("Dropping malformed fields from LLM JSON: %s", sorted(rejected))
            for key in rejected:
                payload.pop(key)


def interpret(raw_text: Optional[str], entitlement: Entitlement) -> AnyGenerationResult:
    """
    Turns raw LLM output into a typed result for the caller's entitlement.

    1. Markdown code fences and surrounding whitespace are stripped.
    2. A JSON object is validated into the entitlement's result model. The
       standard model has no premium fields, so anything the model added
       beyond what the caller is entitled to is dropped here. Malformed
       sections are dropped one by one; a JSON object without a usable bio
       is a failed generation.
    3. Anything else longer than FALLBACK_MIN_LENGTH characters becomes a
       plain-text bio with neutral scores.
    4. Otherwise the generation is reported as failed.
    """
    raw_text = raw_text or ""
    data = _parse_json_object(_strip_code_fences(raw_text))

    if data is not None:
        payload = {k: v for k, v in data.items() if k not in _ENVELOPE_KEYS}
        result = _validate_json_result(payload, entitlement)
        if not result.bio or not result.bio.strip():
            logger.warning("LLM returned a JSON object without a usable bio.")
            return failed_result(GENERATION_FAILED_MESSAGE)
        return result

    logger.warning("Could not parse LLM response as a JSON object. Raw response: %r", raw_text[:200])
    if len(raw_text) > FALLBACK_MIN_LENGTH:
        return _fallback_result(raw_text, entitlement)
    return failed_result(GENERATION_FAILED_MESSAGE)
