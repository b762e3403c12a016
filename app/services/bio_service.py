# /app/services/bio_service.py

import logging
import uuid
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from ..db.models.user_models import User
from ..models.bio_model import Entitlement, GenerationRequest
from .bio_helpers.entitlement import resolve_entitlement
from .bio_helpers.prompt_builder import build_prompt
from .bio_helpers.response_interpreter import AnyGenerationResult, failed_result, interpret
from .database_service import DatabaseService
from .llm_service import LLMClient, LLMServiceError

logger = logging.getLogger(__name__)

UPSTREAM_ERROR_MESSAGE = "An error occurred while generating your bio. Please try again."


def _save_bio(
    db: DatabaseService,
    user: User,
    request: GenerationRequest,
    result: AnyGenerationResult,
) -> None:
    """
    Persists a successful generation for an identified user. A storage
    failure is logged and swallowed: the caller still gets the bio.
    """
    record = {
        "id": f"bio_{uuid.uuid4().hex[:16]}",
        "user_id": user.id,
        "platform": request.platform.value,
        "style": request.style.value,
        "content": result.bio or "",
        "interests": request.interests,
        "score": result.score or 0,
    }
    try:
        db.add_bio(record)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to save generated bio for user %s: %s", user.id, e)


async def generate_bio(
    request: GenerationRequest,
    llm: LLMClient,
    db: DatabaseService,
    user: Optional[User] = None,
) -> AnyGenerationResult:
    """
    Runs the full pipeline: entitlement, prompt, LLM call, interpretation and,
    for identified callers, persistence. Never raises for upstream failures.
    """
    entitlement = resolve_entitlement(request.isPremium, user)
    if request.isPremium and entitlement is not Entitlement.PREMIUM:
        logger.info("Premium generation requested without a premium account; serving standard.")

    prompt = build_prompt(request, entitlement)
    try:
        raw_text = await llm.generate_text(prompt, entitlement)
    except LLMServiceError as e:
        logger.error("Bio generation failed upstream: %s", e)
        return failed_result(UPSTREAM_ERROR_MESSAGE)

    result = interpret(raw_text, entitlement)

    if result.success and user is not None:
        _save_bio(db, user, request, result)
    return result
