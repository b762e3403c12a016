# /app/routers/bio_router.py

from typing import Optional

from fastapi import APIRouter, Depends

from app.core.deps import get_llm_client, get_optional_current_user
from app.db.models.user_models import User
from app.models import bio_model
from app.services import bio_service
from app.services.database_service import DatabaseService, get_db_service
from app.services.llm_service import LLMClient

router = APIRouter()


@router.post(
    "/generate",
    response_model=bio_model.GenerationResult,
    response_model_exclude_none=True,
    summary="Generate a Bio",
    description=(
        "Generates a bio (and, for premium accounts, the requested extras). "
        "Upstream AI failures are reported in the body as success=false."
    ),
)
async def generate_bio(
    request: bio_model.GenerationRequest,
    current_user: Optional[User] = Depends(get_optional_current_user),
    llm: LLMClient = Depends(get_llm_client),
    db: DatabaseService = Depends(get_db_service),
):
    """Open to anonymous callers; results are stored only for signed-in users."""
    return await bio_service.generate_bio(request, llm=llm, db=db, user=current_user)
