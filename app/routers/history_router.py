# /app/routers/history_router.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError

# Import the Pydantic models that define our API contract
from ..models import history_model

# Import the services that contain our business logic
from ..core.deps import get_current_active_user
from ..db.models.user_models import User
from ..services import history_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",  # Maps to /api/bios
    response_model=history_model.BioHistoryResponse,
    summary="Get Bio History"
)
def get_my_bios(
    page: int = Query(1, description="1-based page number."),
    pageSize: int = Query(10, description="Items per page, between 1 and 50."),
    searchTerm: Optional[str] = Query(None, description="Substring to look for in the bio text."),
    current_user: User = Depends(get_current_active_user),
    db: DatabaseService = Depends(get_db_service)
):
    """
    Endpoint to retrieve the caller's stored bios, most recent first.
    """
    try:
        return history_service.get_bio_history(
            db=db,
            user_id=current_user.id,
            page=page,
            page_size=pageSize,
            search_term=searchTerm,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except SQLAlchemyError as e:
        logger.error("ERROR fetching bio history: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while fetching your bios."
        )


@router.delete(
    "/{bio_id}",
    response_model=history_model.DeleteBioResponse,
    summary="Delete a Bio",
    description="Permanently deletes one of the caller's stored bios.",
    responses={403: {"description": "The bio does not exist or belongs to another user"}}
)
def delete_bio(
    bio_id: str,
    current_user: User = Depends(get_current_active_user),
    db: DatabaseService = Depends(get_db_service)
):
    try:
        history_service.delete_bio(db=db, bio_id=bio_id, caller_id=current_user.id)
    except history_service.BioOwnershipError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("ERROR deleting bio %s: %s", bio_id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while deleting the bio."
        )
    return history_model.DeleteBioResponse()
