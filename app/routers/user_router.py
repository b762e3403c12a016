# /app/routers/user_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.deps import get_current_active_user
from app.db.models.user_models import User
from app.models import user_model
from app.services import user_service
from app.services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.put(
    "/premium",
    response_model=user_model.PremiumUpdateResponse,
    summary="Update Premium Status",
    description="Upgrades (or downgrades) the caller's plan. Payment is not processed yet."
)
def update_premium_status(
    payload: user_model.PremiumUpdate,
    current_user: User = Depends(get_current_active_user),
    db: DatabaseService = Depends(get_db_service)
):
    try:
        user_service.update_premium_status(db, current_user.id, payload)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return user_model.PremiumUpdateResponse(message="Premium status updated successfully.")


@router.get(
    "/premium",
    response_model=user_model.PremiumDetails,
    summary="Get Premium Details",
)
def get_premium_details(current_user: User = Depends(get_current_active_user)):
    return user_service.get_premium_details(current_user)
