# /app/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends, HTTPException, status

# --- Service and Model Imports ---
from ..core.deps import get_current_active_user
from ..db.models.user_models import User
from ..models.dashboard_model import UserStats
from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get(
    "/stats",
    response_model=UserStats,
    summary="Get User Statistics",
    description="Total stored bios, per-platform counts and the favourite platform of the caller."
)
def get_user_stats(
    current_user: User = Depends(get_current_active_user),
    db: DatabaseService = Depends(get_db_service)
):
    """Thin router: delegates straight to the dashboard service."""
    try:
        return dashboard_service.get_user_stats(db=db, user_id=current_user.id)
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while fetching your statistics."
        )
