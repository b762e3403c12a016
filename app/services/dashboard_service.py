# /app/services/dashboard_service.py

# --- Core Imports ---
import logging

from ..models.dashboard_model import UserStats
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


# --- Core Public Function ---

def get_user_stats(db: DatabaseService, user_id: str) -> UserStats:
    """
    Calculates the dashboard statistics for one user: how many bios they have
    stored, how those split across platforms, and which platform they use
    most.

    Args:
        db: An instance of the DatabaseService, provided by dependency injection.
        user_id: The id of the authenticated caller.

    Returns:
        A UserStats Pydantic object. `favoritePlatform` is capitalised, and
        ties go to the alphabetically first platform.
    """
    try:
        total_bios = db.count_bios_for_user(user_id)
        if total_bios == 0:
            return UserStats(totalBios=0, favoritePlatform=None, platformCounts={})

        platform_counts = db.get_platform_counts(user_id)

        favorite_platform = None
        max_count = 0
        for platform in sorted(platform_counts):
            if platform_counts[platform] > max_count:
                max_count = platform_counts[platform]
                favorite_platform = platform

        return UserStats(
            totalBios=total_bios,
            favoritePlatform=favorite_platform.capitalize() if favorite_platform else None,
            platformCounts=platform_counts,
        )
    except Exception as e:
        logger.error("ERROR calculating user stats for %s: %s", user_id, e)
        # Re-raise so the router turns it into a 500.
        raise
