# /app/models/dashboard_model.py

# --- Core Imports ---
from typing import Dict, Optional

from pydantic import BaseModel, Field


# --- Model Definition ---

class UserStats(BaseModel):
    """
    Defines the data contract for the GET /api/dashboard/stats endpoint, which
    feeds the summary cards of the user's dashboard.
    """

    success: bool = True

    totalBios: int = Field(
        ...,
        description="The total number of bios stored for the user.",
        examples=[12],
    )

    favoritePlatform: Optional[str] = Field(
        None,
        description="The capitalised platform the user generates for most often, or null.",
        examples=["Instagram"],
    )

    platformCounts: Dict[str, int] = Field(
        default_factory=dict,
        description="Number of stored bios per platform.",
        examples=[{"instagram": 8, "tiktok": 4}],
    )
