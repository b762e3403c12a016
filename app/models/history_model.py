# /app/models/history_model.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BioRecord(BaseModel):
    """
    Defines the data contract for a single stored bio when it is read back
    from the database.
    """
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    userId: Optional[str] = Field(None, validation_alias="user_id")
    platform: str
    style: str
    content: str
    interests: str
    score: int
    createdAt: datetime = Field(..., validation_alias="created_at")


class BioHistoryResponse(BaseModel):
    """
    Defines the data contract for the GET /api/bios response.
    """
    success: bool = True
    items: List[BioRecord]
    totalItems: int
    totalPages: int
    currentPage: int
    pageSize: int


class DeleteBioResponse(BaseModel):
    success: bool = True
