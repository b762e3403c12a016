# /app/services/history_service.py

import math
from typing import Optional

from ..models.history_model import BioHistoryResponse, BioRecord
from .database_service import DatabaseService

MAX_PAGE_SIZE = 50


class BioOwnershipError(Exception):
    """Raised when a caller tries to remove a bio they do not own."""


def get_bio_history(
    db: DatabaseService,
    user_id: str,
    page: int = 1,
    page_size: int = 10,
    search_term: Optional[str] = None,
) -> BioHistoryResponse:
    """
    Retrieves one page of the user's bio history, most recent first,
    optionally filtered by a substring of the bio content.

    Raises ValueError for an out-of-range page or page size, before any
    query is issued.
    """
    if page < 1:
        raise ValueError("'page' must be greater than or equal to 1.")
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise ValueError(f"'pageSize' must be between 1 and {MAX_PAGE_SIZE}.")

    term = search_term if search_term and search_term.strip() else None
    offset = (page - 1) * page_size
    records, total = db.get_bios_page(user_id, offset=offset, limit=page_size, search_term=term)

    return BioHistoryResponse(
        items=[BioRecord.model_validate(r) for r in records],
        totalItems=total,
        totalPages=math.ceil(total / page_size),
        currentPage=page,
        pageSize=page_size,
    )


def delete_bio(db: DatabaseService, bio_id: str, caller_id: str) -> None:
    """
    Removes a bio owned by the caller. Unknown ids and bios owned by someone
    else are indistinguishable to the caller: both raise BioOwnershipError.
    """
    if not db.delete_bio_for_owner(bio_id, caller_id):
        raise BioOwnershipError("You are not allowed to delete this bio.")
