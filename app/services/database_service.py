# /app/services/database_service.py

from typing import Dict, Generator, List, Optional, Tuple

from fastapi import Depends
from sqlalchemy.orm import Session

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.bio_repository_sql import BioRepositorySQL
from .database_helpers.user_repository_sql import UserRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Bundles every SQL repository behind one object bound to a single
        request-scoped session.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.session = db_session
        self.bio_repo = BioRepositorySQL(db_session)
        self.user_repo = UserRepositorySQL(db_session)

    def rollback(self) -> None:
        self.session.rollback()

    # --- USER METHODS (DELEGATED) ---
    def get_user_by_id(self, user_id: str): return self.user_repo.get_user_by_id(user_id)
    def get_user_by_email(self, email: str): return self.user_repo.get_user_by_email(email)
    def get_credential_for_user(self, user_id: str): return self.user_repo.get_credential_for_user(user_id)
    def create_user_with_credential(self, user_record: Dict, credential_record: Dict):
        return self.user_repo.create_user_with_credential(user_record, credential_record)
    def set_premium_status(self, user_id: str, is_premium: bool): return self.user_repo.set_premium_status(user_id, is_premium)

    # --- GENERATED BIO METHODS (DELEGATED) ---
    def add_bio(self, bio_record: Dict): return self.bio_repo.add_bio(bio_record)
    def get_bios_page(self, user_id: str, offset: int, limit: int, search_term: Optional[str] = None) -> Tuple[List, int]:
        return self.bio_repo.get_bios_page(user_id, offset, limit, search_term)
    def count_bios_for_user(self, user_id: str) -> int: return self.bio_repo.count_bios_for_user(user_id)
    def delete_bio_for_owner(self, bio_id: str, owner_id: str) -> bool: return self.bio_repo.delete_bio_for_owner(bio_id, owner_id)
    def get_platform_counts(self, user_id: str) -> Dict[str, int]: return self.bio_repo.get_platform_counts(user_id)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService bound to the
    request's session.
    """
    yield DatabaseService(db_session=db)
