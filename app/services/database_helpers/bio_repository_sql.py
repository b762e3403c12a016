# /app/services/database_helpers/bio_repository_sql.py

from typing import Dict, List, Optional, Tuple

from sqlalchemy import delete, func
from sqlalchemy.orm import Session

from app.db.models.bio_models import GeneratedBio


class BioRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_bio(self, record: Dict) -> GeneratedBio:
        """Creates a new GeneratedBio record in the database from a dictionary."""
        new_bio = GeneratedBio(**record)
        self.db.add(new_bio)
        self.db.commit()
        self.db.refresh(new_bio)
        return new_bio

    def _user_query(self, user_id: str, search_term: Optional[str]):
        query = self.db.query(GeneratedBio).filter(GeneratedBio.user_id == user_id)
        if search_term:
            query = query.filter(GeneratedBio.content.contains(search_term, autoescape=True))
        return query

    def get_bios_page(
        self, user_id: str, offset: int, limit: int, search_term: Optional[str] = None
    ) -> Tuple[List[GeneratedBio], int]:
        """Returns one page of a user's bios (most recent first) and the total match count."""
        query = self._user_query(user_id, search_term)
        total = query.count()
        items = (
            query.order_by(GeneratedBio.created_at.desc(), GeneratedBio.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return items, total

    def count_bios_for_user(self, user_id: str) -> int:
        return self.db.query(GeneratedBio).filter(GeneratedBio.user_id == user_id).count()

    def delete_bio_for_owner(self, bio_id: str, owner_id: str) -> bool:
        """
        Deletes a bio only if it belongs to `owner_id`. Ownership check and
        deletion are one statement, so there is no window between them.
        """
        result = self.db.execute(
            delete(GeneratedBio).where(
                GeneratedBio.id == bio_id,
                GeneratedBio.user_id == owner_id,
            )
        )
        self.db.commit()
        return result.rowcount > 0

    def get_platform_counts(self, user_id: str) -> Dict[str, int]:
        rows = (
            self.db.query(GeneratedBio.platform, func.count(GeneratedBio.id))
            .filter(GeneratedBio.user_id == user_id)
            .group_by(GeneratedBio.platform)
            .order_by(GeneratedBio.platform)
            .all()
        )
        return {platform: count for platform, count in rows}
