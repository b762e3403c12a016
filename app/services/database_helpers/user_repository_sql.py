# /app/services/database_helpers/user_repository_sql.py

from typing import Dict, Optional

from sqlalchemy.orm import Session

from app.db.models.user_models import User, UserCredential


class UserRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_credential_for_user(self, user_id: str) -> Optional[UserCredential]:
        return self.db.query(UserCredential).filter(UserCredential.user_id == user_id).first()

    def create_user_with_credential(self, user_record: Dict, credential_record: Dict) -> User:
        """
        Inserts the user and its credential in a single transaction: either
        both rows are committed or neither is.
        """
        new_user = User(**user_record)
        new_credential = UserCredential(**credential_record)
        try:
            self.db.add(new_user)
            self.db.flush()
            self.db.add(new_credential)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(new_user)
        return new_user

    def set_premium_status(self, user_id: str, is_premium: bool) -> Optional[User]:
        user = self.get_user_by_id(user_id)
        if not user:
            return None
        user.is_premium = is_premium
        self.db.commit()
        self.db.refresh(user)
        return user
