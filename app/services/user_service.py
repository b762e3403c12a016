# /app/services/user_service.py

import logging
import uuid
from typing import Optional

from sqlalchemy.exc import IntegrityError

from ..core import security
from ..db.models.user_models import User
from ..models.user_model import PremiumDetails, PremiumUpdate, UserCreate
from .bio_helpers.entitlement import premium_feature_list
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


class UserAlreadyExistsError(ValueError):
    """Raised when registering an email that already has an account."""


def create_user(db: DatabaseService, user: UserCreate) -> User:
    """
    Registers a new account. The user row and its credential row are written
    together; a failure leaves neither behind.
    """
    email = user.email.lower()
    if db.get_user_by_email(email):
        raise UserAlreadyExistsError("An account with this email already exists.")

    user_id = f"usr_{uuid.uuid4().hex[:16]}"
    user_record = {"id": user_id, "name": user.name, "email": email}
    credential_record = {
        "id": f"cred_{uuid.uuid4().hex[:16]}",
        "user_id": user_id,
        "hashed_password": security.get_password_hash(user.password),
    }
    try:
        new_user = db.create_user_with_credential(user_record, credential_record)
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email.
        raise UserAlreadyExistsError("An account with this email already exists.")

    logger.info("Registered new user %s", user_id)
    return new_user


def authenticate_user(db: DatabaseService, email: str, password: str) -> Optional[User]:
    """Returns the user if the credentials are valid, otherwise None."""
    user = db.get_user_by_email(email.lower())
    if not user:
        return None
    credential = db.get_credential_for_user(user.id)
    if not credential or not security.verify_password(password, credential.hashed_password):
        return None
    return user


def update_premium_status(db: DatabaseService, user_id: str, update: PremiumUpdate) -> User:
    """
    Flips the premium flag. Payment processing is not integrated: the payment
    is treated as successful.
    """
    user = db.set_premium_status(user_id, update.isPremium)
    if not user:
        raise LookupError(f"User {user_id} not found.")
    logger.info("Premium status for user %s set to %s", user_id, update.isPremium)
    return user


def get_premium_details(user: User) -> PremiumDetails:
    is_premium = bool(user.is_premium)
    return PremiumDetails(
        isPremium=is_premium,
        plan="premium" if is_premium else "free",
        expiryDate=None,
        features=premium_feature_list(is_premium),
    )
