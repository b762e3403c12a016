# /app/core/deps.py

"""
Shared FastAPI dependencies: the current caller (required or optional) and
the process-wide LLM client.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from app.core import security
from app.db.models.user_models import User
from app.services.database_service import DatabaseService, get_db_service
from app.services.llm_service import LLMClient

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token", auto_error=False)


def _user_from_token(token: Optional[str], db: DatabaseService) -> Optional[User]:
    if not token:
        return None
    user_id = security.decode_access_token(token)
    if user_id is None:
        return None
    return db.get_user_by_id(user_id)


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: DatabaseService = Depends(get_db_service),
) -> User:
    """Resolves the bearer token to a user, or fails with 401."""
    user = _user_from_token(token, db)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_active:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Inactive user")
    return current_user


def get_optional_current_user(
    token: Optional[str] = Depends(optional_oauth2_scheme),
    db: DatabaseService = Depends(get_db_service),
) -> Optional[User]:
    """
    Like get_current_user, but anonymous callers (and invalid tokens) resolve
    to None instead of an error. Used by endpoints open to everyone.
    """
    user = _user_from_token(token, db)
    if user is not None and not user.is_active:
        return None
    return user


def get_llm_client(request: Request) -> LLMClient:
    """Returns the LLM client built once by the application lifespan."""
    client = getattr(request.app.state, "llm_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="The AI provider is not configured.",
        )
    return client
