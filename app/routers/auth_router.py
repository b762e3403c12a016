# /app/routers/auth_router.py

"""
This module defines the public-facing API for all authentication-related actions.

It includes endpoints for:
- User registration (`/register`)
- User login and token generation (`/token`)
- Retrieving the current user's profile (`/me`)

The router only translates between HTTP and the `user_service`; business
errors raised by the service are converted to HTTP errors here.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

# --- Application-specific Imports ---
from app.core import security
from app.core.deps import get_current_active_user
from app.db.models.user_models import User as UserModel
from app.models.user_model import Token, User, UserCreate
from app.services import user_service
from app.services.database_service import DatabaseService, get_db_service

# --- Router Initialization ---
router = APIRouter()


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
def register_user(
    user_in: UserCreate,
    db: DatabaseService = Depends(get_db_service)
):
    """
    Handles new user registration.

    A duplicate email is a conflict (409); any other failure leaves no
    partial account behind.
    """
    try:
        return user_service.create_user(db=db, user=user_in)
    except user_service.UserAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: DatabaseService = Depends(get_db_service)
):
    """
    Handles user login, compatible with the OAuth2 Password Flow.

    It authenticates the user with their email (via the 'username' field) and
    password. On success, it generates and returns a JWT access token.
    """
    user = user_service.authenticate_user(
        db, email=form_data.username, password=form_data.password
    )
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = security.create_access_token(subject=user.id)
    return Token(access_token=access_token, token_type="bearer")


@router.get("/me", response_model=User)
def read_current_user(
    current_user: UserModel = Depends(get_current_active_user)
):
    """
    Retrieves the profile information for the currently authenticated user.
    """
    return current_user
