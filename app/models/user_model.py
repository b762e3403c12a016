# /app/models/user_model.py

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    """Payload for POST /api/auth/register."""
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)


class User(BaseModel):
    """Public profile of an account. Never carries credentials."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: Optional[str] = None
    email: str
    image: Optional[str] = None
    is_premium: bool
    is_active: bool
    created_at: Optional[datetime] = None


class Token(BaseModel):
    access_token: str
    token_type: str


class PremiumUpdate(BaseModel):
    """Payload for PUT /api/users/premium. Payment fields are accepted but not processed."""
    isPremium: bool = True
    plan: Optional[Literal["premium", "pro"]] = None
    paymentId: Optional[str] = None


class PremiumUpdateResponse(BaseModel):
    success: bool = True
    message: str


class PremiumDetails(BaseModel):
    success: bool = True
    isPremium: bool
    plan: Literal["free", "premium"]
    expiryDate: Optional[datetime] = None
    features: List[str]
