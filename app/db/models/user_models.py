# /app/db/models/user_models.py

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class User(Base):
    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=True)
    email = Column(String, unique=True, index=True, nullable=False)
    email_verified = Column(DateTime(timezone=True), nullable=True)
    image = Column(String, nullable=True)
    is_premium = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    credential = relationship(
        "UserCredential", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    bios = relationship("GeneratedBio", back_populates="owner", cascade="all, delete-orphan")


class UserCredential(Base):
    __tablename__ = "usercredentials"
    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    hashed_password = Column(String, nullable=False)

    user = relationship("User", back_populates="credential")
