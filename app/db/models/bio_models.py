# /app/db/models/bio_models.py

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..base_class import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GeneratedBio(Base):
    __tablename__ = "generatedbios"
    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=True)
    platform = Column(String, index=True, nullable=False)
    style = Column(String, nullable=False)
    content = Column(String, nullable=False)
    interests = Column(String, nullable=False)
    score = Column(Integer, nullable=False, default=0)
    # Set client-side so rows inserted within the same second still order correctly.
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)

    owner = relationship("User", back_populates="bios")
