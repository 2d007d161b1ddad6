"""Email verification code model"""

import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.db.database import Base


def generate_code() -> str:
    return str(uuid.uuid4())


class Verification(Base):
    """One-time code proving control of the owning user's email"""

    __tablename__ = "verifications"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(64), unique=True, nullable=False, index=True, default=generate_code)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="verification")

    def __repr__(self):
        return f"<Verification(id={self.id}, user_id={self.user_id})>"
