"""User account model"""

from datetime import datetime
from enum import Enum as PyEnum

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from app.db.database import Base


class UserRole(str, PyEnum):
    CLIENT = "client"
    OWNER = "owner"
    DELIVERY = "delivery"


class User(Base):
    """Account identified by email; password holds an argon2 hash"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(20), default=UserRole.CLIENT.value, nullable=False)
    verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationships
    verification = relationship(
        "Verification", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    restaurants = relationship("Restaurant", back_populates="owner")
    payments = relationship("Payment", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
