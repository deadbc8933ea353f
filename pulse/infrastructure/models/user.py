"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from pulse.domain.entities import ROLE_USER
from pulse.infrastructure.database import Base
from pulse.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of a platform user."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=ROLE_USER)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)

    participations = relationship(
        "ParticipationModel",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    notifications = relationship(
        "NotificationModel",
        back_populates="user",
        cascade="all, delete-orphan",
    )


__all__ = ["UserModel"]
