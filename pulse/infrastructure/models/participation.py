"""SQLAlchemy model linking users to the events they attend."""

from sqlalchemy import (
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from pulse.domain.entities import PAYMENT_STATUS_PENDING
from pulse.infrastructure.database import Base
from pulse.utils import now_in_app_naive_datetime


class ParticipationModel(Base):
    """Database representation of an event registration and its payment state."""

    __tablename__ = "event_participants"
    __table_args__ = (
        UniqueConstraint("user_id", "event_id", name="uq_event_participants_user_event"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    event_id = Column(
        Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True
    )
    payment_status = Column(String(20), nullable=False, default=PAYMENT_STATUS_PENDING)
    payment_intent_id = Column(String(255), nullable=True, index=True)
    amount_paid = Column(Float, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)

    user = relationship("UserModel", back_populates="participations", lazy="joined")
    event = relationship("EventModel", back_populates="participants", lazy="joined")


__all__ = ["ParticipationModel"]
