"""SQLAlchemy model for events."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from pulse.domain.entities import DEFAULT_CURRENCY
from pulse.infrastructure.database import Base
from pulse.utils import now_in_app_naive_datetime


class EventModel(Base):
    """Database representation of a scheduled event."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    start_date = Column(DateTime, nullable=False, index=True)
    genre = Column(String(20), nullable=False)
    type = Column(String(20), nullable=False)
    location_id = Column(Integer, ForeignKey("locations.id"), nullable=True, index=True)
    artist_id = Column(
        Integer, ForeignKey("artists.id", ondelete="SET NULL"), nullable=True, index=True
    )
    image_path = Column(String(255), nullable=True)
    price = Column(Float, nullable=False, default=0.0)
    currency = Column(String(3), nullable=False, default=DEFAULT_CURRENCY)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    artist = relationship("ArtistModel", back_populates="events", lazy="joined")
    location = relationship("LocationModel", back_populates="events", lazy="joined")
    stands = relationship("StandModel", back_populates="event")
    participants = relationship(
        "ParticipationModel",
        back_populates="event",
        cascade="all, delete-orphan",
    )
    scheduled_notifications = relationship(
        "ScheduledNotificationModel",
        back_populates="event",
        cascade="all, delete-orphan",
    )


__all__ = ["EventModel"]
