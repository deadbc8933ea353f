"""SQLAlchemy model for exhibitor stands."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from pulse.infrastructure.database import Base
from pulse.utils import now_in_app_naive_datetime


class StandModel(Base):
    __tablename__ = "stands"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=False)
    type = Column(String(20), nullable=False)
    location_id = Column(Integer, ForeignKey("locations.id"), nullable=False, index=True)
    event_id = Column(
        Integer, ForeignKey("events.id", ondelete="SET NULL"), nullable=True, index=True
    )
    opened_at = Column(DateTime, nullable=False)
    closed_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    location = relationship("LocationModel", back_populates="stands", lazy="joined")
    event = relationship("EventModel", back_populates="stands", lazy="joined")


__all__ = ["StandModel"]
