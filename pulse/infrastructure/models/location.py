"""SQLAlchemy model for venues."""

from sqlalchemy import Column, DateTime, Float, Integer, String
from sqlalchemy.orm import relationship

from pulse.infrastructure.database import Base
from pulse.utils import now_in_app_naive_datetime


class LocationModel(Base):
    """Database representation of a place hosting events and stands."""

    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False, index=True)
    address = Column(String(255), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    events = relationship("EventModel", back_populates="location")
    stands = relationship("StandModel", back_populates="location")


__all__ = ["LocationModel"]
