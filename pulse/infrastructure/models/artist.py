"""SQLAlchemy model for artists."""

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from pulse.infrastructure.database import Base
from pulse.utils import now_in_app_naive_datetime


class ArtistModel(Base):
    __tablename__ = "artists"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=True)
    image_path = Column(String(255), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    events = relationship(
        "EventModel",
        back_populates="artist",
        order_by="EventModel.start_date",
    )


__all__ = ["ArtistModel"]
