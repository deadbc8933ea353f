"""SQLAlchemy model for event reminders waiting to be fired."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from pulse.infrastructure.database import Base
from pulse.utils import now_in_app_naive_datetime


class ScheduledNotificationModel(Base):
    """Database representation of a reminder attached to an event."""

    __tablename__ = "event_notifications"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(
        Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type = Column(String(30), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    scheduled_for = Column(DateTime, nullable=False, index=True)
    is_sent = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    sent_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    event = relationship(
        "EventModel", back_populates="scheduled_notifications", lazy="joined"
    )


__all__ = ["ScheduledNotificationModel"]
