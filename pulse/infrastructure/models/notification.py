"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from pulse.domain.entities import NOTIFICATION_TYPE_INFO
from pulse.infrastructure.database import Base
from pulse.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String(20), nullable=False, default=NOTIFICATION_TYPE_INFO)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    read_at = Column(DateTime(), nullable=True)

    user = relationship("UserModel", back_populates="notifications")


__all__ = ["NotificationModel"]
