"""SQLAlchemy model remembering payment gateway events already handled."""

from sqlalchemy import Column, DateTime, Integer, String

from pulse.infrastructure.database import Base
from pulse.utils import now_in_app_naive_datetime


class ProcessedWebhookEventModel(Base):
    __tablename__ = "processed_webhook_events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(String(255), unique=True, nullable=False, index=True)
    event_type = Column(String(100), nullable=False)
    processed_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ProcessedWebhookEventModel"]
