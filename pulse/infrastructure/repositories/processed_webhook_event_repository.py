"""Bookkeeping of payment gateway events that were already handled."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pulse.infrastructure.models import ProcessedWebhookEventModel


class ProcessedWebhookEventRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def record(self, event_id: str, event_type: str) -> bool:
        """Store ``event_id``; return ``False`` when another delivery stored it first."""

        self.session.add(
            ProcessedWebhookEventModel(event_id=event_id, event_type=event_type)
        )
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            return False
        return True

    def delete(self, event_id: str) -> None:
        self.session.query(ProcessedWebhookEventModel).filter(
            ProcessedWebhookEventModel.event_id == event_id
        ).delete(synchronize_session=False)
        self.session.commit()


__all__ = ["ProcessedWebhookEventRepository"]
