"""Persistence helpers for scheduled event reminders."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from pulse.domain.entities import ScheduledNotification
from pulse.infrastructure.models import ScheduledNotificationModel
from pulse.utils import ensure_app_naive_datetime, ensure_app_timezone

from .mappers import event_to_entity


class ScheduledNotificationRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        skip: int = 0,
        limit: int = 50,
        notification_type: str | None = None,
        is_sent: bool | None = None,
    ) -> tuple[Sequence[ScheduledNotification], int]:
        query = self.session.query(ScheduledNotificationModel)
        if notification_type:
            query = query.filter(ScheduledNotificationModel.type == notification_type)
        if is_sent is not None:
            query = query.filter(ScheduledNotificationModel.is_sent.is_(is_sent))
        total = query.count()
        models = (
            query.order_by(
                ScheduledNotificationModel.scheduled_for.asc(),
                ScheduledNotificationModel.id.asc(),
            )
            .offset(skip)
            .limit(limit)
            .all()
        )
        return [self._to_entity(model) for model in models], total

    def list_for_event(self, event_id: int) -> Sequence[ScheduledNotification]:
        query = (
            self.session.query(ScheduledNotificationModel)
            .filter(ScheduledNotificationModel.event_id == event_id)
            .order_by(ScheduledNotificationModel.scheduled_for.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_due(self, now: datetime) -> Sequence[ScheduledNotification]:
        """Return unsent reminders whose scheduled time is ``now`` or earlier."""

        query = (
            self.session.query(ScheduledNotificationModel)
            .filter(ScheduledNotificationModel.is_sent.is_(False))
            .filter(
                ScheduledNotificationModel.scheduled_for
                <= ensure_app_naive_datetime(now)
            )
            .order_by(
                ScheduledNotificationModel.scheduled_for.asc(),
                ScheduledNotificationModel.id.asc(),
            )
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, scheduled_id: int) -> ScheduledNotification | None:
        model = self.session.get(ScheduledNotificationModel, scheduled_id)
        return self._to_entity(model) if model else None

    def create(self, scheduled: ScheduledNotification) -> ScheduledNotification:
        model = ScheduledNotificationModel()
        self._apply_entity_to_model(model, scheduled)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, scheduled: ScheduledNotification) -> ScheduledNotification:
        model = self.session.get(ScheduledNotificationModel, scheduled.id)
        if model is None:
            msg = f"Scheduled notification with id {scheduled.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, scheduled)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_sent(self, scheduled_id: int, sent_at: datetime) -> None:
        model = self.session.get(ScheduledNotificationModel, scheduled_id)
        if model is None:
            msg = f"Scheduled notification with id {scheduled_id} not found"
            raise ValueError(msg)
        model.is_sent = True
        model.sent_at = ensure_app_naive_datetime(sent_at)
        self.session.add(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(
        model: ScheduledNotificationModel, scheduled: ScheduledNotification
    ) -> None:
        model.event_id = scheduled.event_id
        model.type = scheduled.type
        model.title = scheduled.title
        model.message = scheduled.message
        model.scheduled_for = ensure_app_naive_datetime(scheduled.scheduled_for)
        model.is_sent = scheduled.is_sent
        model.sent_at = ensure_app_naive_datetime(scheduled.sent_at)

    @staticmethod
    def _to_entity(model: ScheduledNotificationModel) -> ScheduledNotification:
        return ScheduledNotification(
            id=model.id,
            event_id=model.event_id,
            type=model.type,
            title=model.title,
            message=model.message,
            scheduled_for=ensure_app_timezone(model.scheduled_for),
            is_sent=bool(model.is_sent),
            sent_at=ensure_app_timezone(model.sent_at),
            created_at=ensure_app_timezone(model.created_at),
            event=event_to_entity(model.event) if model.event is not None else None,
        )


__all__ = ["ScheduledNotificationRepository"]
