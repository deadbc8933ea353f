"""Persistence layer for contact form messages."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from pulse.domain.entities import ContactMessage
from pulse.infrastructure.models import ContactMessageModel
from pulse.utils import ensure_app_timezone


class ContactMessageRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[ContactMessage]:
        query = self.session.query(ContactMessageModel).order_by(
            ContactMessageModel.created_at.desc(), ContactMessageModel.id.desc()
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, message_id: int) -> ContactMessage | None:
        model = self.session.get(ContactMessageModel, message_id)
        return self._to_entity(model) if model else None

    def create(self, message: ContactMessage) -> ContactMessage:
        model = ContactMessageModel(
            name=message.name,
            email=message.email,
            subject=message.subject,
            message=message.message,
            read=message.read,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def set_read(self, message_id: int, read: bool) -> ContactMessage:
        model = self.session.get(ContactMessageModel, message_id)
        if model is None:
            msg = f"Contact message with id {message_id} not found"
            raise ValueError(msg)
        model.read = read
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, message_id: int) -> None:
        model = self.session.get(ContactMessageModel, message_id)
        if model is None:
            msg = f"Contact message with id {message_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _to_entity(model: ContactMessageModel) -> ContactMessage:
        return ContactMessage(
            id=model.id,
            name=model.name,
            email=model.email,
            subject=model.subject,
            message=model.message,
            read=bool(model.read),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ContactMessageRepository"]
