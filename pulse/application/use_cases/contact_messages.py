"""Use cases for the public contact form."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from pulse.application.errors import NotFoundError
from pulse.domain.entities import ContactMessage
from pulse.infrastructure.repositories import ContactMessageRepository


def submit_contact_message(
    session: Session, *, name: str, email: str, subject: str, message: str
) -> ContactMessage:
    values = [value.strip() for value in (name, email, subject, message)]
    if not all(values):
        raise ValueError("Tous les champs sont requis")
    name, email, subject, message = values
    if "@" not in email:
        raise ValueError("Format d'email invalide")
    return ContactMessageRepository(session).create(
        ContactMessage(
            id=None,
            name=name,
            email=email.lower(),
            subject=subject,
            message=message,
        )
    )


def list_contact_messages(session: Session) -> Sequence[ContactMessage]:
    return ContactMessageRepository(session).list()


def mark_contact_message(session: Session, message_id: int, *, read: bool) -> ContactMessage:
    repository = ContactMessageRepository(session)
    if repository.get(message_id) is None:
        raise NotFoundError("Message introuvable")
    return repository.set_read(message_id, read)


def delete_contact_message(session: Session, message_id: int) -> None:
    repository = ContactMessageRepository(session)
    if repository.get(message_id) is None:
        raise NotFoundError("Message introuvable")
    repository.delete(message_id)


__all__ = [
    "delete_contact_message",
    "list_contact_messages",
    "mark_contact_message",
    "submit_contact_message",
]
