"""Use case for deleting a user."""

from sqlalchemy.orm import Session

from pulse.application.errors import NotFoundError
from pulse.domain.entities import User
from pulse.infrastructure.repositories import UserRepository


def delete_user(session: Session, user_id: int, *, requested_by: User) -> None:
    """Delete the specified user along with their participations and notifications."""

    if requested_by.id == user_id:
        raise ValueError("Vous ne pouvez pas supprimer votre propre compte")

    repository = UserRepository(session)
    if repository.get(user_id) is None:
        raise NotFoundError("Utilisateur introuvable")
    repository.delete(user_id)
