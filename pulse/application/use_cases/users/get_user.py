"""Use case for retrieving a single user."""

from sqlalchemy.orm import Session

from pulse.application.errors import NotFoundError
from pulse.domain.entities import User
from pulse.infrastructure.repositories import UserRepository


def get_user(session: Session, user_id: int) -> User:
    """Return the requested user or raise an error if it does not exist."""

    user = UserRepository(session).get(user_id)
    if user is None:
        raise NotFoundError("Utilisateur introuvable")
    return user
