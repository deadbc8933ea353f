"""Use case for listing users."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from pulse.domain.entities import User
from pulse.infrastructure.repositories import UserRepository


def list_users(session: Session, *, skip: int = 0, limit: int = 100) -> Sequence[User]:
    """Return users, newest first, respecting pagination parameters."""

    return UserRepository(session).list(skip=skip, limit=limit)
