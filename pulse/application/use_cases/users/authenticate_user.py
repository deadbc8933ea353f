"""Use case for authenticating a user."""

from dataclasses import replace

from sqlalchemy.orm import Session

from pulse.domain.entities import User
from pulse.infrastructure.repositories import UserRepository
from pulse.infrastructure.security import get_password_hash, needs_rehash, verify_password


def authenticate_user(session: Session, email: str, password: str) -> User | None:
    """Return the user matching the credentials, or ``None``.

    Hashes produced with outdated parameters are upgraded on a successful login.
    """

    repository = UserRepository(session)
    user = repository.get_by_email(email)
    if user is None or not verify_password(password, user.password):
        return None

    if needs_rehash(user.password):
        user = repository.update(replace(user, password=get_password_hash(password)))
    return user
