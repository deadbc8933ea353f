"""Use case for updating user information."""

from dataclasses import replace

from sqlalchemy.orm import Session

from pulse.application.errors import ConflictError, NotFoundError
from pulse.domain.entities import User
from pulse.infrastructure.repositories import UserRepository
from pulse.infrastructure.security import get_password_hash

from .validators import (
    normalize_email,
    normalize_role,
    normalize_username,
    validate_password,
)


def update_user(
    session: Session,
    *,
    user_id: int,
    username: str | None = None,
    email: str | None = None,
    role: str | None = None,
    password: str | None = None,
) -> User:
    """Apply the provided changes, keeping usernames and e-mails unique."""

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise NotFoundError("Utilisateur introuvable")

    updated_user = current_user
    if username is not None:
        new_username = normalize_username(username)
        existing = repository.get_by_username(new_username)
        if existing and existing.id != user_id:
            raise ConflictError("Ce nom d'utilisateur est déjà utilisé")
        updated_user = replace(updated_user, username=new_username)

    if email is not None:
        new_email = normalize_email(email)
        existing = repository.get_by_email(new_email)
        if existing and existing.id != user_id:
            raise ConflictError("Cet email est déjà utilisé")
        updated_user = replace(updated_user, email=new_email)

    if role is not None:
        updated_user = replace(updated_user, role=normalize_role(role))

    if password:
        validate_password(password)
        updated_user = replace(updated_user, password=get_password_hash(password))

    return repository.update(updated_user)
