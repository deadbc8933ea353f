"""Use case for self-service account creation."""

from sqlalchemy.orm import Session

from pulse.application.errors import ConflictError
from pulse.domain.entities import ROLE_USER, User
from pulse.infrastructure.repositories import UserRepository
from pulse.infrastructure.security import get_password_hash
from pulse.utils import now_in_app_timezone

from .validators import normalize_email, normalize_username, validate_password


def register_user(
    session: Session,
    *,
    username: str,
    email: str,
    password: str,
    role: str = ROLE_USER,
) -> User:
    """Create a user ensuring unique, lower-cased usernames and e-mails."""

    username = normalize_username(username)
    email = normalize_email(email)
    validate_password(password)

    repository = UserRepository(session)
    if repository.get_by_email(email) or repository.get_by_username(username):
        raise ConflictError(
            "Un utilisateur avec cet email ou ce nom d'utilisateur existe déjà"
        )

    user = User(
        id=None,
        username=username,
        email=email,
        password=get_password_hash(password),
        role=role,
        created_at=now_in_app_timezone(),
    )
    return repository.create(user)
