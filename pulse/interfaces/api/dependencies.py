"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from pulse.domain.entities import User
from pulse.infrastructure.database import get_db
from pulse.infrastructure.repositories import UserRepository
from pulse.infrastructure.scheduler import NotificationScheduler
from pulse.infrastructure.security import decode_access_token, password_signature

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")
optional_oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/auth/token", auto_error=False
)


def _unauthorized(detail: str = "Authentification requise") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized("Identifiants invalides") from exc

    subject = payload.get("sub")
    signature_claim = payload.get("pwd_sig")
    if not isinstance(subject, str) or not isinstance(signature_claim, str):
        raise _unauthorized("Identifiants invalides")
    try:
        user_id = int(subject)
    except ValueError as exc:
        raise _unauthorized("Identifiants invalides") from exc

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _unauthorized("Utilisateur introuvable")

    # Changing the password or the role invalidates previously issued tokens.
    if signature_claim != password_signature(user):
        raise _unauthorized("Identifiants invalides")

    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def get_optional_user(
    token: str | None = Depends(optional_oauth2_scheme),
    db: Session = Depends(get_db),
) -> User | None:
    """Return the authenticated user, or ``None`` for anonymous requests."""

    if not token:
        return None
    try:
        return resolve_current_user(token, db)
    except HTTPException:
        return None


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if not current_user.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Accès non autorisé",
        )
    return current_user


def get_scheduler(request: Request) -> NotificationScheduler:
    """Return the scheduler owned by the running application."""

    return request.app.state.scheduler
