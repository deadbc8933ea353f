"""Routes d'administration des utilisateurs."""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from pulse.application.use_cases.users import (
    delete_user as delete_user_uc,
    get_user as get_user_uc,
    list_user_events as list_user_events_uc,
    list_users as list_users_uc,
    update_user as update_user_uc,
)
from pulse.domain.entities import User
from pulse.infrastructure.database import get_db
from pulse.interfaces.api.dependencies import get_current_user, require_admin
from pulse.interfaces.api.routes_helpers import translate_errors
from pulse.interfaces.api.schemas import (
    MessageResponse,
    UserEventRead,
    UserRead,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)):
    """Renvoie l'utilisateur authentifié."""

    return _to_read_model(current_user)


@router.get("", response_model=list[UserRead])
def list_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    return [_to_read_model(user) for user in list_users_uc(db, skip=skip, limit=limit)]


@router.get("/{user_id}", response_model=UserRead)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        user = get_user_uc(db, user_id)
    return _to_read_model(user)


@router.patch("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Met à jour partiellement un utilisateur."""

    with translate_errors():
        user = update_user_uc(db, user_id=user_id, **user_in.model_dump(exclude_unset=True))
    logger.info("User %s updated by %s", user_id, current_user.id)
    return _to_read_model(user)


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    with translate_errors():
        delete_user_uc(db, user_id, requested_by=current_user)
    logger.info("User %s deleted by %s", user_id, current_user.id)
    return MessageResponse(message="Utilisateur supprimé avec succès")


@router.get("/{user_id}/events", response_model=list[UserEventRead])
def list_user_events(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Inscriptions d'un utilisateur, triées par date d'événement."""

    with translate_errors():
        participations = list_user_events_uc(
            db, user_id=user_id, requested_by=current_user
        )
    return [UserEventRead.model_validate(item) for item in participations]
