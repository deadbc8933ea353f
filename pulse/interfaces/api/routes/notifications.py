"""Routes de la boîte de notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from pulse.application.use_cases.notifications import (
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    send_notification as send_notification_uc,
    set_notification_read,
)
from pulse.domain.entities import Notification, User
from pulse.infrastructure.database import get_db
from pulse.interfaces.api.dependencies import get_current_user, require_admin
from pulse.interfaces.api.routes_helpers import translate_errors
from pulse.interfaces.api.schemas import (
    MessageResponse,
    NotificationCreate,
    NotificationRead,
    NotificationUpdate,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.get("", response_model=list[NotificationRead])
def list_notifications(
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Notifications de l'utilisateur courant, les plus récentes d'abord."""

    notifications = list_notifications_uc(db, user=current_user, limit=limit)
    return [_notification_to_schema(item) for item in notifications]


@router.post(
    "", response_model=list[NotificationRead], status_code=status.HTTP_201_CREATED
)
def send_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Envoie une notification à un utilisateur ou à tous."""

    with translate_errors():
        created = send_notification_uc(
            db,
            title=payload.title,
            message=payload.message,
            notification_type=payload.type,
            user_id=payload.user_id,
            send_to_all=payload.send_to_all,
        )
    return [_notification_to_schema(item) for item in created]


@router.put("/{notification_id}", response_model=NotificationRead)
def update_notification(
    notification_id: int,
    payload: NotificationUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    with translate_errors():
        notification = set_notification_read(
            db, notification_id, read=payload.read, requested_by=current_user
        )
    return _notification_to_schema(notification)


@router.delete("/{notification_id}", response_model=MessageResponse)
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    with translate_errors():
        delete_notification_uc(db, notification_id, requested_by=current_user)
    return MessageResponse(message="Notification supprimée")
