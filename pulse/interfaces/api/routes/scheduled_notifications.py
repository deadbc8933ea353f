"""Routes des rappels planifiés et du planificateur."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from pulse.application.use_cases.notifications import (
    create_scheduled_notification,
    list_scheduled_notifications,
)
from pulse.domain.entities import User
from pulse.infrastructure.database import get_db
from pulse.infrastructure.scheduler import NotificationScheduler
from pulse.interfaces.api.dependencies import get_scheduler, require_admin
from pulse.interfaces.api.routes_helpers import page_to_offset, translate_errors
from pulse.interfaces.api.schemas import (
    MessageResponse,
    PaginationRead,
    ScheduledNotificationCreate,
    ScheduledNotificationListResponse,
    ScheduledNotificationRead,
    SchedulerStatusRead,
)

router = APIRouter(prefix="/scheduled-notifications", tags=["scheduled-notifications"])
cron_router = APIRouter(prefix="/cron", tags=["scheduler"])


@router.get("", response_model=ScheduledNotificationListResponse)
def list_scheduled(
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=200),
    type: str | None = None,
    is_sent: bool | None = None,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    items, total = list_scheduled_notifications(
        db,
        skip=page_to_offset(page, limit),
        limit=limit,
        notification_type=type,
        is_sent=is_sent,
    )
    return ScheduledNotificationListResponse(
        notifications=[ScheduledNotificationRead.model_validate(item) for item in items],
        pagination=PaginationRead.build(page=page, limit=limit, total=total),
    )


@router.post(
    "", response_model=ScheduledNotificationRead, status_code=status.HTTP_201_CREATED
)
def create_scheduled(
    payload: ScheduledNotificationCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        scheduled = create_scheduled_notification(
            db,
            event_id=payload.event_id,
            notification_type=payload.type,
            scheduled_for=payload.scheduled_for,
            title=payload.title,
            message=payload.message,
        )
    return ScheduledNotificationRead.model_validate(scheduled)


@cron_router.post("/start-scheduler", response_model=MessageResponse)
def start_scheduler(
    scheduler: NotificationScheduler = Depends(get_scheduler),
    _: User = Depends(require_admin),
):
    scheduler.start()
    return MessageResponse(message="Planificateur démarré")


@cron_router.post("/stop-scheduler", response_model=MessageResponse)
def stop_scheduler(
    scheduler: NotificationScheduler = Depends(get_scheduler),
    _: User = Depends(require_admin),
):
    scheduler.stop()
    return MessageResponse(message="Planificateur arrêté")


@cron_router.get("/status", response_model=SchedulerStatusRead)
def scheduler_status(scheduler: NotificationScheduler = Depends(get_scheduler)):
    return SchedulerStatusRead(**scheduler.status())
