from fastapi import FastAPI

from .artists import router as artists_router
from .auth import router as auth_router
from .contact import router as contact_router
from .events import router as events_router
from .locations import router as locations_router
from .notifications import router as notifications_router
from .payments import router as payments_router
from .scheduled_notifications import cron_router
from .scheduled_notifications import router as scheduled_notifications_router
from .stands import router as stands_router
from .uploads import router as uploads_router
from .users import router as users_router

API_PREFIX = "/api"


def register_routes(app: FastAPI) -> None:
    """Mount every API router under ``/api``."""

    for router in (
        auth_router,
        users_router,
        artists_router,
        locations_router,
        stands_router,
        events_router,
        contact_router,
        notifications_router,
        scheduled_notifications_router,
        cron_router,
        payments_router,
        uploads_router,
    ):
        app.include_router(router, prefix=API_PREFIX)
