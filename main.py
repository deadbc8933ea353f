import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pulse.application.use_cases.notifications import send_due_reminders
from pulse.config import get_settings
from pulse.infrastructure.database import SessionLocal, engine, initialize_database
from pulse.infrastructure.logging_config import setup_logging
from pulse.infrastructure.scheduler import NotificationScheduler
from pulse.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup; stop the scheduler and release the engine on shutdown."""

    initialize_database()
    if get_settings().scheduler_autostart:
        app.state.scheduler.start()
    yield
    app.state.scheduler.stop()
    engine.dispose()


def _validation_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Requête invalide"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"Paramètre invalide : {location}" if location else "Requête invalide"


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed input (including non-numeric identifiers) with 400."""

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": _validation_error_message(exc),
            "errors": jsonable_encoder(exc.errors()),
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Erreur interne du serveur"},
    )


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""

    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Pulse API", lifespan=lifespan)
    app.state.scheduler = NotificationScheduler(
        send_due_reminders,
        session_factory=SessionLocal,
        interval_seconds=settings.scheduler_interval_seconds,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    register_routes(app)
    return app


app = create_app()
