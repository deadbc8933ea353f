"""Shared fixtures for the API test-suite."""

from __future__ import annotations

import os
import shutil
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

TEST_DB_PATH = Path(tempfile.gettempdir()) / "pulse_api_test.db"
TEST_UPLOAD_DIR = Path(tempfile.gettempdir()) / "pulse_api_test_uploads"

os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "Europe/Paris"
os.environ["UPLOAD_DIR"] = str(TEST_UPLOAD_DIR)
os.environ["SCHEDULER_AUTOSTART"] = "false"
for name in (
    "SENDGRID_API_KEY",
    "SENDGRID_SENDER",
    "STRIPE_SECRET_KEY",
    "STRIPE_WEBHOOK_SECRET",
):
    os.environ.pop(name, None)

from pulse.config import get_settings  # noqa: E402

get_settings.cache_clear()

from pulse.domain.entities import ROLE_ADMIN, ROLE_USER, User  # noqa: E402
from pulse.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from pulse.infrastructure.models import (  # noqa: E402
    EventModel,
    LocationModel,
    UserModel,
)
from pulse.infrastructure.payments import (  # noqa: E402
    PaymentIntentHandle,
    StripePaymentGateway,
    get_payment_gateway,
)
from pulse.infrastructure.repositories import UserRepository  # noqa: E402
from pulse.infrastructure.security import (  # noqa: E402
    create_user_access_token,
    get_password_hash,
)
from pulse.utils import ensure_app_naive_datetime, now_in_app_timezone  # noqa: E402
from main import create_app  # noqa: E402

DEFAULT_PASSWORD = "Secret123"


class FakePaymentGateway(StripePaymentGateway):
    """Stripe gateway that issues local payment intents instead of calling Stripe."""

    def __init__(self, settings=None) -> None:
        super().__init__(settings)
        self.created: list[dict] = []

    def create_payment_intent(self, *, amount, currency, metadata):
        intent_id = f"pi_test_{len(self.created) + 1}"
        self.created.append(
            {"id": intent_id, "amount": amount, "currency": currency, "metadata": metadata}
        )
        return PaymentIntentHandle(id=intent_id, client_secret=f"{intent_id}_secret")


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    shutil.rmtree(TEST_UPLOAD_DIR, ignore_errors=True)


@pytest.fixture()
def app():
    return create_app()


@pytest.fixture()
def payment_gateway(app):
    gateway = FakePaymentGateway(get_settings())
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    return gateway


@pytest.fixture()
def client(app, payment_gateway):
    with TestClient(app) as test_client:
        yield test_client


def create_user(
    *,
    username: str,
    email: str,
    password: str = DEFAULT_PASSWORD,
    role: str = ROLE_USER,
) -> User:
    """Insert a user record and return it as a domain entity."""

    with SessionLocal() as session:
        model = UserModel(
            username=username,
            email=email,
            password=get_password_hash(password),
            role=role,
        )
        session.add(model)
        session.commit()
        return UserRepository(session).get(model.id)


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_user_access_token(user)}"}


@pytest.fixture()
def admin() -> User:
    return create_user(username="admin", email="admin@pulse.fr", role=ROLE_ADMIN)


@pytest.fixture()
def admin_headers(admin: User) -> dict[str, str]:
    return auth_headers(admin)


@pytest.fixture()
def member() -> User:
    return create_user(username="alice", email="alice@pulse.fr")


@pytest.fixture()
def member_headers(member: User) -> dict[str, str]:
    return auth_headers(member)


@pytest.fixture()
def location_id() -> int:
    with SessionLocal() as session:
        model = LocationModel(
            name="Zénith de Paris",
            address="211 Avenue Jean Jaurès, 75019 Paris",
            latitude=48.8942,
            longitude=2.3933,
        )
        session.add(model)
        session.commit()
        return model.id


def future_start(days: int = 7) -> datetime:
    return (now_in_app_timezone() + timedelta(days=days)).replace(microsecond=0)


def event_payload(location_id: int, **overrides) -> dict:
    payload = {
        "title": "Nuit du Rap",
        "description": "Une soirée entière dédiée au rap français.",
        "start_date": future_start().isoformat(),
        "genre": "RAP",
        "type": "CONCERT",
        "location_id": location_id,
        "price": 0,
    }
    payload.update(overrides)
    return payload


def insert_event(
    *,
    location_id: int,
    start_date: datetime,
    title: str = "Concert passé",
    price: float = 0.0,
) -> int:
    """Insert an event row directly, bypassing the future-date rule."""

    with SessionLocal() as session:
        model = EventModel(
            title=title,
            description="Un événement inséré pour les tests.",
            start_date=ensure_app_naive_datetime(start_date),
            genre="ROCK",
            type="CONCERT",
            location_id=location_id,
            price=price,
            currency="EUR",
        )
        session.add(model)
        session.commit()
        return model.id
