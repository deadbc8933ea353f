"""Routes des événements, des inscriptions et des participants."""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from pulse.application.use_cases.events import (
    create_event as create_event_uc,
    delete_event as delete_event_uc,
    get_event as get_event_uc,
    list_events as list_events_uc,
    update_event as update_event_uc,
)
from pulse.application.use_cases.participations import (
    get_registration_status,
    list_event_participants,
    register_for_event,
    unregister_from_event,
)
from pulse.domain.entities import Event, User
from pulse.infrastructure.database import get_db
from pulse.interfaces.api.dependencies import (
    get_current_user,
    get_optional_user,
    require_admin,
)
from pulse.interfaces.api.routes_helpers import page_to_offset, translate_errors
from pulse.interfaces.api.schemas import (
    EventCreate,
    EventListResponse,
    EventRead,
    EventUpdate,
    MessageResponse,
    PaginationRead,
    ParticipantRead,
    ParticipantsEventRead,
    ParticipantsResponse,
    ParticipationRead,
    RegistrationResponse,
    RegistrationStatusRead,
)

router = APIRouter(prefix="/events", tags=["events"])
logger = logging.getLogger(__name__)


def _to_read_model(event: Event) -> EventRead:
    return EventRead.model_validate(event)


@router.get("", response_model=EventListResponse)
def list_events(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    search: str | None = None,
    genre: str | None = None,
    type: str | None = None,
    artist_id: int | None = None,
    upcoming: bool = False,
    db: Session = Depends(get_db),
):
    """Événements triés par date de début, filtrables et paginés."""

    events, total = list_events_uc(
        db,
        skip=page_to_offset(page, limit),
        limit=limit,
        search=search,
        genre=genre,
        event_type=type,
        artist_id=artist_id,
        upcoming=upcoming,
    )
    return EventListResponse(
        events=[_to_read_model(event) for event in events],
        pagination=PaginationRead.build(page=page, limit=limit, total=total),
    )


@router.post("", response_model=EventRead, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: EventCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Crée un événement et planifie ses rappels."""

    with translate_errors():
        event = create_event_uc(db, **payload.model_dump())
    logger.info("Event %s created by %s", event.id, current_user.id)
    return _to_read_model(event)


@router.get("/{event_id}", response_model=EventRead)
def read_event(event_id: int, db: Session = Depends(get_db)):
    with translate_errors():
        event = get_event_uc(db, event_id)
    return _to_read_model(event)


@router.put("/{event_id}", response_model=EventRead)
def update_event(
    event_id: int,
    payload: EventUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        event = update_event_uc(
            db, event_id, changes=payload.model_dump(exclude_unset=True)
        )
    return _to_read_model(event)


@router.delete("/{event_id}", response_model=MessageResponse)
def delete_event(
    event_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        delete_event_uc(db, event_id)
    return MessageResponse(message="Événement supprimé avec succès")


@router.post(
    "/{event_id}/register",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Inscrit l'utilisateur ; un événement gratuit est réglé immédiatement."""

    with translate_errors():
        participation = register_for_event(db, user=current_user, event_id=event_id)
    return RegistrationResponse(
        message="Inscription réussie",
        participation=ParticipationRead.model_validate(participation),
    )


@router.delete("/{event_id}/register", response_model=MessageResponse)
def unregister(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    with translate_errors():
        unregister_from_event(db, user=current_user, event_id=event_id)
    return MessageResponse(message="Désinscription réussie")


@router.get("/{event_id}/register", response_model=RegistrationStatusRead)
def registration_status(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
):
    registration = get_registration_status(db, user=current_user, event_id=event_id)
    return RegistrationStatusRead.model_validate(registration)


@router.get("/{event_id}/participants", response_model=ParticipantsResponse)
def list_participants(
    event_id: int,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    search: str | None = None,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        event, participants, total, overall = list_event_participants(
            db,
            event_id=event_id,
            skip=page_to_offset(page, limit),
            limit=limit,
            search=search,
        )
    return ParticipantsResponse(
        event=ParticipantsEventRead(
            id=event.id,
            title=event.title,
            start_date=event.start_date,
            total_participants=overall,
        ),
        participants=[ParticipantRead.model_validate(item) for item in participants],
        pagination=PaginationRead.build(page=page, limit=limit, total=total),
    )
