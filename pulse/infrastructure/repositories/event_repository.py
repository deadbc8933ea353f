"""Persistence layer for events."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from pulse.domain.entities import Event
from pulse.infrastructure.models import EventModel, LocationModel
from pulse.utils import ensure_app_naive_datetime

from .mappers import event_to_entity


class EventRepository:
    """Provide CRUD and search operations for events."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        skip: int = 0,
        limit: int = 20,
        search: str | None = None,
        genre: str | None = None,
        event_type: str | None = None,
        artist_id: int | None = None,
        starting_after: datetime | None = None,
    ) -> tuple[Sequence[Event], int]:
        query = self.session.query(EventModel).outerjoin(
            LocationModel, EventModel.location_id == LocationModel.id
        )
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(
                    EventModel.title.ilike(pattern),
                    EventModel.description.ilike(pattern),
                    LocationModel.name.ilike(pattern),
                )
            )
        if genre:
            query = query.filter(EventModel.genre == genre)
        if event_type:
            query = query.filter(EventModel.type == event_type)
        if artist_id is not None:
            query = query.filter(EventModel.artist_id == artist_id)
        if starting_after is not None:
            query = query.filter(
                EventModel.start_date >= ensure_app_naive_datetime(starting_after)
            )

        total = query.count()
        models = (
            query.order_by(EventModel.start_date.asc(), EventModel.id.asc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return [event_to_entity(model) for model in models], total

    def get(self, event_id: int) -> Event | None:
        model = self.session.get(EventModel, event_id)
        return event_to_entity(model) if model else None

    def find_artist_event_between(
        self,
        artist_id: int,
        start: datetime,
        end: datetime,
        *,
        exclude_event_id: int | None = None,
    ) -> Event | None:
        query = (
            self.session.query(EventModel)
            .filter(EventModel.artist_id == artist_id)
            .filter(EventModel.start_date >= ensure_app_naive_datetime(start))
            .filter(EventModel.start_date <= ensure_app_naive_datetime(end))
        )
        if exclude_event_id is not None:
            query = query.filter(EventModel.id != exclude_event_id)
        model = query.order_by(EventModel.start_date.asc()).first()
        return event_to_entity(model) if model else None

    def create(self, event: Event) -> Event:
        model = EventModel()
        self._apply_entity_to_model(model, event)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return event_to_entity(model)

    def update(self, event: Event) -> Event:
        model = self.session.get(EventModel, event.id)
        if model is None:
            msg = f"Event with id {event.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, event)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return event_to_entity(model)

    def delete(self, event_id: int) -> None:
        model = self.session.get(EventModel, event_id)
        if model is None:
            msg = f"Event with id {event_id} not found"
            raise ValueError(msg)
        for stand in list(model.stands):
            stand.event_id = None
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: EventModel, event: Event) -> None:
        model.title = event.title
        model.description = event.description
        model.start_date = ensure_app_naive_datetime(event.start_date)
        model.genre = event.genre
        model.type = event.type
        model.location_id = event.location_id
        model.artist_id = event.artist_id
        model.image_path = event.image_path
        model.price = event.price
        model.currency = event.currency


__all__ = ["EventRepository"]
