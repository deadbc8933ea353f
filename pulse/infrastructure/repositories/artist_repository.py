"""Persistence layer for artists."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session, selectinload

from pulse.domain.entities import Artist
from pulse.infrastructure.models import ArtistModel
from pulse.utils import ensure_app_timezone

from .mappers import event_to_entity


class ArtistRepository:
    """Provide CRUD operations for artists."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Artist]:
        query = (
            self.session.query(ArtistModel)
            .options(selectinload(ArtistModel.events))
            .order_by(ArtistModel.created_at.desc(), ArtistModel.id.desc())
        )
        return [self._to_entity(model, include_events=True) for model in query.all()]

    def get(self, artist_id: int, *, include_events: bool = False) -> Artist | None:
        model = self.session.get(ArtistModel, artist_id)
        return self._to_entity(model, include_events=include_events) if model else None

    def exists(self, artist_id: int) -> bool:
        return self.session.get(ArtistModel, artist_id) is not None

    def create(self, artist: Artist) -> Artist:
        model = ArtistModel()
        self._apply_entity_to_model(model, artist)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, artist: Artist) -> Artist:
        model = self.session.get(ArtistModel, artist.id)
        if model is None:
            msg = f"Artist with id {artist.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, artist)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, artist_id: int) -> None:
        model = self.session.get(ArtistModel, artist_id)
        if model is None:
            msg = f"Artist with id {artist_id} not found"
            raise ValueError(msg)
        # Events keep existing without their artist.
        for event in list(model.events):
            event.artist_id = None
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: ArtistModel, artist: Artist) -> None:
        model.name = artist.name
        model.description = artist.description
        model.image_path = artist.image_path

    @staticmethod
    def _to_entity(model: ArtistModel, *, include_events: bool = False) -> Artist:
        return Artist(
            id=model.id,
            name=model.name,
            description=model.description,
            image_path=model.image_path,
            created_at=ensure_app_timezone(model.created_at),
            events=[event_to_entity(event) for event in model.events]
            if include_events
            else [],
        )


__all__ = ["ArtistRepository"]
