"""Persistence layer for stands."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from pulse.domain.entities import Stand
from pulse.infrastructure.models import StandModel
from pulse.utils import ensure_app_naive_datetime

from .mappers import stand_to_entity


class StandRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Stand]:
        query = self.session.query(StandModel).order_by(
            StandModel.created_at.desc(), StandModel.id.desc()
        )
        return [stand_to_entity(model) for model in query.all()]

    def get(self, stand_id: int) -> Stand | None:
        model = self.session.get(StandModel, stand_id)
        return stand_to_entity(model) if model else None

    def create(self, stand: Stand) -> Stand:
        model = StandModel()
        self._apply_entity_to_model(model, stand)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return stand_to_entity(model)

    def update(self, stand: Stand) -> Stand:
        model = self.session.get(StandModel, stand.id)
        if model is None:
            msg = f"Stand with id {stand.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, stand)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return stand_to_entity(model)

    def delete(self, stand_id: int) -> None:
        model = self.session.get(StandModel, stand_id)
        if model is None:
            msg = f"Stand with id {stand_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: StandModel, stand: Stand) -> None:
        model.name = stand.name
        model.description = stand.description
        model.type = stand.type
        model.location_id = stand.location_id
        model.event_id = stand.event_id
        model.opened_at = ensure_app_naive_datetime(stand.opened_at)
        model.closed_at = ensure_app_naive_datetime(stand.closed_at)


__all__ = ["StandRepository"]
