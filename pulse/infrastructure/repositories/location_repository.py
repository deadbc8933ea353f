"""Persistence layer for locations."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from pulse.domain.entities import Location
from pulse.infrastructure.models import EventModel, LocationModel, StandModel

from .mappers import event_to_entity, location_to_entity, stand_to_entity


class LocationRepository:
    """Provide CRUD and search operations for locations."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        skip: int = 0,
        limit: int = 100,
        search: str | None = None,
        has_coordinates: bool | None = None,
    ) -> tuple[Sequence[Location], int]:
        query = self.session.query(LocationModel)
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(
                    LocationModel.name.ilike(pattern),
                    LocationModel.address.ilike(pattern),
                )
            )
        if has_coordinates is True:
            query = query.filter(
                LocationModel.latitude.is_not(None),
                LocationModel.longitude.is_not(None),
            )
        elif has_coordinates is False:
            query = query.filter(
                or_(
                    LocationModel.latitude.is_(None),
                    LocationModel.longitude.is_(None),
                )
            )

        total = query.count()
        models = (
            query.order_by(LocationModel.name.asc(), LocationModel.id.asc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return [location_to_entity(model) for model in models], total

    def get(self, location_id: int, *, include_related: bool = False) -> Location | None:
        query = self.session.query(LocationModel).filter(LocationModel.id == location_id)
        if include_related:
            query = query.options(
                selectinload(LocationModel.events),
                selectinload(LocationModel.stands),
            )
        model = query.first()
        if model is None:
            return None
        location = location_to_entity(model)
        if include_related:
            location.events = [
                event_to_entity(event)
                for event in sorted(model.events, key=lambda item: item.start_date)
            ]
            location.stands = [stand_to_entity(stand) for stand in model.stands]
        return location

    def exists(self, location_id: int) -> bool:
        return self.session.get(LocationModel, location_id) is not None

    def count_references(self, location_id: int) -> tuple[int, int]:
        """Return how many events and stands still point to the location."""

        events = (
            self.session.query(EventModel)
            .filter(EventModel.location_id == location_id)
            .count()
        )
        stands = (
            self.session.query(StandModel)
            .filter(StandModel.location_id == location_id)
            .count()
        )
        return events, stands

    def create(self, location: Location) -> Location:
        model = LocationModel()
        self._apply_entity_to_model(model, location)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return location_to_entity(model)

    def update(self, location: Location) -> Location:
        model = self.session.get(LocationModel, location.id)
        if model is None:
            msg = f"Location with id {location.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, location)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return location_to_entity(model)

    def delete(self, location_id: int) -> None:
        model = self.session.get(LocationModel, location_id)
        if model is None:
            msg = f"Location with id {location_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: LocationModel, location: Location) -> None:
        model.name = location.name
        model.address = location.address
        model.latitude = location.latitude
        model.longitude = location.longitude


__all__ = ["LocationRepository"]
