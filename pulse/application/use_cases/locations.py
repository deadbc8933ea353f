"""Use cases for managing locations."""

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from pulse.application.errors import ConflictError, NotFoundError
from pulse.domain.entities import Location
from pulse.infrastructure.repositories import LocationRepository

MIN_LOCATION_NAME_LENGTH = 2


def _validate(location: Location) -> Location:
    name = (location.name or "").strip()
    if len(name) < MIN_LOCATION_NAME_LENGTH:
        raise ValueError("Le nom du lieu doit contenir au moins 2 caractères")
    if location.latitude is not None and not -90 <= location.latitude <= 90:
        raise ValueError("La latitude doit être entre -90 et 90")
    if location.longitude is not None and not -180 <= location.longitude <= 180:
        raise ValueError("La longitude doit être entre -180 et 180")
    address = location.address.strip() if location.address else None
    return replace(location, name=name, address=address or None)


def list_locations(
    session: Session,
    *,
    skip: int = 0,
    limit: int = 100,
    search: str | None = None,
    has_coordinates: bool | None = None,
) -> tuple[Sequence[Location], int]:
    """Return one page of locations ordered by name and the total match count."""

    return LocationRepository(session).list(
        skip=skip, limit=limit, search=search, has_coordinates=has_coordinates
    )


def get_location(session: Session, location_id: int) -> Location:
    """Return the location with its events and stands."""

    location = LocationRepository(session).get(location_id, include_related=True)
    if location is None:
        raise NotFoundError("Lieu introuvable")
    return location


def create_location(
    session: Session,
    *,
    name: str,
    address: str | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
) -> Location:
    location = _validate(
        Location(
            id=None,
            name=name,
            address=address,
            latitude=latitude,
            longitude=longitude,
        )
    )
    return LocationRepository(session).create(location)


def update_location(
    session: Session, location_id: int, *, changes: Mapping[str, Any]
) -> Location:
    repository = LocationRepository(session)
    location = repository.get(location_id)
    if location is None:
        raise NotFoundError("Lieu introuvable")

    allowed = {"name", "address", "latitude", "longitude"}
    location = _validate(
        replace(location, **{key: value for key, value in changes.items() if key in allowed})
    )
    return repository.update(location)


def delete_location(session: Session, location_id: int) -> None:
    """Delete a location that no event or stand references anymore."""

    repository = LocationRepository(session)
    if not repository.exists(location_id):
        raise NotFoundError("Lieu introuvable")

    events, stands = repository.count_references(location_id)
    if events or stands:
        msg = (
            "Impossible de supprimer ce lieu : "
            f"{events} événement(s) et {stands} stand(s) y sont rattachés"
        )
        raise ConflictError(msg)
    repository.delete(location_id)


__all__ = [
    "create_location",
    "delete_location",
    "get_location",
    "list_locations",
    "update_location",
]
