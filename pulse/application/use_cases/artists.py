"""Use cases for managing artists."""

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from pulse.application.errors import NotFoundError
from pulse.domain.entities import Artist
from pulse.infrastructure.repositories import ArtistRepository

MIN_ARTIST_NAME_LENGTH = 2


def _clean_name(name: str) -> str:
    value = name.strip()
    if len(value) < MIN_ARTIST_NAME_LENGTH:
        raise ValueError("Le nom de l'artiste doit contenir au moins 2 caractères")
    return value


def _clean_optional(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def list_artists(session: Session) -> Sequence[Artist]:
    """Return artists, newest first, each with its events ordered by date."""

    return ArtistRepository(session).list()


def get_artist(session: Session, artist_id: int) -> Artist:
    artist = ArtistRepository(session).get(artist_id, include_events=True)
    if artist is None:
        raise NotFoundError("Artiste introuvable")
    return artist


def create_artist(
    session: Session,
    *,
    name: str,
    description: str | None = None,
    image_path: str | None = None,
) -> Artist:
    artist = Artist(
        id=None,
        name=_clean_name(name),
        description=_clean_optional(description),
        image_path=_clean_optional(image_path),
    )
    return ArtistRepository(session).create(artist)


def update_artist(
    session: Session, artist_id: int, *, changes: Mapping[str, Any]
) -> Artist:
    """Apply the provided fields only; omitted fields keep their value."""

    repository = ArtistRepository(session)
    artist = repository.get(artist_id)
    if artist is None:
        raise NotFoundError("Artiste introuvable")

    if "name" in changes:
        if changes["name"] is None:
            raise ValueError("Le nom de l'artiste est requis")
        artist = replace(artist, name=_clean_name(changes["name"]))
    for field_name in ("description", "image_path"):
        if field_name in changes:
            artist = replace(artist, **{field_name: _clean_optional(changes[field_name])})
    return repository.update(artist)


def delete_artist(session: Session, artist_id: int) -> None:
    """Delete the artist; its events stay without an artist."""

    repository = ArtistRepository(session)
    if not repository.exists(artist_id):
        raise NotFoundError("Artiste introuvable")
    repository.delete(artist_id)


__all__ = [
    "create_artist",
    "delete_artist",
    "get_artist",
    "list_artists",
    "update_artist",
]
