"""Domain entity representing a scheduled event."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .location import Location

EVENT_GENRES = ("RAP", "RNB", "REGGAE", "ROCK")
EVENT_TYPES = ("CONCERT", "FESTIVAL", "ACCOUSTIQUE", "SHOWCASE", "OTHER")
DEFAULT_CURRENCY = "EUR"


@dataclass
class ArtistSummary:
    """Minimal artist information embedded in events."""

    id: int
    name: str
    image_path: str | None = None


@dataclass
class Event:
    """Concert, festival or showcase users can attend."""

    id: int | None
    title: str
    description: str
    start_date: datetime
    genre: str
    type: str
    location_id: int | None
    artist_id: int | None = None
    image_path: str | None = None
    price: float = 0.0
    currency: str = DEFAULT_CURRENCY
    created_at: datetime | None = None
    artist: ArtistSummary | None = None
    location: Location | None = None

    @property
    def is_paid(self) -> bool:
        return self.price > 0


__all__ = [
    "ArtistSummary",
    "DEFAULT_CURRENCY",
    "EVENT_GENRES",
    "EVENT_TYPES",
    "Event",
]
