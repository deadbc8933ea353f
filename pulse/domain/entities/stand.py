"""Domain entity representing an exhibitor stand."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .location import Location

STAND_TYPES = ("FOOD", "ACTIVITE", "TATOOS", "SOUVENIRS", "MERCH")


@dataclass
class Stand:
    """Stand placed on a location, optionally tied to an event."""

    id: int | None
    name: str
    description: str
    type: str
    location_id: int
    opened_at: datetime
    closed_at: datetime
    event_id: int | None = None
    created_at: datetime | None = None
    location: Location | None = None
    event_title: str | None = None


__all__ = ["STAND_TYPES", "Stand"]
