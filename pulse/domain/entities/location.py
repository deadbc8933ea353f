"""Domain entity representing a venue."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .event import Event
    from .stand import Stand


@dataclass
class Location:
    """Place hosting events and stands."""

    id: int | None
    name: str
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    created_at: datetime | None = None
    events: list[Event] = field(default_factory=list)
    stands: list[Stand] = field(default_factory=list)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


__all__ = ["Location"]
