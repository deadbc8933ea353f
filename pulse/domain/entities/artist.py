"""Domain entity representing a performing artist."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .event import Event


@dataclass
class Artist:
    """Artist that can be booked on events."""

    id: int | None
    name: str
    description: str | None = None
    image_path: str | None = None
    created_at: datetime | None = None
    events: list[Event] = field(default_factory=list)


__all__ = ["Artist"]
