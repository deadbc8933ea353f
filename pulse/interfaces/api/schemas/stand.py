"""Stand schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from pulse.domain.entities import Stand


class StandCreate(BaseModel):
    name: str
    description: str
    type: str
    location_id: int
    event_id: int | None = None
    opened_at: datetime
    closed_at: datetime


class StandUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    description: str | None = None
    type: str | None = None
    location_id: int | None = None
    event_id: int | None = None
    opened_at: datetime | None = None
    closed_at: datetime | None = None


class StandRead(BaseModel):
    """Stand with its location flattened for map markers."""

    id: int
    name: str
    description: str
    type: str
    location_id: int
    location_name: str | None = None
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    event_id: int | None = None
    event_title: str | None = None
    opened_at: datetime
    closed_at: datetime
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, stand: Stand) -> "StandRead":
        location = stand.location
        return cls(
            id=stand.id,
            name=stand.name,
            description=stand.description,
            type=stand.type,
            location_id=stand.location_id,
            location_name=location.name if location else None,
            address=location.address if location else None,
            latitude=location.latitude if location else None,
            longitude=location.longitude if location else None,
            event_id=stand.event_id,
            event_title=stand.event_title,
            opened_at=stand.opened_at,
            closed_at=stand.closed_at,
            created_at=stand.created_at,
        )
