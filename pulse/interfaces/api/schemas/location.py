"""Location schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import PaginationRead
from .event import EventSummaryRead
from .stand import StandRead


class LocationCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=120)
    address: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class LocationUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=2, max_length=120)
    address: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class LocationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    has_coordinates: bool
    created_at: datetime | None = None


class LocationDetailRead(LocationRead):
    events: list[EventSummaryRead] = Field(default_factory=list)
    stands: list[StandRead] = Field(default_factory=list)


class LocationListResponse(BaseModel):
    locations: list[LocationRead]
    pagination: PaginationRead
