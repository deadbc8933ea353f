"""Artist schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .event import EventRead


class ArtistCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=120)
    description: str | None = None
    image_path: str | None = None


class ArtistUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=2, max_length=120)
    description: str | None = None
    image_path: str | None = None


class ArtistRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    image_path: str | None = None
    created_at: datetime | None = None
    events: list[EventRead] = Field(default_factory=list)
