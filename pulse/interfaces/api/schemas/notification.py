"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import PaginationRead


class NotificationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    message: str
    type: str
    is_read: bool
    created_at: datetime | None = None
    read_at: datetime | None = None


class NotificationCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    type: str = "INFO"
    user_id: int | None = None
    send_to_all: bool = False


class NotificationUpdate(BaseModel):
    read: bool


class ScheduledNotificationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    event_id: int
    type: str
    title: str
    message: str
    scheduled_for: datetime
    is_sent: bool
    sent_at: datetime | None = None
    created_at: datetime | None = None


class ScheduledNotificationCreate(BaseModel):
    event_id: int
    type: str
    scheduled_for: datetime
    title: str | None = None
    message: str | None = None


class ScheduledNotificationListResponse(BaseModel):
    notifications: list[ScheduledNotificationRead]
    pagination: PaginationRead


class SchedulerStatusRead(BaseModel):
    status: str
    running: bool
    interval_seconds: float
    last_run_at: datetime | None = None
    last_processed: int
    timestamp: datetime
