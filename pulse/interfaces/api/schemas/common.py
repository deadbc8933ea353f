"""Schemas shared by several routers."""

from math import ceil

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class PaginationRead(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def build(cls, *, page: int, limit: int, total: int) -> "PaginationRead":
        total_pages = ceil(total / limit) if limit else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )
