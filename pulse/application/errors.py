"""Exceptions raised by use cases and translated to HTTP errors by the API."""


class NotFoundError(LookupError):
    """The requested record does not exist."""


class ConflictError(ValueError):
    """The operation clashes with existing data (duplicates, records in use)."""


__all__ = ["ConflictError", "NotFoundError"]
