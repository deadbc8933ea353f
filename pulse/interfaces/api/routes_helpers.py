"""Helper utilities shared across API route handlers."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

from pulse.application.errors import ConflictError, NotFoundError
from pulse.infrastructure.payments import PaymentGatewayError, WebhookVerificationError


@contextmanager
def translate_errors() -> Iterator[None]:
    """Turn use case exceptions into the matching HTTP errors."""

    try:
        yield
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except PermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    except PaymentGatewayError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Le service de paiement est indisponible",
        ) from exc
    except (WebhookVerificationError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


def page_to_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


__all__ = ["page_to_offset", "translate_errors"]
