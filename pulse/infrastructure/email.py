"""Transactional e-mails sent through SendGrid."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from html import escape
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from pulse.config import get_settings

logger = logging.getLogger(__name__)


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    parsed: Any = body
    if isinstance(body, str):
        text = body.strip()
        if not text:
            return None
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError:
            return text

    if isinstance(parsed, dict):
        messages = [
            f"{item['message']} (help: {item['help']})"
            if item.get("help")
            else str(item["message"])
            for item in parsed.get("errors") or []
            if isinstance(item, dict) and item.get("message")
        ]
        if messages:
            return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


def _log_sendgrid_failure(source: Any, *, raised: bool) -> None:
    """Log a failed SendGrid call from an exception or a response object."""

    status_code = getattr(source, "status_code", None)
    details = _extract_sendgrid_error_details(getattr(source, "body", None))

    if status_code and details:
        logger.error("SendGrid request failed with status %s: %s", status_code, details)
    elif status_code:
        logger.error("SendGrid request failed with status %s", status_code)
    elif details:
        logger.error("SendGrid request failed: %s", details)
    elif raised:
        logger.error("Error sending email via SendGrid: %s", source)
    else:
        logger.error("SendGrid responded without a status code")


def send_email(subject: str, html_content: str, recipient: str) -> bool:
    """Send an email using the configured SendGrid credentials.

    Returns ``False`` instead of raising when delivery is not possible so that
    callers can treat e-mail as best effort.
    """

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid configuration incomplete; skipping email delivery")
        return False

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )

    try:
        client = SendGridAPIClient(settings.sendgrid_api_key)
        response = client.send(message)
    except Exception as exc:  # pragma: no cover - network failures depend on environment
        _log_sendgrid_failure(exc, raised=True)
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        _log_sendgrid_failure(response, raised=False)
        return False

    return True


def send_event_reminder_email(
    recipient: str,
    *,
    event_title: str,
    artist_name: str | None,
    location_name: str | None,
    start_date: datetime,
    delay_label: str,
) -> bool:
    """E-mail a participant that an event starts soon."""

    subject = f"Rappel : {event_title} commence dans {delay_label}"
    html_content = "".join(
        (
            "<p>Bonjour,</p>",
            f"<p>L'événement <strong>{escape(event_title)}</strong> commence dans "
            f"{escape(delay_label)}.</p>",
            "<p>",
            f"<strong>Artiste :</strong> {escape(artist_name or 'Artiste')}<br>",
            f"<strong>Lieu :</strong> {escape(location_name or 'Lieu non spécifié')}<br>",
            f"<strong>Date :</strong> {start_date.strftime('%d/%m/%Y à %H:%M')}",
            "</p>",
            "<p>À tout de suite !</p>",
        )
    )
    return send_email(subject, html_content, recipient)


__all__ = ["send_email", "send_event_reminder_email"]
