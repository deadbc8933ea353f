"""Local filesystem storage for uploaded public assets."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from pulse.config import get_settings

logger = logging.getLogger(__name__)

ASSETS_DIRECTORY = "assets"


def _get_assets_root() -> Path:
    settings = get_settings()
    return Path(settings.upload_dir) / ASSETS_DIRECTORY


def store_asset(asset_type: str, data: bytes, *, extension: str) -> tuple[str, str]:
    """Write ``data`` under ``assets/<asset_type>`` and return its public path.

    The file name is the current timestamp in milliseconds. Returns the public
    path (``/assets/<type>/<name>``) and the file name.
    """

    directory = _get_assets_root() / asset_type
    directory.mkdir(parents=True, exist_ok=True)

    suffix = extension.lower().lstrip(".")
    filename = f"{int(time.time() * 1000)}.{suffix}" if suffix else str(
        int(time.time() * 1000)
    )
    destination = directory / filename
    destination.write_bytes(data)
    logger.info("Stored asset %s (%d bytes)", destination, len(data))
    return f"/{ASSETS_DIRECTORY}/{asset_type}/{filename}", filename


__all__ = ["ASSETS_DIRECTORY", "store_asset"]
