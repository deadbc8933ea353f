"""Use case storing uploaded images."""

from __future__ import annotations

import re
from dataclasses import dataclass

from pulse.config import get_settings
from pulse.infrastructure.storage import store_asset

ASSET_TYPE_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
_CONTENT_TYPE_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/svg+xml": "svg",
}


@dataclass
class StoredUpload:
    path: str
    filename: str


def _extension_for(content_type: str) -> str:
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type in _CONTENT_TYPE_EXTENSIONS:
        return _CONTENT_TYPE_EXTENSIONS[media_type]
    subtype = media_type.split("/", 1)[-1]
    return subtype if subtype.isalnum() else "img"


def upload_image(
    *,
    asset_type: str | None,
    content_type: str | None,
    data: bytes | None,
) -> StoredUpload:
    """Validate an image upload and store it under ``assets/<asset_type>``."""

    if data is None:
        raise ValueError("Aucun fichier fourni")
    if not content_type or not content_type.startswith("image/"):
        raise ValueError("Le fichier doit être une image")

    max_size = get_settings().max_upload_size_bytes
    if len(data) > max_size:
        msg = f"Le fichier est trop volumineux (max {max_size // (1024 * 1024)}MB)"
        raise ValueError(msg)

    asset_type = (asset_type or "").strip()
    if not ASSET_TYPE_PATTERN.match(asset_type):
        raise ValueError("Type de fichier invalide")

    path, stored_name = store_asset(
        asset_type, data, extension=_extension_for(content_type)
    )
    return StoredUpload(path=path, filename=stored_name)


__all__ = ["ASSET_TYPE_PATTERN", "StoredUpload", "upload_image"]
