"""Route de téléversement d'images."""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool

from pulse.application.use_cases.uploads import upload_image
from pulse.domain.entities import User
from pulse.interfaces.api.dependencies import require_admin
from pulse.interfaces.api.routes_helpers import translate_errors
from pulse.interfaces.api.schemas import UploadResponse

router = APIRouter(tags=["uploads"])


@router.post("/upload", response_model=UploadResponse)
async def upload(
    file: UploadFile | None = File(default=None),
    type: str | None = Form(default=None),
    _: User = Depends(require_admin),
):
    """Enregistre une image sous ``/assets/<type>/``."""

    data = await file.read() if file is not None else None
    with translate_errors():
        stored = await run_in_threadpool(
            upload_image,
            asset_type=type,
            content_type=file.content_type if file is not None else None,
            data=data,
        )
    return UploadResponse(success=True, path=stored.path, filename=stored.filename)
