"""Image upload endpoint.

POST /api/upload takes multipart field `image`, relays it to object storage
and returns the public URL.
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from catalog.routes.deps import get_app_settings, get_object_storage
from catalog.schemas import ErrorResponse, UploadResponse
from catalog.services.errors import BadRequestError
from catalog.services.object_storage import ObjectStorageClient
from catalog.services.uploads import relay_image
from catalog.settings import Settings

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


@router.post(
    "",
    response_model=UploadResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        415: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def upload_image(
    image: UploadFile | None = File(default=None),
    settings: Settings = Depends(get_app_settings),
    storage: ObjectStorageClient = Depends(get_object_storage),
) -> UploadResponse:
    if image is None:
        raise BadRequestError("No image file in field 'image'", detail={"field": "image"})

    try:
        result = await relay_image(
            image,
            storage,
            max_bytes=settings.upload_max_bytes,
            key_prefix=settings.storage_key_prefix,
        )
    finally:
        await image.close()

    logger.info(f"[upload] stored {result.filename}")
    return UploadResponse(success=True, url=result.url, filename=result.filename)
