"""Image upload relay: validate an uploaded image and forward it to object storage."""

from dataclasses import dataclass
from pathlib import PurePath
from uuid import uuid4

from fastapi import UploadFile

from catalog.services.errors import PayloadTooLargeError, UnsupportedMediaTypeError
from catalog.services.object_storage import ObjectStorageClient


@dataclass(frozen=True)
class UploadResult:
    url: str
    filename: str


def random_filename(original: str | None) -> str:
    """Random unique filename keeping the original extension (lowercased)."""
    suffix = PurePath(original or "").suffix.lower()
    return f"{uuid4().hex}{suffix}"


async def relay_image(
    upload: UploadFile,
    storage: ObjectStorageClient,
    *,
    max_bytes: int,
    key_prefix: str = "images/",
) -> UploadResult:
    """Upload one image to object storage under a random name.

    Raises:
        UnsupportedMediaTypeError: If the file is not an image.
        PayloadTooLargeError: If the file exceeds `max_bytes`.
        ObjectStorageError / StorageNotConfiguredError: From the storage client.
    """
    content_type = (upload.content_type or "").lower()
    if not content_type.startswith("image/"):
        raise UnsupportedMediaTypeError(
            "Only image files are allowed",
            detail={"content_type": content_type or None},
        )

    data = await upload.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise PayloadTooLargeError(
            f"Image exceeds the {max_bytes} byte limit",
            detail={"max_bytes": max_bytes},
        )

    filename = random_filename(upload.filename)
    url = await storage.put_object(f"{key_prefix}{filename}", data, content_type)
    return UploadResult(url=url, filename=filename)
