"""Error types raised by services and rendered by the app's exception handler.

Each error carries the HTTP status and machine-readable code of the
structured error envelope: { "error": { "code", "message", "detail" } }.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for errors that map to an HTTP error response."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, detail: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_payload(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "detail": self.detail,
            }
        }


class NotFoundError(CatalogError):
    status_code = 404
    code = "NOT_FOUND"


class BadRequestError(CatalogError):
    status_code = 400
    code = "BAD_REQUEST"


class StorageError(CatalogError):
    """Reading or writing the JSON documents failed."""

    status_code = 500
    code = "STORAGE_ERROR"


class UploadError(CatalogError):
    status_code = 400
    code = "UPLOAD_FAILED"


class UnsupportedMediaTypeError(UploadError):
    status_code = 415
    code = "UNSUPPORTED_MEDIA_TYPE"


class PayloadTooLargeError(UploadError):
    status_code = 413
    code = "PAYLOAD_TOO_LARGE"


class ObjectStorageError(UploadError):
    """The object store rejected the upload or could not be reached."""

    status_code = 502
    code = "UPSTREAM_STORAGE_ERROR"


class StorageNotConfiguredError(UploadError):
    status_code = 503
    code = "STORAGE_NOT_CONFIGURED"
