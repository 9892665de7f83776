"""Object storage client for uploaded images.

Objects are uploaded with a plain HTTP PUT to
`{endpoint}/{bucket}/{key}`, authenticated with a bearer token, which is what
S3-compatible gateways and storage APIs behind a token proxy accept.
Public URLs are built from a separately configured public base URL
(usually a CDN in front of the bucket).
"""

import logging

import httpx

from catalog.services.errors import ObjectStorageError, StorageNotConfiguredError
from catalog.settings import Settings

logger = logging.getLogger("uvicorn.error")


class ObjectStorageClient:
    """Client for the image bucket."""

    def __init__(
        self,
        endpoint: str,
        bucket: str,
        public_url: str,
        access_token: str = "",
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.endpoint = endpoint.rstrip("/")
        self.bucket = bucket.strip("/")
        self.public_url = public_url.rstrip("/")
        self.access_token = access_token
        self._timeout = timeout
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ObjectStorageClient":
        return cls(
            endpoint=settings.storage_endpoint,
            bucket=settings.storage_bucket,
            public_url=settings.storage_public_url,
            access_token=settings.storage_access_token,
            transport=transport,
        )

    @property
    def configured(self) -> bool:
        return bool(self.endpoint and self.bucket and self.public_url)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    def object_url(self, key: str) -> str:
        return f"{self.endpoint}/{self.bucket}/{key}"

    def public_url_for(self, key: str) -> str:
        return f"{self.public_url}/{key}"

    async def put_object(self, key: str, data: bytes, content_type: str) -> str:
        """Upload bytes under `key`.

        Args:
            key: Object key inside the bucket (e.g. "images/abc.jpg").
            data: Object body.
            content_type: MIME type stored with the object.

        Returns:
            Public URL of the uploaded object.

        Raises:
            StorageNotConfiguredError: If endpoint, bucket or public URL is missing.
            ObjectStorageError: If the store rejects the upload or is unreachable.
        """
        if not self.configured:
            raise StorageNotConfiguredError("Object storage is not configured")

        headers = {
            "Content-Type": content_type,
            "Cache-Control": "public, max-age=31536000, immutable",
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        client = await self._get_client()
        try:
            response = await client.put(self.object_url(key), content=data, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Object storage rejected upload key={key} status={e.response.status_code}")
            raise ObjectStorageError(
                "Object storage rejected the upload",
                detail={"key": key, "status": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Object storage unreachable for key={key}: {e}")
            raise ObjectStorageError("Object storage is unreachable", detail={"key": key}) from e

        logger.info(f"Uploaded object key={key} size={len(data)}")
        return self.public_url_for(key)
