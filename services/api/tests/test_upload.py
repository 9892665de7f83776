"""Tests for POST /api/upload (object storage is an httpx.MockTransport)."""

import re

import httpx
import pytest
from httpx import AsyncClient

from catalog.services.object_storage import ObjectStorageClient
from catalog.services.uploads import random_filename
from catalog.settings import Settings


@pytest.mark.asyncio
async def test_upload_relays_image_to_storage(client: AsyncClient, storage_requests: list[httpx.Request]):
    response = await client.post(
        "/api/upload",
        files={"image": ("Photo.JPG", b"\xff\xd8\xff fake jpeg", "image/jpeg")},
    )
    assert response.status_code == 200
    data = response.json()

    assert data["success"] is True
    assert re.fullmatch(r"[0-9a-f]{32}\.jpg", data["filename"])
    assert data["url"] == f"https://cdn.test/images/{data['filename']}"

    assert len(storage_requests) == 1
    sent = storage_requests[0]
    assert sent.method == "PUT"
    assert str(sent.url) == f"https://storage.test/catalog/images/{data['filename']}"
    assert sent.headers["Authorization"] == "Bearer token-123"
    assert sent.headers["Content-Type"] == "image/jpeg"
    assert sent.content == b"\xff\xd8\xff fake jpeg"


@pytest.mark.asyncio
async def test_upload_rejects_non_image(client: AsyncClient, storage_requests: list[httpx.Request]):
    response = await client.post(
        "/api/upload",
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )
    assert response.status_code == 415
    assert response.json()["error"]["code"] == "UNSUPPORTED_MEDIA_TYPE"
    assert storage_requests == []


@pytest.mark.asyncio
async def test_upload_rejects_oversized_file(client: AsyncClient, storage_requests: list[httpx.Request]):
    response = await client.post(
        "/api/upload",
        files={"image": ("big.png", b"x" * 1025, "image/png")},
    )
    assert response.status_code == 413
    assert response.json()["error"]["code"] == "PAYLOAD_TOO_LARGE"
    assert storage_requests == []


@pytest.mark.asyncio
async def test_upload_at_size_limit_is_accepted(client: AsyncClient):
    response = await client.post(
        "/api/upload",
        files={"image": ("edge.png", b"x" * 1024, "image/png")},
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_upload_without_file(client: AsyncClient):
    response = await client.post("/api/upload", data={"other": "field"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "BAD_REQUEST"


@pytest.mark.asyncio
async def test_upstream_failure_is_502(client: AsyncClient, app, settings: Settings):
    app.state.object_storage = ObjectStorageClient.from_settings(
        settings,
        transport=httpx.MockTransport(lambda request: httpx.Response(503)),
    )
    response = await client.post(
        "/api/upload",
        files={"image": ("a.png", b"png", "image/png")},
    )
    assert response.status_code == 502
    assert response.json()["error"]["code"] == "UPSTREAM_STORAGE_ERROR"
    assert response.json()["error"]["detail"]["status"] == 503
    await app.state.object_storage.close()


@pytest.mark.asyncio
async def test_unconfigured_storage_is_503(client: AsyncClient, app):
    app.state.object_storage = ObjectStorageClient(endpoint="", bucket="", public_url="")
    response = await client.post(
        "/api/upload",
        files={"image": ("a.png", b"png", "image/png")},
    )
    assert response.status_code == 503
    assert response.json()["error"]["code"] == "STORAGE_NOT_CONFIGURED"


def test_random_filename_keeps_extension() -> None:
    a = random_filename("Shot.PNG")
    b = random_filename("Shot.PNG")
    assert a.endswith(".png")
    assert a != b
    assert random_filename(None).count(".") == 0
