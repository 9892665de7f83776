"""Shared fixtures: a sample catalog on disk and an ASGI client against it."""

import json
from pathlib import Path

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from catalog.main import create_app
from catalog.services.object_storage import ObjectStorageClient
from catalog.settings import Settings

ADMIN_PASSWORD = "s3cret"

SAMPLE_DOCUMENTS = {
    "categories": [
        {"id": "cat-1", "name": "Perfume"},
        {"id": "cat-2", "name": "Body care"},
    ],
    "products": [
        {
            "id": "p1",
            "name": "Amber Night",
            "description": "Warm and woody",
            "image": "/images/amber.jpg",
            "volumes": [{"volume": "50 ml", "price": 65.0}, {"volume": "100 ml", "price": 110.0}],
            "categoryId": "cat-1",
            "isLiked": True,
        },
        {
            "id": "p2",
            "name": "White Tea",
            "description": "Fresh",
            "image": "/images/tea.jpg",
            "volumes": [{"volume": "50 ml", "price": 58.0}],
            "categoryId": "cat-1",
            "isLiked": False,
        },
        {
            "id": "p3",
            "name": "Velvet Lotion",
            "description": "Soft",
            "image": "/images/lotion.jpg",
            "volumes": [{"volume": "200 ml", "price": 24.0}],
            "categoryId": "cat-2",
            "isLiked": True,
        },
    ],
    "collections": [
        {
            "id": "col-1",
            "name": "Evening picks",
            "description": "For the evening",
            "productIds": [
                {"productId": "p1", "recommendedVolumeIndex": 1},
                {"productId": "ghost", "recommendedVolumeIndex": 0},
                {"productId": "p3", "recommendedVolumeIndex": 0},
            ],
        }
    ],
    "settings": {"phoneNumber": "+10000000000"},
}


def write_documents(data_dir: Path, documents: dict) -> None:
    data_dir.mkdir(parents=True, exist_ok=True)
    for name, document in documents.items():
        (data_dir / f"{name}.json").write_text(json.dumps(document), encoding="utf-8")


def read_document(data_dir: Path, name: str):
    return json.loads((data_dir / f"{name}.json").read_text(encoding="utf-8"))


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Data directory pre-filled with the sample catalog."""
    path = tmp_path / "data"
    write_documents(path, SAMPLE_DOCUMENTS)
    return path


@pytest.fixture
def settings(tmp_path: Path, data_dir: Path) -> Settings:
    return Settings(
        data_dir=str(data_dir),
        images_dir=str(tmp_path / "images"),
        admin_password=ADMIN_PASSWORD,
        storage_endpoint="https://storage.test",
        storage_bucket="catalog",
        storage_access_token="token-123",
        storage_public_url="https://cdn.test",
        upload_max_bytes=1024,
    )


@pytest.fixture
def storage_requests() -> list[httpx.Request]:
    """Requests received by the fake object store."""
    return []


@pytest.fixture
async def app(settings: Settings, storage_requests: list[httpx.Request]):
    """App with its store loaded; lifespan is not run by ASGITransport."""

    def handler(request: httpx.Request) -> httpx.Response:
        storage_requests.append(request)
        return httpx.Response(200)

    application = create_app(settings)
    application.state.object_storage = ObjectStorageClient.from_settings(
        settings,
        transport=httpx.MockTransport(handler),
    )
    await application.state.store.load()
    yield application
    await application.state.store.close()
    await application.state.object_storage.close()


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
