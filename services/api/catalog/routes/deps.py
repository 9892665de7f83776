"""FastAPI dependencies resolving per-app objects stored on `app.state`."""

from fastapi import Request

from catalog.services.object_storage import ObjectStorageClient
from catalog.settings import Settings
from catalog.stores.cache import CatalogStore


def get_store(request: Request) -> CatalogStore:
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_object_storage(request: Request) -> ObjectStorageClient:
    return request.app.state.object_storage
