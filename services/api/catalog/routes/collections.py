"""Collection endpoints.

GET /api/collections/{id} expands every product reference with the full product.
"""

from fastapi import APIRouter, Depends

from catalog.routes.deps import get_store
from catalog.schemas import (
    Collection,
    CollectionCreate,
    CollectionDetail,
    CollectionUpdate,
    MessageResponse,
)
from catalog.schemas.common import NOT_FOUND_RESPONSE
from catalog.services.collections import CollectionService
from catalog.stores.cache import CatalogStore

router = APIRouter()


def get_service(store: CatalogStore = Depends(get_store)) -> CollectionService:
    return CollectionService(store)


@router.get("", response_model=list[Collection])
async def list_collections(service: CollectionService = Depends(get_service)) -> list[Collection]:
    return service.list_all()


@router.get("/{collection_id}", response_model=CollectionDetail, responses=NOT_FOUND_RESPONSE)
async def get_collection(
    collection_id: str,
    service: CollectionService = Depends(get_service),
) -> CollectionDetail:
    """Get a collection with `products` expanded (product is null for dangling references)."""
    return service.get_detail(collection_id)


@router.post("", response_model=Collection, status_code=201)
async def create_collection(
    body: CollectionCreate,
    service: CollectionService = Depends(get_service),
) -> Collection:
    return await service.create(body)


@router.put("/{collection_id}", response_model=Collection, responses=NOT_FOUND_RESPONSE)
async def update_collection(
    collection_id: str,
    body: CollectionUpdate,
    service: CollectionService = Depends(get_service),
) -> Collection:
    return await service.update(collection_id, body)


@router.delete("/{collection_id}", response_model=MessageResponse, responses=NOT_FOUND_RESPONSE)
async def delete_collection(
    collection_id: str,
    service: CollectionService = Depends(get_service),
) -> MessageResponse:
    await service.delete(collection_id)
    return MessageResponse(message="Collection deleted")
