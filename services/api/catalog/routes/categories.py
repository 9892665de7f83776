"""Category endpoints.

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends

from catalog.routes.deps import get_store
from catalog.schemas import Category, CategoryCreate, CategoryUpdate, MessageResponse
from catalog.schemas.common import NOT_FOUND_RESPONSE
from catalog.services.categories import CategoryService
from catalog.stores.cache import CatalogStore

router = APIRouter()


def get_service(store: CatalogStore = Depends(get_store)) -> CategoryService:
    return CategoryService(store)


@router.get("", response_model=list[Category])
async def list_categories(service: CategoryService = Depends(get_service)) -> list[Category]:
    return service.list_all()


@router.get("/{category_id}", response_model=Category, responses=NOT_FOUND_RESPONSE)
async def get_category(category_id: str, service: CategoryService = Depends(get_service)) -> Category:
    return service.get(category_id)


@router.post("", response_model=Category, status_code=201)
async def create_category(
    body: CategoryCreate,
    service: CategoryService = Depends(get_service),
) -> Category:
    return await service.create(body)


@router.put("/{category_id}", response_model=Category, responses=NOT_FOUND_RESPONSE)
async def update_category(
    category_id: str,
    body: CategoryUpdate,
    service: CategoryService = Depends(get_service),
) -> Category:
    """Shallow-merge the given fields into the category."""
    return await service.update(category_id, body)


@router.delete("/{category_id}", response_model=MessageResponse, responses=NOT_FOUND_RESPONSE)
async def delete_category(
    category_id: str,
    service: CategoryService = Depends(get_service),
) -> MessageResponse:
    await service.delete(category_id)
    return MessageResponse(message="Category deleted")
