"""Product endpoints.

GET /api/products accepts `categoryId` and `isLiked` equality filters.
PATCH /api/products/{id}/like flips the liked flag.
"""

from fastapi import APIRouter, Depends, Query

from catalog.routes.deps import get_store
from catalog.schemas import MessageResponse, Product, ProductCreate, ProductUpdate
from catalog.schemas.common import NOT_FOUND_RESPONSE
from catalog.services.products import ProductService
from catalog.stores.cache import CatalogStore

router = APIRouter()


def get_service(store: CatalogStore = Depends(get_store)) -> ProductService:
    return ProductService(store)


@router.get("", response_model=list[Product])
async def list_products(
    category_id: str | None = Query(
        default=None,
        alias="categoryId",
        description="Only products of this category",
    ),
    is_liked: bool | None = Query(
        default=None,
        alias="isLiked",
        description=(
            "Only liked (true) or not liked (false) products. Unlike the legacy "
            "API, `false` is applied as a filter instead of being ignored."
        ),
    ),
    service: ProductService = Depends(get_service),
) -> list[Product]:
    return service.list_filtered(category_id=category_id, is_liked=is_liked)


@router.get("/{product_id}", response_model=Product, responses=NOT_FOUND_RESPONSE)
async def get_product(product_id: str, service: ProductService = Depends(get_service)) -> Product:
    return service.get(product_id)


@router.patch("/{product_id}/like", response_model=Product, responses=NOT_FOUND_RESPONSE)
async def toggle_product_like(product_id: str, service: ProductService = Depends(get_service)) -> Product:
    return await service.toggle_like(product_id)


@router.post("", response_model=Product, status_code=201)
async def create_product(
    body: ProductCreate,
    service: ProductService = Depends(get_service),
) -> Product:
    """Create a product. `isLiked` is always false on creation."""
    return await service.create(body)


@router.put("/{product_id}", response_model=Product, responses=NOT_FOUND_RESPONSE)
async def update_product(
    product_id: str,
    body: ProductUpdate,
    service: ProductService = Depends(get_service),
) -> Product:
    """Shallow-merge the given fields into the product.

    `volumes` replaces the whole list when present.
    """
    return await service.update(product_id, body)


@router.delete("/{product_id}", response_model=MessageResponse, responses=NOT_FOUND_RESPONSE)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_service),
) -> MessageResponse:
    await service.delete(product_id)
    return MessageResponse(message="Product deleted")
