"""Pydantic schemas for API request/response validation."""

from catalog.schemas.admin import AdminAuthRequest, AdminAuthResponse, UploadResponse
from catalog.schemas.catalog import (
    CatalogSnapshot,
    Category,
    CategoryCreate,
    CategoryUpdate,
    Collection,
    CollectionCreate,
    CollectionDetail,
    CollectionProduct,
    CollectionUpdate,
    PhoneNumberBody,
    PhoneNumberResponse,
    PhoneNumberUpdated,
    Product,
    ProductCreate,
    ProductReference,
    ProductUpdate,
    SiteSettings,
    Volume,
)
from catalog.schemas.common import ErrorDetail, ErrorResponse, MessageResponse

__all__ = [
    "AdminAuthRequest",
    "AdminAuthResponse",
    "UploadResponse",
    "CatalogSnapshot",
    "Category",
    "CategoryCreate",
    "CategoryUpdate",
    "Collection",
    "CollectionCreate",
    "CollectionDetail",
    "CollectionProduct",
    "CollectionUpdate",
    "PhoneNumberBody",
    "PhoneNumberResponse",
    "PhoneNumberUpdated",
    "Product",
    "ProductCreate",
    "ProductReference",
    "ProductUpdate",
    "SiteSettings",
    "Volume",
    "ErrorDetail",
    "ErrorResponse",
    "MessageResponse",
]
