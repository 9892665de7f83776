"""Schemas for catalog entities and their create/update payloads.

Stored JSON and API bodies use camelCase field names; Python code uses
snake_case through `populate_by_name`.

Models are lenient: scalars may be null, numbers are accepted where strings
are expected, and undeclared fields are kept and written back unchanged.
"""

from pydantic import BaseModel, ConfigDict, Field


class CatalogModel(BaseModel):
    """Base for stored entities and request bodies."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )


class Volume(CatalogModel):
    """A purchasable volume of a product with its price."""

    volume: str | None = ""
    price: float | str | None = 0


class Category(CatalogModel):
    id: str
    name: str | None = ""


class Product(CatalogModel):
    """A catalog product."""

    id: str
    name: str | None = ""
    description: str | None = ""
    image: str | None = ""
    volumes: list[Volume] | None = Field(default_factory=list)
    category_id: str | None = Field(alias="categoryId", default="")
    is_liked: bool | None = Field(alias="isLiked", default=False)


class ProductReference(CatalogModel):
    """Reference from a collection to a product (may be dangling)."""

    product_id: str | None = Field(alias="productId", default=None)
    recommended_volume_index: int | None = Field(alias="recommendedVolumeIndex", default=0)


class Collection(CatalogModel):
    """A curated, ordered set of product references."""

    id: str
    name: str | None = ""
    description: str | None = ""
    product_ids: list[ProductReference] | None = Field(alias="productIds", default_factory=list)


class CollectionProduct(ProductReference):
    """Product reference expanded with the referenced product, or None if dangling."""

    product: Product | None = None


class CollectionDetail(Collection):
    """Response payload for GET /api/collections/{id}."""

    products: list[CollectionProduct] = Field(default_factory=list)


class SiteSettings(CatalogModel):
    """Singleton site settings."""

    phone_number: str | None = Field(alias="phoneNumber", default="")


class CatalogSnapshot(BaseModel):
    """All four stored documents: the unit of load and of persistence."""

    categories: list[Category] = Field(default_factory=list)
    products: list[Product] = Field(default_factory=list)
    collections: list[Collection] = Field(default_factory=list)
    settings: SiteSettings = Field(default_factory=SiteSettings)


# ============================================================
# Create payloads: every field optional, ids are server-assigned
# ============================================================


class CategoryCreate(CatalogModel):
    name: str | None = ""


class ProductCreate(CatalogModel):
    name: str | None = ""
    description: str | None = ""
    image: str | None = ""
    volumes: list[Volume] | None = Field(default_factory=list)
    category_id: str | None = Field(alias="categoryId", default="")


class CollectionCreate(CatalogModel):
    name: str | None = ""
    description: str | None = ""
    product_ids: list[ProductReference] | None = Field(alias="productIds", default_factory=list)


# ============================================================
# Partial updates: only fields sent in the body overwrite the entity
# ============================================================


class CategoryUpdate(CatalogModel):
    name: str | None = None


class ProductUpdate(CatalogModel):
    """Fields of a product that PUT may overwrite. `isLiked` has its own endpoint."""

    name: str | None = None
    description: str | None = None
    image: str | None = None
    volumes: list[Volume] | None = None
    category_id: str | None = Field(alias="categoryId", default=None)


class CollectionUpdate(CatalogModel):
    name: str | None = None
    description: str | None = None
    product_ids: list[ProductReference] | None = Field(alias="productIds", default=None)


class PhoneNumberBody(CatalogModel):
    """Body for PUT /api/settings/phone.

    Only an absent `phoneNumber` is a bad request; an explicit null is stored.
    """

    phone_number: str | None = Field(alias="phoneNumber", default=None)


class PhoneNumberResponse(CatalogModel):
    phone_number: str | None = Field(alias="phoneNumber")


class PhoneNumberUpdated(PhoneNumberResponse):
    message: str
