"""Category service."""

from catalog.schemas.catalog import Category
from catalog.services.resources import ResourceService


class CategoryService(ResourceService[Category]):
    """CRUD over categories.

    Deleting a category leaves products that reference it untouched.
    """

    entity_type = Category
    attr = "categories"
    label = "Category"
