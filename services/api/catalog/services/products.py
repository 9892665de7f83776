"""Product service: CRUD plus filtering and the liked flag."""

from catalog.schemas.catalog import Product, ProductCreate
from catalog.services.resources import ResourceService


class ProductService(ResourceService[Product]):
    entity_type = Product
    attr = "products"
    label = "Product"
    protected_fields = ("id", "is_liked", "isLiked")

    def list_filtered(
        self,
        *,
        category_id: str | None = None,
        is_liked: bool | None = None,
    ) -> list[Product]:
        """List products, optionally filtered by category and liked flag.

        Both filters are plain equality checks and can be combined. A stored
        null liked flag counts as not liked.
        """
        products = self.list_all()
        if category_id:
            products = [p for p in products if p.category_id == category_id]
        if is_liked is not None:
            products = [p for p in products if bool(p.is_liked) is is_liked]
        return products

    async def create(self, payload: ProductCreate) -> Product:
        """Create a product. New products always start unliked."""
        return await super().create(payload, is_liked=False)

    async def toggle_like(self, product_id: str) -> Product:
        async with self.store.mutate() as snapshot:
            index = self._index_of(snapshot.products, product_id)
            product = snapshot.products[index]
            product.is_liked = not product.is_liked
            return product
