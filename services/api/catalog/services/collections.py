"""Collection service: CRUD plus the expanded single-collection view."""

from catalog.schemas.catalog import Collection, CollectionDetail, CollectionProduct
from catalog.services.resources import ResourceService


class CollectionService(ResourceService[Collection]):
    entity_type = Collection
    attr = "collections"
    label = "Collection"

    def get_detail(self, collection_id: str) -> CollectionDetail:
        """Get a collection with each product reference expanded.

        Entries keep the stored order and recommended volume index. A reference
        to a product that no longer exists expands to `product=None`.
        """
        collection = self.get(collection_id)
        products_by_id = {p.id: p for p in reversed(self.store.read().products)}

        expanded = [
            CollectionProduct.model_validate(
                {**ref.model_dump(), "product": products_by_id.get(ref.product_id)}
            )
            for ref in collection.product_ids or []
        ]
        return CollectionDetail.model_validate({**collection.model_dump(), "products": expanded})
