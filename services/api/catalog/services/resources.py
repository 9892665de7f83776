"""Generic CRUD over one list of the catalog snapshot.

Categories, products and collections share the same five operations:
list, get, create, update (shallow merge) and delete. Lookups are linear
scans by id.
"""

from typing import Any, Generic, TypeVar
from uuid import uuid4

from pydantic import BaseModel

from catalog.schemas.catalog import CatalogSnapshot
from catalog.services.errors import NotFoundError
from catalog.stores.cache import CatalogStore

EntityT = TypeVar("EntityT", bound=BaseModel)


def new_id() -> str:
    """Generate a collision-resistant entity identifier."""
    return uuid4().hex


def shallow_merge(entity: EntityT, patch: BaseModel, protected: tuple[str, ...] = ("id",)) -> EntityT:
    """Overwrite the fields present in `patch`, keep everything else.

    Lists and nested objects in the patch replace the stored value wholesale.
    Fields the client sent, including explicit nulls and undeclared fields,
    overwrite; omitted fields and `protected` ones are left untouched.
    """
    changes = strip_fields(patch.model_dump(exclude_unset=True), protected)
    return type(entity).model_validate({**entity.model_dump(), **changes})


def strip_fields(fields: dict[str, Any], names: tuple[str, ...]) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if key not in names}


class ResourceService(Generic[EntityT]):
    """CRUD operations over one entity list of the snapshot."""

    entity_type: type[EntityT]
    attr: str
    label: str
    # Field names and aliases a request body can never set
    protected_fields: tuple[str, ...] = ("id",)

    def __init__(self, store: CatalogStore):
        self.store = store

    def _items(self, snapshot: CatalogSnapshot) -> list[EntityT]:
        return getattr(snapshot, self.attr)

    def _index_of(self, items: list[EntityT], entity_id: str) -> int:
        for index, item in enumerate(items):
            if item.id == entity_id:
                return index
        raise NotFoundError(
            f"{self.label} {entity_id} not found",
            detail={"id": entity_id},
        )

    def list_all(self) -> list[EntityT]:
        return list(self._items(self.store.read()))

    def get(self, entity_id: str) -> EntityT:
        items = self._items(self.store.read())
        return items[self._index_of(items, entity_id)]

    async def create(self, payload: BaseModel, **overrides: Any) -> EntityT:
        """Create an entity from `payload` with a fresh id.

        `overrides` win over payload fields (e.g. is_liked=False for products).
        """
        fields = strip_fields(payload.model_dump(), self.protected_fields)
        fields = {**fields, **overrides, "id": new_id()}
        entity = self.entity_type.model_validate(fields)
        async with self.store.mutate() as snapshot:
            self._items(snapshot).append(entity)
        return entity

    async def update(self, entity_id: str, patch: BaseModel) -> EntityT:
        async with self.store.mutate() as snapshot:
            items = self._items(snapshot)
            index = self._index_of(items, entity_id)
            items[index] = shallow_merge(items[index], patch, self.protected_fields)
            return items[index]

    async def delete(self, entity_id: str) -> None:
        async with self.store.mutate() as snapshot:
            items = self._items(snapshot)
            del items[self._index_of(items, entity_id)]
