"""In-memory catalog cache backed by the JSON document store.

The whole catalog is loaded once at startup and every request reads the
resident snapshot. Mutations go through `CatalogStore.mutate()`, which holds
a single lock for the read-modify-write and then persists.

Write modes:
- background: the request returns as soon as the snapshot is updated; a single
  writer task flushes to disk, coalescing writes that arrive while it runs.
  A failed write is logged and dropped; a crash before the flush loses it.
- sync: the request waits for the write; a failed write raises StorageError.
"""

import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any, Literal

from pydantic import ValidationError

from catalog.schemas.catalog import CatalogSnapshot, Category, Collection, Product, SiteSettings
from catalog.services.errors import StorageError
from catalog.stores.json_files import JsonDocumentStore

logger = logging.getLogger("uvicorn.error")

WriteMode = Literal["background", "sync"]

LIST_DOCUMENTS = {
    "categories": Category,
    "products": Product,
    "collections": Collection,
}


class CatalogStore:
    """Owns the resident catalog snapshot and its persistence."""

    def __init__(self, documents: JsonDocumentStore, *, write_mode: WriteMode = "background"):
        self._documents = documents
        self.write_mode = write_mode
        self._snapshot = CatalogSnapshot()
        self._rejected: dict[str, list[Any]] = {}
        self._ready = False
        self._lock = asyncio.Lock()
        self._dirty = False
        self._writer: asyncio.Task[None] | None = None

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def documents(self) -> JsonDocumentStore:
        return self._documents

    async def load(self) -> CatalogSnapshot:
        """Load all documents and replace the snapshot.

        Falls back to an empty catalog if a document is missing, unparsable
        or not the expected array/object, so the service still starts.
        Single records that fail validation are skipped, kept aside and
        written back unchanged on every persist.
        """
        try:
            raw = await asyncio.to_thread(self._documents.read_all)
            snapshot, rejected = build_snapshot(raw)
        except (OSError, ValueError) as e:
            logger.warning(f"Catalog load failed, starting with empty data: {e}")
            snapshot, rejected = CatalogSnapshot(), {}

        self._snapshot = snapshot
        self._rejected = rejected
        self._ready = True
        logger.info(
            f"Catalog loaded: categories={len(snapshot.categories)} "
            f"products={len(snapshot.products)} collections={len(snapshot.collections)}"
        )
        return snapshot

    @property
    def rejected(self) -> dict[str, list[Any]]:
        """Stored records that could not be loaded, by document name."""
        return self._rejected

    def read(self) -> CatalogSnapshot:
        """Get the current snapshot. Callers share it; nothing is copied."""
        return self._snapshot

    @asynccontextmanager
    async def mutate(self) -> AsyncGenerator[CatalogSnapshot, None]:
        """Lock the snapshot for a read-modify-write, then persist.

        Usage:
            async with store.mutate() as snapshot:
                snapshot.categories.append(category)

        Nothing is persisted if the block raises.
        """
        async with self._lock:
            yield self._snapshot
            await self.persist()

    async def persist(self) -> None:
        """Write the snapshot according to the configured write mode."""
        if self.write_mode == "sync":
            await self._write(self._dump())
            return

        self._dirty = True
        if self._writer is None or self._writer.done():
            self._writer = asyncio.create_task(self._drain())

    async def flush(self) -> None:
        """Wait until pending background writes have finished."""
        while self._writer is not None and not self._writer.done():
            await self._writer

    async def close(self) -> None:
        await self.flush()

    async def _drain(self) -> None:
        while self._dirty:
            self._dirty = False
            documents = self._dump()
            try:
                await self._write(documents)
            except StorageError:
                logger.exception("Catalog persist failed, in-memory changes are not durable")

    async def _write(self, documents: dict[str, Any]) -> None:
        try:
            await asyncio.to_thread(self._documents.write_all, documents)
        except OSError as e:
            raise StorageError(
                "Failed to save catalog data",
                detail={"data_dir": str(self._documents.data_dir)},
            ) from e

    def _dump(self) -> dict[str, Any]:
        documents = self._snapshot.model_dump(mode="json", by_alias=True)
        for name, records in self._rejected.items():
            documents[name].extend(records)
        return documents


def build_snapshot(raw: dict[str, Any]) -> tuple[CatalogSnapshot, dict[str, list[Any]]]:
    """Validate raw documents record by record.

    Returns the snapshot and the raw records that failed validation.

    Raises:
        ValueError: If a document does not have the expected shape.
    """
    rejected: dict[str, list[Any]] = {}
    lists: dict[str, list[Any]] = {}
    for name, model in LIST_DOCUMENTS.items():
        document = raw.get(name)
        if not isinstance(document, list):
            raise ValueError(f"{name}.json must contain a JSON array")

        items = []
        for record in document:
            try:
                items.append(model.model_validate(record))
            except ValidationError as e:
                logger.warning(f"Skipping invalid record in {name}.json: {e.error_count()} error(s)")
                rejected.setdefault(name, []).append(record)
        lists[name] = items

    raw_settings = raw.get("settings")
    if not isinstance(raw_settings, dict):
        raise ValueError("settings.json must contain a JSON object")
    try:
        settings = SiteSettings.model_validate(raw_settings)
    except ValidationError:
        logger.warning("Invalid phoneNumber in settings.json, using an empty one")
        settings = SiteSettings.model_validate(
            {k: v for k, v in raw_settings.items() if k not in ("phoneNumber", "phone_number")}
        )

    return CatalogSnapshot(**lists, settings=settings), rejected
