"""JSON document store.

The catalog lives in four documents inside one directory:
- categories.json, products.json, collections.json: arrays of entities
- settings.json: a single object

Documents are always read and written wholesale.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger("uvicorn.error")

DOCUMENTS = ("categories", "products", "collections", "settings")


class JsonDocumentStore:
    """Reads and writes the catalog documents under `data_dir`."""

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        """Get the file path of a document."""
        if name not in DOCUMENTS:
            raise KeyError(f"Unknown document: {name}")
        return self.data_dir / f"{name}.json"

    def read_all(self) -> dict[str, Any]:
        """Read and parse all four documents.

        Raises:
            OSError: If a document is missing or unreadable.
            ValueError: If a document is not valid JSON.
        """
        documents: dict[str, Any] = {}
        for name in DOCUMENTS:
            with open(self.path_for(name), "r", encoding="utf-8") as f:
                documents[name] = json.load(f)
        return documents

    def write_all(self, documents: dict[str, Any]) -> None:
        """Write all four documents, pretty-printed.

        Each document goes to a temp file first and is renamed into place,
        so readers never see a half-written file.
        """
        self.data_dir.mkdir(parents=True, exist_ok=True)
        for name in DOCUMENTS:
            path = self.path_for(name)
            tmp_path = path.with_name(f".{path.name}.tmp")
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(documents[name], f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp_path, path)
        logger.debug(f"Catalog documents written to {self.data_dir}")

    def exists(self) -> bool:
        """Check whether any of the documents is already on disk."""
        return any(self.path_for(name).exists() for name in DOCUMENTS)
