#!/usr/bin/env python3
"""Seed the data directory with a sample catalog.

Creates:
- Categories cat-1 .. cat-4
- Products with volume/price options spread over those categories
- One collection referencing a few products
- The order phone number

Existing documents are left alone unless --force is given.

Usage:
    cd services/api
    python -m scripts.seed [--data-dir data] [--force]
"""

import argparse
import os
import sys

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from catalog.schemas.catalog import (
    CatalogSnapshot,
    Category,
    Collection,
    Product,
    ProductReference,
    SiteSettings,
    Volume,
)
from catalog.settings import get_settings
from catalog.stores.json_files import JsonDocumentStore

load_dotenv()

CATEGORIES = [
    ("cat-1", "Perfume"),
    ("cat-2", "Eau de toilette"),
    ("cat-3", "Body care"),
    ("cat-4", "Gift sets"),
]

# (id, name, category, image, [(volume, price), ...])
PRODUCTS = [
    ("prod-1", "Amber Night", "cat-1", "amber-night.jpg", [("30 ml", 45.0), ("50 ml", 65.0), ("100 ml", 110.0)]),
    ("prod-2", "White Tea", "cat-1", "white-tea.jpg", [("50 ml", 58.0), ("100 ml", 95.0)]),
    ("prod-3", "Citrus Morning", "cat-2", "citrus-morning.jpg", [("50 ml", 39.0), ("100 ml", 62.0)]),
    ("prod-4", "Velvet Lotion", "cat-3", "velvet-lotion.jpg", [("200 ml", 24.0)]),
    ("prod-5", "Discovery Box", "cat-4", "discovery-box.jpg", [("5 x 10 ml", 49.0)]),
]


def build_sample_catalog(image_base: str = "/images") -> CatalogSnapshot:
    """Build the sample catalog snapshot."""
    categories = [Category(id=cid, name=name) for cid, name in CATEGORIES]
    products = [
        Product(
            id=pid,
            name=name,
            description=f"{name} - sample product",
            image=f"{image_base.rstrip('/')}/{image}",
            volumes=[Volume(volume=volume, price=price) for volume, price in volumes],
            category_id=category_id,
            is_liked=False,
        )
        for pid, name, category_id, image, volumes in PRODUCTS
    ]
    collections = [
        Collection(
            id="col-1",
            name="Evening picks",
            description="Warm scents for the evening",
            product_ids=[
                ProductReference(product_id="prod-1", recommended_volume_index=1),
                ProductReference(product_id="prod-2", recommended_volume_index=0),
                ProductReference(product_id="prod-5", recommended_volume_index=0),
            ],
        )
    ]
    return CatalogSnapshot(
        categories=categories,
        products=products,
        collections=collections,
        settings=SiteSettings(phone_number="+10000000000"),
    )


def seed(data_dir: str, *, force: bool = False) -> bool:
    """Write the sample catalog. Returns False if documents exist and force is off."""
    documents = JsonDocumentStore(data_dir)
    if documents.exists() and not force:
        print(f"Catalog documents already exist in {data_dir}, use --force to overwrite")
        return False

    snapshot = build_sample_catalog(get_settings().images_url_path)
    documents.write_all(snapshot.model_dump(mode="json", by_alias=True))
    print(
        f"Seeded {data_dir}: {len(snapshot.categories)} categories, "
        f"{len(snapshot.products)} products, {len(snapshot.collections)} collections"
    )
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the catalog data directory")
    parser.add_argument("--data-dir", default=None, help="Defaults to DATA_DIR / settings")
    parser.add_argument("--force", action="store_true", help="Overwrite existing documents")
    args = parser.parse_args()

    data_dir = args.data_dir or get_settings().data_dir
    if not seed(data_dir, force=args.force):
        sys.exit(1)


if __name__ == "__main__":
    main()
