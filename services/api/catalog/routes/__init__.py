"""API routes."""

from fastapi import APIRouter

from catalog.routes import admin, categories, collections, products, settings, upload

api_router = APIRouter(prefix="/api")

# Catalog resources
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(collections.router, prefix="/collections", tags=["collections"])

# Singleton settings
api_router.include_router(settings.router, prefix="/settings", tags=["settings"])

# Admin check and image upload
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(upload.router, prefix="/upload", tags=["upload"])
