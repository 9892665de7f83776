"""FastAPI application entry point.

Catalog API - categories, products, collections and settings served from an
in-memory snapshot of four JSON documents.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from catalog.routes import api_router
from catalog.services.errors import BadRequestError, CatalogError
from catalog.services.object_storage import ObjectStorageClient
from catalog.settings import Settings, get_settings
from catalog.stores.cache import CatalogStore
from catalog.stores.json_files import JsonDocumentStore

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    settings: Settings = app.state.settings
    store: CatalogStore = app.state.store

    # Startup
    Path(settings.images_dir).mkdir(parents=True, exist_ok=True)
    await store.load()

    yield

    # Shutdown: let the last background write land before exiting
    await store.close()
    await app.state.object_storage.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Catalog API: categories, products, collections and settings",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.state.settings = settings
    app.state.store = CatalogStore(
        JsonDocumentStore(settings.data_dir),
        write_mode=settings.write_mode,
    )
    app.state.object_storage = ObjectStorageClient.from_settings(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        """Render service errors in the structured error format."""
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.code} {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Report malformed input as a 400 in the structured error format."""
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content=BadRequestError("Invalid request", detail={"errors": errors}).to_payload(),
        )

    # Exception handler for structured error format
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": str(exc) if settings.debug else "Internal server error",
                    "detail": None,
                }
            },
        )

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True, "ready": app.state.store.ready}

    # Include API routes
    app.include_router(api_router)

    # Stored images
    app.mount(
        settings.images_url_path,
        StaticFiles(directory=settings.images_dir, check_dir=False),
        name="images",
    )

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
