# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

# Local application imports
from .api.v1 import device_model_router, device_router, device_type_router, root_router
from .core.config import Settings, get_settings
from .di.container import get_container
from .infrastructure.memory.entity_store import EntityStore

logger = logging.getLogger(__name__)

PACKAGED_DOCS_DIRECTORY = Path(__file__).resolve().parent / "docs"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container (and with it the entity store) before the first
    request so seeding happens at startup.
    """
    try:
        store = get_container().get(EntityStore)
        counts = await store.counts()
        logger.info(
            "Entity store ready: "
            + ", ".join(f"{count} {kind.value}" for kind, count in counts.items())
        )
    except Exception as e:
        logger.error(f"Failed to initialize entity store: {e}", exc_info=True)
        raise

    yield

    logger.info("Application shutdown complete")


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Requests FastAPI rejects before a handler runs (e.g. malformed JSON) become 400s"""
    errors = exc.errors()
    detail = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.debug(f"Rejected request to {request.url.path}: {detail}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: log the fault and answer 500 instead of dropping the connection"""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def _resolve_docs_directory(settings: Settings) -> Path:
    """CATALOG_DOCS_DIR overrides the docs page shipped inside the package"""
    if not settings.docs_directory:
        return PACKAGED_DOCS_DIRECTORY
    return Path(settings.docs_directory).resolve()


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging level
    - CORS middleware configuration
    - Error handlers
    - API route registration and static API docs

    Returns:
        Configured FastAPI application instance
    """
    # Settings (and the .env file behind them)
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # Create FastAPI app
    application = FastAPI(
        title=settings.app_title,
        version="1.0.0",
        description="Catalog of device types, device models and devices",
        lifespan=lifespan
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    # Register API routers
    application.include_router(root_router)
    application.include_router(device_type_router, prefix="/device-types")
    application.include_router(device_model_router, prefix="/device-models")
    application.include_router(device_router, prefix="/devices")

    # Static API documentation (read-only)
    docs_directory = _resolve_docs_directory(settings)
    if docs_directory.is_dir():
        application.mount("/api-docs", StaticFiles(directory=docs_directory, html=True), name="api-docs")
    else:
        logger.warning(f"API docs directory {docs_directory} not found; /api-docs disabled")

    return application


# Create application instance
app = create_application()
