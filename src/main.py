"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from core.config import settings
from core.logging import setup_logging
from core.rate_limit import limiter, rate_limit_exceeded_handler
from infrastructure.memory.database import InMemoryDatabase

logger = structlog.get_logger()

OPENAPI_TAGS = [
    {"name": "health", "description": "Health check endpoints"},
    {"name": "users", "description": "User management and subscriptions"},
    {"name": "profiles", "description": "Profile management operations"},
    {"name": "posts", "description": "Post management operations"},
    {"name": "member-types", "description": "Member type read and update operations"},
]

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup/shutdown tasks."""
    database: InMemoryDatabase = app.state.database
    logger.info("application_started", **database.stats())
    yield
    database.clear()
    logger.info("application_stopped")


def create_app(database: InMemoryDatabase | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Each application owns one ``InMemoryDatabase``; pass one in to share or
    inspect it (tests do), otherwise a fresh one is built from settings.
    """
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Users, Profiles, Posts and Member Types\n\n"
            "A RESTful API over an in-memory store that keeps every "
            "cross-entity reference valid.\n\n"
            "### Features\n"
            "- **Profiles**: one per user, tied to a member type\n"
            "- **Posts**: owned by a user\n"
            "- **Subscriptions**: users follow other users\n"
            "- **Cascading delete**: removing a user removes its profile and "
            "posts and drops it from every follower list\n\n"
            "### Rate Limits\n"
            "- GET endpoints: 30 requests/minute\n"
            "- POST/PATCH/DELETE: 10 requests/minute"
        ),
        version="1.0.0",
        debug=settings.debug,
        license_info={
            "name": "MIT",
        },
        openapi_tags=OPENAPI_TAGS,
    )

    if database is None:
        database = InMemoryDatabase(seed_member_types=settings.seed_member_types)
    app.state.database = database

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
