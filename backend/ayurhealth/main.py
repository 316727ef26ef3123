"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ayurhealth.config import get_settings
from ayurhealth.domain.exceptions import BlogStoreError
from ayurhealth.infrastructure.logging.log_config import setup_logging
from ayurhealth.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _create_tables() -> None:
    """Create the blog tables when the app owns its database (blog_store == "database")."""
    from ayurhealth.infrastructure.database import Base, engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, prepare the configured store."""
    settings = get_settings()
    setup_logging()

    if settings.blog_store == "database":
        await _create_tables()
    else:
        logger.info("Using Supabase blog store at %s", settings.supabase_url)

    yield

    if settings.blog_store == "database":
        from ayurhealth.infrastructure.database import engine

        await engine.dispose()


async def _blog_store_error_handler(request: Request, exc: BlogStoreError) -> JSONResponse:
    """Store outages surface as 502 with a generic message; details go to the log."""
    logger.error("Blog store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": "The content store is unavailable. Please try again later."},
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(BlogStoreError, _blog_store_error_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ayurhealth.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
