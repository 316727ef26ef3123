"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Header

from ayurhealth.config import get_settings
from ayurhealth.application.interfaces import BlogRepository, CredentialProvider
from ayurhealth.application.services import AnalyticsService, BlogService, SEOService
from ayurhealth.infrastructure.supabase import (
    BearerHeaderCredentialProvider,
    StaticCredentialProvider,
    SupabaseBlogRepository,
)


@asynccontextmanager
async def blog_repository_scope(credentials: CredentialProvider) -> AsyncIterator[BlogRepository]:
    """Open the configured gateway for one request.

    With ``blog_store == "database"`` the repository is bound to a session that
    commits on success and rolls back on error; the Supabase gateway holds no
    per-request state.
    """
    settings = get_settings()

    if settings.blog_store == "database":
        from ayurhealth.infrastructure.database.repositories import SQLAlchemyBlogRepository
        from ayurhealth.infrastructure.database.session import async_session_factory

        async with async_session_factory() as session:
            try:
                yield SQLAlchemyBlogRepository(session)
                await session.commit()
            except Exception:
                await session.rollback()
                raise
        return

    yield SupabaseBlogRepository(
        base_url=settings.supabase_url,
        anon_key=settings.supabase_anon_key,
        credentials=credentials,
        timeout=settings.supabase_timeout,
    )


def _public_credentials() -> CredentialProvider:
    return StaticCredentialProvider(get_settings().supabase_service_token)


async def get_blog_service() -> AsyncGenerator[BlogService, None]:
    """Provides a BlogService for public routes (configured service token, if any)."""
    async with blog_repository_scope(_public_credentials()) as repository:
        yield BlogService(repository)


async def get_admin_blog_service(
    authorization: str | None = Header(default=None),
) -> AsyncGenerator[BlogService, None]:
    """Provides a BlogService acting as the caller by forwarding their bearer token."""
    async with blog_repository_scope(BearerHeaderCredentialProvider(authorization)) as repository:
        yield BlogService(repository)


async def get_seo_service(
    authorization: str | None = Header(default=None),
) -> AsyncGenerator[SEOService, None]:
    """Provides an SEOService acting with the caller's credential."""
    async with blog_repository_scope(BearerHeaderCredentialProvider(authorization)) as repository:
        yield SEOService(repository)


async def get_analytics_service(
    authorization: str | None = Header(default=None),
) -> AsyncGenerator[AnalyticsService, None]:
    """Provides an AnalyticsService acting with the caller's credential."""
    async with blog_repository_scope(BearerHeaderCredentialProvider(authorization)) as repository:
        yield AnalyticsService(repository)
