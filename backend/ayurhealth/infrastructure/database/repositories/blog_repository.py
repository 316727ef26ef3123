"""Concrete repository implementation backed by SQLAlchemy."""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ayurhealth.application.interfaces import BlogRepository, updatable_fields
from ayurhealth.domain.entities import Blog
from ayurhealth.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from ayurhealth.infrastructure.database.models import BlogModel

logger = logging.getLogger(__name__)

_COLUMNS = frozenset(BlogModel.__table__.columns.keys())
_UNIQUE_VIOLATION = "23505"


def _is_unique_violation(exc: IntegrityError) -> bool:
    """True for unique-constraint failures (Postgres SQLSTATE 23505, SQLite message)."""
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == _UNIQUE_VIOLATION
    return "UNIQUE constraint failed" in str(orig)


class SQLAlchemyBlogRepository(BlogRepository):
    """Implements the BlogRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: BlogModel) -> Blog:
        """Map ORM model → domain entity."""
        return Blog(
            id=model.id,
            title=model.title,
            content=model.content,
            excerpt=model.excerpt,
            slug=model.slug,
            meta_title=model.meta_title,
            meta_description=model.meta_description,
            keywords=list(model.keywords or []),
            featured_image=model.featured_image,
            author=model.author,
            category=model.category,
            published=model.published,
            published_at=model.published_at,
            views=model.views,
            likes=model.likes,
            reading_time=model.reading_time,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Blog) -> BlogModel:
        """Map domain entity → ORM model (for creation)."""
        now = datetime.now(timezone.utc)
        return BlogModel(
            title=entity.title,
            content=entity.content,
            excerpt=entity.excerpt,
            slug=entity.slug,
            meta_title=entity.meta_title,
            meta_description=entity.meta_description,
            keywords=list(entity.keywords or []),
            featured_image=entity.featured_image,
            author=entity.author,
            category=entity.category,
            published=entity.published,
            published_at=entity.published_at,
            views=entity.views,
            likes=entity.likes,
            reading_time=entity.reading_time,
            created_at=now,
            updated_at=now,
        )

    async def list_all(self) -> list[Blog]:
        stmt = select(BlogModel).order_by(BlogModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def list_published(self) -> list[Blog]:
        stmt = (
            select(BlogModel)
            .where(BlogModel.published.is_(True))
            .order_by(BlogModel.published_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def list_top_viewed(self, limit: int = 10) -> list[Blog]:
        stmt = (
            select(BlogModel)
            .where(BlogModel.published.is_(True))
            .order_by(BlogModel.views.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_slug(self, slug: str) -> Blog:
        result = await self._session.execute(select(BlogModel).where(BlogModel.slug == slug))
        rows = result.scalars().all()
        if len(rows) != 1:
            raise EntityNotFoundError("Blog", slug, field="slug")
        return self._to_entity(rows[0])

    async def get_by_id(self, blog_id: str) -> Blog:
        model = await self._session.get(BlogModel, blog_id)
        if model is None:
            raise EntityNotFoundError("Blog", blog_id)
        return self._to_entity(model)

    async def create(self, blog: Blog) -> Blog:
        model = self._to_model(blog)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if not _is_unique_violation(exc):
                raise
            raise DuplicateEntityError("Blog", "slug", blog.slug or "") from exc
        return self._to_entity(model)

    async def update(self, blog_id: str, fields: dict[str, Any]) -> Blog:
        changes = updatable_fields(fields)
        unknown = set(changes) - _COLUMNS
        if unknown:
            raise ValueError(f"Unknown blog fields: {', '.join(sorted(unknown))}")

        model = await self._session.get(BlogModel, blog_id)
        if model is None:
            raise EntityNotFoundError("Blog", blog_id)
        for key, value in changes.items():
            setattr(model, key, value)
        model.updated_at = datetime.now(timezone.utc)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if not _is_unique_violation(exc):
                raise
            raise DuplicateEntityError("Blog", "slug", str(changes.get("slug", ""))) from exc
        return self._to_entity(model)

    async def increment_views(self, blog_id: str) -> int:
        return await self._increment(BlogModel.views, blog_id)

    async def increment_likes(self, blog_id: str) -> int:
        return await self._increment(BlogModel.likes, blog_id)

    async def _increment(self, column, blog_id: str) -> int:
        """Single UPDATE ... SET col = col + 1 — no read-modify-write in Python."""
        stmt = (
            update(BlogModel)
            .where(BlogModel.id == blog_id)
            .values({column: column + 1})
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise EntityNotFoundError("Blog", blog_id)
        value = await self._session.scalar(select(column).where(BlogModel.id == blog_id))
        logger.debug("Incremented %s for blog %s → %s", column.key, blog_id, value)
        return int(value)
