"""Tests for the SQLAlchemyBlogRepository against an in-memory SQLite database."""

import asyncio
from collections.abc import AsyncIterator
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ayurhealth.domain.entities import Blog
from ayurhealth.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from ayurhealth.infrastructure.database.base import Base
from ayurhealth.infrastructure.database.repositories import SQLAlchemyBlogRepository
from tests.fakes import make_blog

_T0 = datetime(2024, 3, 1, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def session() -> AsyncIterator[AsyncSession]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def repository(session: AsyncSession) -> SQLAlchemyBlogRepository:
    return SQLAlchemyBlogRepository(session)


@pytest.mark.asyncio
async def test_create_assigns_id_and_equal_timestamps(repository: SQLAlchemyBlogRepository):
    created = await repository.create(make_blog(slug="first"))
    assert created.id is not None
    assert created.created_at == created.updated_at
    assert created.keywords == ["ayurveda", "vata", "autumn"]

    fetched = await repository.get_by_slug("first")
    assert fetched.id == created.id


@pytest.mark.asyncio
async def test_duplicate_slug_conflicts(repository: SQLAlchemyBlogRepository):
    await repository.create(make_blog(slug="same"))
    with pytest.raises(DuplicateEntityError):
        await repository.create(make_blog(slug="same"))


@pytest.mark.asyncio
async def test_list_published_excludes_drafts(repository: SQLAlchemyBlogRepository):
    await repository.create(make_blog(slug="old", published_at=_T0))
    await repository.create(make_blog(slug="new", published_at=_T0 + timedelta(days=1)))
    await repository.create(make_blog(slug="draft", published=False, published_at=None))

    published = await repository.list_published()
    assert [b.slug for b in published] == ["new", "old"]
    assert len(await repository.list_all()) == 3


@pytest.mark.asyncio
async def test_list_top_viewed(repository: SQLAlchemyBlogRepository):
    await repository.create(make_blog(slug="quiet", views=5))
    await repository.create(make_blog(slug="popular", views=500))
    await repository.create(make_blog(slug="hidden", views=9000, published=False))

    top = await repository.list_top_viewed(limit=1)
    assert [b.slug for b in top] == ["popular"]


@pytest.mark.asyncio
async def test_update_merges_fields(repository: SQLAlchemyBlogRepository):
    created = await repository.create(make_blog(slug="edit-me"))
    updated = await repository.update(created.id, {"title": "Edited", "keywords": ["x"]})
    assert updated.title == "Edited"
    assert updated.keywords == ["x"]
    assert updated.slug == "edit-me"
    assert updated.updated_at >= created.updated_at


@pytest.mark.asyncio
async def test_update_errors(repository: SQLAlchemyBlogRepository):
    created = await repository.create(make_blog(slug="guarded"))
    with pytest.raises(EntityNotFoundError):
        await repository.update("missing", {"title": "x"})
    with pytest.raises(ValueError):
        await repository.update(created.id, {"likes": 99})
    with pytest.raises(ValueError):
        await repository.update(created.id, {"not_a_column": 1})


@pytest.mark.asyncio
async def test_increments_are_counted_server_side(repository: SQLAlchemyBlogRepository):
    created = await repository.create(make_blog(slug="counted"))
    assert await repository.increment_views(created.id) == 1
    assert await repository.increment_views(created.id) == 2
    assert await repository.increment_likes(created.id) == 1

    fetched = await repository.get_by_id(created.id)
    assert fetched.views == 2
    assert fetched.likes == 1


@pytest.mark.asyncio
async def test_increment_unknown_id_is_not_found(repository: SQLAlchemyBlogRepository):
    with pytest.raises(EntityNotFoundError):
        await repository.increment_views("missing")
    with pytest.raises(EntityNotFoundError):
        await repository.increment_likes("missing")


@pytest.mark.asyncio
async def test_lookups_not_found(repository: SQLAlchemyBlogRepository):
    with pytest.raises(EntityNotFoundError):
        await repository.get_by_slug("nothing")
    with pytest.raises(EntityNotFoundError):
        await repository.get_by_id("nothing")


@pytest.mark.asyncio
async def test_absent_fields_round_trip_as_none(repository: SQLAlchemyBlogRepository):
    created = await repository.create(Blog(title="Bare", slug="bare"))
    fetched = await repository.get_by_id(created.id)
    assert fetched.meta_description is None
    assert fetched.featured_image is None
    assert fetched.keywords == []


@pytest.mark.asyncio
async def test_not_null_violation_is_not_reported_as_duplicate(
    repository: SQLAlchemyBlogRepository,
):
    created = await repository.create(make_blog(slug="nullable"))
    with pytest.raises(IntegrityError):
        await repository.update(created.id, {"published": None})


@pytest.mark.asyncio
async def test_concurrent_increments_are_each_counted(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'blogs.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        created = await SQLAlchemyBlogRepository(session).create(make_blog(slug="busy"))
        await session.commit()

    async def view_once() -> int:
        # One session per caller, as with concurrent requests
        async with factory() as session:
            views = await SQLAlchemyBlogRepository(session).increment_views(created.id)
            await session.commit()
            return views

    try:
        results = await asyncio.gather(*(view_once() for _ in range(8)))
        async with factory() as session:
            fetched = await SQLAlchemyBlogRepository(session).get_by_id(created.id)
    finally:
        await engine.dispose()

    assert sorted(results) == list(range(1, 9))
    assert fetched.views == 8
