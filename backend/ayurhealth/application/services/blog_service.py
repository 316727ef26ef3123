"""Application service (use case) for Blog operations."""

import logging
from dataclasses import dataclass
from typing import Literal

from ayurhealth.application.interfaces import BlogRepository
from ayurhealth.application.schemas import BlogCreate, BlogUpdate
from ayurhealth.domain.entities import (
    CATEGORY_CATALOGUE,
    Blog,
    BlogCategory,
    CategoryInfo,
    compute_reading_time,
    generate_slug,
)
from ayurhealth.domain.entities.blog import utcnow
from ayurhealth.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

BlogStatus = Literal["all", "published", "draft"]

RELATED_LIMIT = 3
HOME_FEATURED = 3
HOME_RECENT = 3


@dataclass(frozen=True)
class BlogDetail:
    blog: Blog
    related: list[Blog]


@dataclass(frozen=True)
class HomeFeed:
    featured: list[Blog]
    recent: list[Blog]


@dataclass(frozen=True)
class CategoryPage:
    info: CategoryInfo
    blogs: list[Blog]
    total_views: int
    avg_reading_time: int


class BlogService:
    """Orchestrates blog business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: BlogRepository):
        self._repository = repository

    # ── Public browsing ──

    async def list_published(
        self,
        category: str | None = None,
        search: str | None = None,
    ) -> list[Blog]:
        blogs = await self._repository.list_published()
        if category and category != "all":
            blogs = [b for b in blogs if b.category == category]
        if search:
            blogs = [b for b in blogs if b.matches_search(search)]
        return blogs

    async def get_home_feed(self) -> HomeFeed:
        blogs = await self._repository.list_published()
        return HomeFeed(
            featured=blogs[:HOME_FEATURED],
            recent=blogs[HOME_FEATURED : HOME_FEATURED + HOME_RECENT],
        )

    async def get_category_page(self, category: str) -> CategoryPage:
        try:
            info = CATEGORY_CATALOGUE[BlogCategory(category)]
        except ValueError:
            raise EntityNotFoundError("Category", category, field="name")

        blogs = await self.list_published(category=info.category.value)
        total_views = sum(b.views for b in blogs)
        avg_reading_time = round(sum(b.reading_time for b in blogs) / len(blogs)) if blogs else 0
        return CategoryPage(
            info=info,
            blogs=blogs,
            total_views=total_views,
            avg_reading_time=avg_reading_time,
        )

    async def read_blog(self, slug: str) -> BlogDetail:
        """Fetch a blog for display, count the view, and pick related posts."""
        blog = await self._repository.get_by_slug(slug)
        blog.views = await self._repository.increment_views(blog.id)

        published = await self._repository.list_published()
        related = [
            b for b in published if b.id != blog.id and b.category == blog.category
        ][:RELATED_LIMIT]
        return BlogDetail(blog=blog, related=related)

    async def like_blog(self, blog_id: str) -> int:
        likes = await self._repository.increment_likes(blog_id)
        logger.debug("Blog %s liked (likes=%d)", blog_id, likes)
        return likes

    # ── Admin ──

    async def list_admin(self, status: BlogStatus = "all") -> list[Blog]:
        blogs = await self._repository.list_all()
        return self.filter_by_status(blogs, status)

    @staticmethod
    def filter_by_status(blogs: list[Blog], status: BlogStatus) -> list[Blog]:
        if status == "published":
            return [b for b in blogs if b.published]
        if status == "draft":
            return [b for b in blogs if not b.published]
        return blogs

    @staticmethod
    def status_counts(blogs: list[Blog]) -> dict[str, int]:
        published = sum(1 for b in blogs if b.published)
        return {"all": len(blogs), "published": published, "draft": len(blogs) - published}

    async def create_blog(self, data: BlogCreate) -> Blog:
        blog = Blog(
            title=data.title,
            content=data.content,
            excerpt=data.excerpt,
            slug=data.slug or generate_slug(data.title),
            meta_title=data.meta_title,
            meta_description=data.meta_description,
            keywords=list(data.keywords),
            featured_image=data.featured_image,
            author=data.author,
            category=data.category.value,
            published=data.published,
            published_at=utcnow() if data.published else None,
            views=0,
            likes=0,
            reading_time=compute_reading_time(data.content),
        )
        created = await self._repository.create(blog)
        logger.info("Created blog %s (slug=%s)", created.id, created.slug)
        return created

    async def update_blog(self, blog_id: str, data: BlogUpdate) -> Blog:
        fields = data.model_dump(exclude_unset=True)
        if "category" in fields and fields["category"] is not None:
            fields["category"] = BlogCategory(fields["category"]).value
        if "content" in fields:
            fields["reading_time"] = compute_reading_time(fields["content"])

        if fields.get("published"):
            current = await self._repository.get_by_id(blog_id)
            if current.published_at is None:
                fields["published_at"] = utcnow()

        return await self._repository.update(blog_id, fields)

    async def publish_blog(self, blog_id: str) -> Blog:
        blog = await self._repository.update(
            blog_id, {"published": True, "published_at": utcnow()}
        )
        logger.info("Published blog %s", blog_id)
        return blog
