"""Application service for the admin analytics dashboard."""

import math
from collections import defaultdict
from dataclasses import dataclass

from ayurhealth.application.interfaces import BlogRepository
from ayurhealth.domain.entities import Blog, CategoryStat, DailyViews, OverallStats

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def engagement_rate(blog: Blog) -> int:
    """Likes as a whole-number percentage of views."""
    return math.floor(blog.likes / max(blog.views, 1) * 100)


def format_minutes(minutes: float) -> str:
    """Render fractional minutes as ``M:SS``."""
    total_seconds = round(minutes * 60)
    return f"{total_seconds // 60}:{total_seconds % 60:02d}"


@dataclass(frozen=True)
class AnalyticsDashboard:
    stats: OverallStats
    weekly_views: list[DailyViews]
    categories: list[CategoryStat]
    top_performing: list[Blog]


class AnalyticsService:
    """Aggregates blog counters into dashboard figures. Every call re-reads the store."""

    def __init__(self, repository: BlogRepository):
        self._repository = repository

    async def overall_stats(self) -> OverallStats:
        blogs = await self._repository.list_published()
        avg_minutes = sum(b.reading_time for b in blogs) / len(blogs) if blogs else 0
        return OverallStats(
            total_views=sum(b.views for b in blogs),
            total_likes=sum(b.likes for b in blogs),
            total_blogs=len(blogs),
            avg_reading_time=format_minutes(avg_minutes),
        )

    async def top_performing(self, limit: int = 10) -> list[Blog]:
        return await self._repository.list_top_viewed(limit=limit)

    async def category_stats(self) -> list[CategoryStat]:
        blogs = await self._repository.list_published()
        totals: dict[str, int] = defaultdict(int)
        for blog in blogs:
            totals[blog.category or ""] += blog.views
        return [
            CategoryStat(name=name[:1].upper() + name[1:], value=views)
            for name, views in totals.items()
        ]

    async def weekly_views(self) -> list[DailyViews]:
        """Views of the seven most recently created published blogs, one per weekday slot."""
        blogs = await self._repository.list_published()
        latest = sorted(
            blogs,
            key=lambda b: b.created_at.timestamp() if b.created_at else float("-inf"),
            reverse=True,
        )[: len(WEEKDAYS)]

        rows = []
        for index, day in enumerate(WEEKDAYS):
            views = latest[index].views if index < len(latest) else 0
            rows.append(DailyViews(name=day, views=views, unique=views * 7 // 10))  # 70% unique
        return rows

    async def dashboard(self, top_limit: int = 10) -> AnalyticsDashboard:
        return AnalyticsDashboard(
            stats=await self.overall_stats(),
            weekly_views=await self.weekly_views(),
            categories=await self.category_stats(),
            top_performing=await self.top_performing(limit=top_limit),
        )
