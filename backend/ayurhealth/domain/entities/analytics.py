"""Analytics value objects — aggregates computed from blog counters."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OverallStats:
    """Totals over all published blogs."""

    total_views: int
    total_likes: int
    total_blogs: int
    avg_reading_time: str  # "M:SS"


@dataclass(frozen=True)
class CategoryStat:
    name: str
    value: int


@dataclass(frozen=True)
class DailyViews:
    name: str  # "Mon" .. "Sun"
    views: int
    unique: int
