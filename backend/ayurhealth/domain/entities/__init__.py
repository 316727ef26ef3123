from .blog import (
    Blog,
    BlogCategory,
    CategoryInfo,
    CATEGORY_CATALOGUE,
    compute_reading_time,
    generate_slug,
)
from .seo import SEOAnalysis, SEOChecklistItem
from .analytics import OverallStats, CategoryStat, DailyViews

__all__ = [
    "Blog",
    "BlogCategory",
    "CategoryInfo",
    "CATEGORY_CATALOGUE",
    "compute_reading_time",
    "generate_slug",
    "SEOAnalysis",
    "SEOChecklistItem",
    "OverallStats",
    "CategoryStat",
    "DailyViews",
]
