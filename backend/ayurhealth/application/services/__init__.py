from .blog_service import BlogService, BlogDetail, HomeFeed, CategoryPage
from .seo_analyzer import analyze_seo, seo_checklist
from .seo_service import SEOService, BlogSEOReport
from .analytics_service import AnalyticsService, AnalyticsDashboard, engagement_rate

__all__ = [
    "BlogService",
    "BlogDetail",
    "HomeFeed",
    "CategoryPage",
    "analyze_seo",
    "seo_checklist",
    "SEOService",
    "BlogSEOReport",
    "AnalyticsService",
    "AnalyticsDashboard",
    "engagement_rate",
]
