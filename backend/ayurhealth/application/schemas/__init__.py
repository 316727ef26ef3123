from .blog import (
    BlogCreate,
    BlogUpdate,
    BlogResponse,
    BlogDetailResponse,
    HomeFeedResponse,
    LikeResponse,
    CategoryResponse,
    CategoryPageResponse,
    AdminBlogListResponse,
)
from .seo import (
    SEODraft,
    SEOAnalysisResponse,
    SEOChecklistItemResponse,
    BlogSEOResponse,
    SEODraftAnalysisResponse,
)
from .analytics import (
    OverallStatsResponse,
    CategoryStatResponse,
    DailyViewsResponse,
    TopBlogResponse,
    AnalyticsDashboardResponse,
)

__all__ = [
    "BlogCreate",
    "BlogUpdate",
    "BlogResponse",
    "BlogDetailResponse",
    "HomeFeedResponse",
    "LikeResponse",
    "CategoryResponse",
    "CategoryPageResponse",
    "AdminBlogListResponse",
    "SEODraft",
    "SEOAnalysisResponse",
    "SEOChecklistItemResponse",
    "BlogSEOResponse",
    "SEODraftAnalysisResponse",
    "OverallStatsResponse",
    "CategoryStatResponse",
    "DailyViewsResponse",
    "TopBlogResponse",
    "AnalyticsDashboardResponse",
]
