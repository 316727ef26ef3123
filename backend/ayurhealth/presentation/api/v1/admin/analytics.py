"""Admin analytics endpoint."""

from fastapi import APIRouter, Depends, Query

from ayurhealth.application.schemas import (
    AnalyticsDashboardResponse,
    BlogResponse,
    CategoryStatResponse,
    DailyViewsResponse,
    OverallStatsResponse,
    TopBlogResponse,
)
from ayurhealth.application.services import AnalyticsService, engagement_rate
from ayurhealth.infrastructure.dependencies import get_analytics_service

router = APIRouter(prefix="/analytics", tags=["Admin: Analytics"])


@router.get("", response_model=AnalyticsDashboardResponse)
async def dashboard(
    top: int = Query(10, ge=1, le=50),
    service: AnalyticsService = Depends(get_analytics_service),
) -> AnalyticsDashboardResponse:
    """Totals, weekly views, per-category views and top performing posts."""
    result = await service.dashboard(top_limit=top)
    return AnalyticsDashboardResponse(
        stats=OverallStatsResponse.model_validate(result.stats, from_attributes=True),
        weekly_views=[
            DailyViewsResponse.model_validate(d, from_attributes=True) for d in result.weekly_views
        ],
        categories=[
            CategoryStatResponse.model_validate(c, from_attributes=True) for c in result.categories
        ],
        top_performing=[
            TopBlogResponse(
                blog=BlogResponse.model_validate(b, from_attributes=True),
                engagement_rate=engagement_rate(b),
            )
            for b in result.top_performing
        ],
    )
