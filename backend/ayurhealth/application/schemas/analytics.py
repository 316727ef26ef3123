"""Pydantic DTOs for the analytics dashboard."""

from pydantic import BaseModel

from ayurhealth.application.schemas.blog import BlogResponse


class OverallStatsResponse(BaseModel):
    total_views: int
    total_likes: int
    total_blogs: int
    avg_reading_time: str

    model_config = {"from_attributes": True}


class CategoryStatResponse(BaseModel):
    name: str
    value: int

    model_config = {"from_attributes": True}


class DailyViewsResponse(BaseModel):
    name: str
    views: int
    unique: int

    model_config = {"from_attributes": True}


class TopBlogResponse(BaseModel):
    blog: BlogResponse
    engagement_rate: int


class AnalyticsDashboardResponse(BaseModel):
    stats: OverallStatsResponse
    weekly_views: list[DailyViewsResponse]
    categories: list[CategoryStatResponse]
    top_performing: list[TopBlogResponse]
