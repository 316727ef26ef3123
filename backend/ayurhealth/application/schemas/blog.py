"""Pydantic DTOs (Data Transfer Objects) for the Blog feature."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from ayurhealth.domain.entities import BlogCategory


class BlogCreate(BaseModel):
    """Schema for creating a new blog post. The slug is derived from the title when omitted."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Balancing Vata in Autumn"])
    content: str = Field("", examples=["## Why autumn unsettles Vata\n..."])
    excerpt: str = ""
    slug: str | None = Field(None, max_length=255, pattern=r"^[a-z0-9-]*$")
    meta_title: str = ""
    meta_description: str = ""
    keywords: list[str] = Field(default_factory=list, examples=[["ayurveda", "vata", "autumn"]])
    featured_image: str | None = None
    author: str = "Admin"
    published: bool = False
    category: BlogCategory = BlogCategory.AYURVEDA


class BlogUpdate(BaseModel):
    """Schema for updating an existing blog — all fields optional, only sent fields change."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = None
    excerpt: str | None = None
    slug: str | None = Field(None, min_length=1, max_length=255, pattern=r"^[a-z0-9-]+$")
    meta_title: str | None = None
    meta_description: str | None = None
    keywords: list[str] | None = None
    featured_image: str | None = None
    author: str | None = None
    published: bool | None = None
    category: BlogCategory | None = None

    @field_validator("published", "keywords")
    @classmethod
    def reject_explicit_null(cls, value):
        # May be omitted, but the stored columns are NOT NULL
        if value is None:
            raise ValueError("must not be null; omit the field to leave it unchanged")
        return value


class BlogResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str | None
    content: str | None
    excerpt: str | None
    slug: str | None
    meta_title: str | None
    meta_description: str | None
    keywords: list[str]
    featured_image: str | None
    author: str | None
    category: str | None
    published: bool
    published_at: datetime | None
    views: int
    likes: int
    reading_time: int
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}


class BlogDetailResponse(BaseModel):
    """A single blog (already counted as viewed) with related posts."""

    blog: BlogResponse
    related: list[BlogResponse]


class HomeFeedResponse(BaseModel):
    featured: list[BlogResponse]
    recent: list[BlogResponse]


class LikeResponse(BaseModel):
    id: str
    likes: int


class CategoryResponse(BaseModel):
    """Catalogue entry for one category."""

    category: BlogCategory
    name: str
    description: str

    model_config = {"from_attributes": True}


class CategoryPageResponse(BaseModel):
    """Category landing page: catalogue info, its published blogs and totals."""

    info: CategoryResponse
    blogs: list[BlogResponse]
    total_views: int
    avg_reading_time: int


class AdminBlogListResponse(BaseModel):
    """Admin listing with per-status counts for the tab badges."""

    blogs: list[BlogResponse]
    counts: dict[str, int]
