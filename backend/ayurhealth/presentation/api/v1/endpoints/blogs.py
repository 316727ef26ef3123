"""Public blog endpoints — browsing, reading, liking."""

from fastapi import APIRouter, Depends, HTTPException, status

from ayurhealth.application.schemas import (
    BlogDetailResponse,
    BlogResponse,
    HomeFeedResponse,
    LikeResponse,
)
from ayurhealth.application.services import BlogService
from ayurhealth.domain.exceptions import EntityNotFoundError
from ayurhealth.infrastructure.dependencies import get_blog_service

router = APIRouter(prefix="/blogs", tags=["Blogs"])


@router.get("", response_model=list[BlogResponse])
async def list_blogs(
    category: str | None = None,
    search: str | None = None,
    service: BlogService = Depends(get_blog_service),
) -> list[BlogResponse]:
    """Published blogs, newest first, optionally filtered by category and search term."""
    blogs = await service.list_published(category=category, search=search)
    return [BlogResponse.model_validate(b, from_attributes=True) for b in blogs]


@router.get("/home", response_model=HomeFeedResponse)
async def home_feed(service: BlogService = Depends(get_blog_service)) -> HomeFeedResponse:
    """Featured and recent blogs for the landing page."""
    feed = await service.get_home_feed()
    return HomeFeedResponse.model_validate(feed, from_attributes=True)


@router.get("/{slug}", response_model=BlogDetailResponse)
async def read_blog(
    slug: str,
    service: BlogService = Depends(get_blog_service),
) -> BlogDetailResponse:
    """Retrieve a blog by slug, counting the view, plus related posts."""
    try:
        detail = await service.read_blog(slug)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return BlogDetailResponse.model_validate(detail, from_attributes=True)


@router.post("/{blog_id}/like", response_model=LikeResponse)
async def like_blog(
    blog_id: str,
    service: BlogService = Depends(get_blog_service),
) -> LikeResponse:
    """Add one like to a blog."""
    try:
        likes = await service.like_blog(blog_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return LikeResponse(id=blog_id, likes=likes)
