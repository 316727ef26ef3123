"""Admin blog authoring endpoints."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ayurhealth.application.schemas import (
    AdminBlogListResponse,
    BlogCreate,
    BlogResponse,
    BlogUpdate,
)
from ayurhealth.application.services import BlogService
from ayurhealth.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from ayurhealth.infrastructure.dependencies import get_admin_blog_service

router = APIRouter(prefix="/blogs", tags=["Admin: Blogs"])


@router.get("", response_model=AdminBlogListResponse)
async def list_blogs(
    blog_status: Literal["all", "published", "draft"] = Query("all", alias="status"),
    service: BlogService = Depends(get_admin_blog_service),
) -> AdminBlogListResponse:
    """All blogs (drafts included), newest first, with per-status counts."""
    everything = await service.list_admin()
    selected = service.filter_by_status(everything, blog_status)
    return AdminBlogListResponse(
        blogs=[BlogResponse.model_validate(b, from_attributes=True) for b in selected],
        counts=service.status_counts(everything),
    )


@router.post("", response_model=BlogResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(
    data: BlogCreate,
    service: BlogService = Depends(get_admin_blog_service),
) -> BlogResponse:
    """Create a new blog post."""
    try:
        blog = await service.create_blog(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return BlogResponse.model_validate(blog, from_attributes=True)


@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(
    blog_id: str,
    data: BlogUpdate,
    service: BlogService = Depends(get_admin_blog_service),
) -> BlogResponse:
    """Update the supplied fields of an existing blog."""
    try:
        blog = await service.update_blog(blog_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return BlogResponse.model_validate(blog, from_attributes=True)


@router.post("/{blog_id}/publish", response_model=BlogResponse)
async def publish_blog(
    blog_id: str,
    service: BlogService = Depends(get_admin_blog_service),
) -> BlogResponse:
    """Mark a blog as published now."""
    try:
        blog = await service.publish_blog(blog_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return BlogResponse.model_validate(blog, from_attributes=True)
