"""Category endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from ayurhealth.application.schemas import CategoryPageResponse, CategoryResponse
from ayurhealth.application.services import BlogService
from ayurhealth.domain.entities import CATEGORY_CATALOGUE
from ayurhealth.domain.exceptions import EntityNotFoundError
from ayurhealth.infrastructure.dependencies import get_blog_service

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    return [
        CategoryResponse.model_validate(info, from_attributes=True)
        for info in CATEGORY_CATALOGUE.values()
    ]


@router.get("/{category}", response_model=CategoryPageResponse)
async def category_page(
    category: str,
    service: BlogService = Depends(get_blog_service),
) -> CategoryPageResponse:
    """Published blogs of one category with view and reading-time totals."""
    try:
        page = await service.get_category_page(category)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CategoryPageResponse.model_validate(page, from_attributes=True)
