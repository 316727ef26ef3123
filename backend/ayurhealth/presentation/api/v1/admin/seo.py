"""Admin SEO tools endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from ayurhealth.application.schemas import (
    BlogSEOResponse,
    SEODraft,
    SEODraftAnalysisResponse,
)
from ayurhealth.application.services import SEOService
from ayurhealth.domain.exceptions import EntityNotFoundError
from ayurhealth.infrastructure.dependencies import get_seo_service

router = APIRouter(prefix="/seo", tags=["Admin: SEO"])


@router.get("", response_model=list[BlogSEOResponse])
async def analyze_all(service: SEOService = Depends(get_seo_service)) -> list[BlogSEOResponse]:
    """Every blog with its SEO score, findings and checklist."""
    reports = await service.analyze_all()
    return [BlogSEOResponse.model_validate(r, from_attributes=True) for r in reports]


@router.post("/analyze", response_model=SEODraftAnalysisResponse)
async def analyze_draft(
    draft: SEODraft,
    service: SEOService = Depends(get_seo_service),
) -> SEODraftAnalysisResponse:
    """Score unsaved editor content."""
    report = service.analyze_draft(draft)
    return SEODraftAnalysisResponse.model_validate(report, from_attributes=True)


@router.get("/{blog_id}", response_model=BlogSEOResponse)
async def analyze_blog(
    blog_id: str,
    service: SEOService = Depends(get_seo_service),
) -> BlogSEOResponse:
    """SEO score, findings and checklist for one blog."""
    try:
        report = await service.analyze_blog(blog_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return BlogSEOResponse.model_validate(report, from_attributes=True)
