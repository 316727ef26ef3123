"""Pydantic DTOs for SEO analysis."""

from pydantic import BaseModel, Field

from ayurhealth.application.schemas.blog import BlogResponse


class SEODraft(BaseModel):
    """Unsaved editor state to analyze — every field may still be missing."""

    title: str | None = None
    content: str | None = None
    slug: str | None = None
    meta_description: str | None = None
    keywords: list[str] = Field(default_factory=list)
    featured_image: str | None = None


class SEOAnalysisResponse(BaseModel):
    score: int = Field(..., ge=0, le=100)
    grade: str
    issues: list[str]
    suggestions: list[str]

    model_config = {"from_attributes": True}


class SEOChecklistItemResponse(BaseModel):
    label: str
    passed: bool

    model_config = {"from_attributes": True}


class BlogSEOResponse(BaseModel):
    """A blog paired with its analysis and checklist."""

    blog: BlogResponse
    analysis: SEOAnalysisResponse
    checklist: list[SEOChecklistItemResponse]


class SEODraftAnalysisResponse(BaseModel):
    """Analysis of an unsaved draft — there is no stored blog to return."""

    analysis: SEOAnalysisResponse
    checklist: list[SEOChecklistItemResponse]
