"""Application service for the admin SEO tools."""

from dataclasses import dataclass

from ayurhealth.application.interfaces import BlogRepository
from ayurhealth.application.schemas import SEODraft
from ayurhealth.application.services.seo_analyzer import analyze_seo, seo_checklist
from ayurhealth.domain.entities import Blog, SEOAnalysis, SEOChecklistItem


@dataclass(frozen=True)
class BlogSEOReport:
    blog: Blog
    analysis: SEOAnalysis
    checklist: list[SEOChecklistItem]


class SEOService:
    """Fetches blogs through the repository port and scores them."""

    def __init__(self, repository: BlogRepository):
        self._repository = repository

    async def analyze_all(self) -> list[BlogSEOReport]:
        blogs = await self._repository.list_all()
        return [self._report(blog) for blog in blogs]

    async def analyze_blog(self, blog_id: str) -> BlogSEOReport:
        blog = await self._repository.get_by_id(blog_id)
        return self._report(blog)

    def analyze_draft(self, draft: SEODraft) -> BlogSEOReport:
        blog = Blog(**draft.model_dump())
        return self._report(blog)

    @staticmethod
    def _report(blog: Blog) -> BlogSEOReport:
        return BlogSEOReport(blog=blog, analysis=analyze_seo(blog), checklist=seo_checklist(blog))
