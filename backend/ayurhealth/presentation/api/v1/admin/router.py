"""Admin router — authoring, SEO tools and analytics under /admin."""

from fastapi import APIRouter

from ayurhealth.presentation.api.v1.admin.analytics import router as analytics_router
from ayurhealth.presentation.api.v1.admin.blogs import router as blogs_router
from ayurhealth.presentation.api.v1.admin.seo import router as seo_router

router = APIRouter(prefix="/admin")
router.include_router(blogs_router)
router.include_router(seo_router)
router.include_router(analytics_router)
