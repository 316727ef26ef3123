"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from ayurhealth.presentation.api.v1.endpoints.health import router as health_router
from ayurhealth.presentation.api.v1.endpoints.blogs import router as blogs_router
from ayurhealth.presentation.api.v1.endpoints.categories import router as categories_router
from ayurhealth.presentation.api.v1.admin.router import router as admin_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(blogs_router)
router.include_router(categories_router)
router.include_router(admin_router)
