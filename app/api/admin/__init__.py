"""관리자 API 라우터 패키지 — 모든 관리자 엔드포인트 통합.

Admin API Router package — Aggregates all admin-facing endpoints
into a single router for inclusion in the FastAPI application.

Included routers:
    - brands: 브랜드 관리 (Brand management, mounted at /brand)
"""

from fastapi import APIRouter

from app.api.admin.brands import router as brands_router

admin_router: APIRouter = APIRouter()

admin_router.include_router(brands_router, prefix="/brand", tags=["Admin - Brands"])
