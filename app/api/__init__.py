"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates all endpoints into a single router
for inclusion in the FastAPI application under ``/api``.

Included routers:
    - issues: 이슈 생성/조회/해결 (Issue create, list, resolve)
    - charts: 대시보드 차트 데이터 (Dashboard chart payloads)
"""

from fastapi import APIRouter

from app.api.charts import router as charts_router
from app.api.issues import router as issues_router

api_router: APIRouter = APIRouter()

api_router.include_router(issues_router, prefix="/issues", tags=["Issues"])
api_router.include_router(charts_router, prefix="/charts", tags=["Charts"])
