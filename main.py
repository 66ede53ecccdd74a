"""
Kubernetes 클러스터 대시보드 백엔드 API

API 구조:
- /api/pods/*        - Pod 목록, Ready/재시작/리소스/상태 요약
- /api/metrics/*     - Prometheus 메트릭 차트
- /api/health        - 헬스체크
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import settings
from routers import pods_router, metrics_router, health_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_CREDENTIALS,
    allow_methods=settings.CORS_METHODS,
    allow_headers=settings.CORS_HEADERS,
)

# ============================================
# 라우터 등록
# ============================================
app.include_router(health_router)
app.include_router(pods_router)
app.include_router(metrics_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8080)
