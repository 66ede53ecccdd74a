"""
모니터링 라우터
- metrics: Prometheus 메트릭 차트
- health: 헬스체크
"""
from .metrics import router as metrics_router
from ..health import router as health_router

__all__ = [
    "metrics_router",
    "health_router"
]
