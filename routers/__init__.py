"""
API Routers - 기능별 모듈화

디렉터리 구조:
- cluster/   : 클러스터 조회 (pods)
- monitoring/: 모니터링 (metrics, health)
"""

# Cluster 라우터
from .cluster import pods_router

# Monitoring 라우터
from .monitoring import (
    metrics_router,
    health_router
)

__all__ = [
    # Cluster
    'pods_router',
    # Monitoring
    'metrics_router',
    'health_router',
]
