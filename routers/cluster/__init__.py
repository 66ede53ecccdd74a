"""
클러스터 관리 라우터
- pods: Pod 목록 및 상태 요약
"""
from .pods import router as pods_router

__all__ = [
    "pods_router",
]
