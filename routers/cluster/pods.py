"""
Pod management API
Pod 목록, Ready 상태, 재시작 횟수, 리소스 요약 조회
"""
from fastapi import APIRouter, HTTPException
from kubernetes.client.rest import ApiException

from models.pod import PodListResponse, PodSummary
from services.pod import get_pod, list_pods

router = APIRouter(prefix="/api/pods", tags=["pods"])


@router.get("", response_model=PodListResponse)
async def get_all_pods():
    """모든 네임스페이스의 Pod 목록"""
    try:
        return await list_pods()
    except ApiException as e:
        raise HTTPException(status_code=e.status or 500, detail=e.reason)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{namespace}", response_model=PodListResponse)
async def get_namespace_pods(namespace: str):
    """특정 네임스페이스의 Pod 목록"""
    try:
        return await list_pods(namespace)
    except ApiException as e:
        raise HTTPException(status_code=e.status or 500, detail=e.reason)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{namespace}/{name}", response_model=PodSummary)
async def get_pod_summary(namespace: str, name: str):
    """단일 Pod 요약"""
    try:
        return await get_pod(namespace, name)
    except ApiException as e:
        raise HTTPException(status_code=e.status or 500, detail=e.reason)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
