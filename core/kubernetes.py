"""
Kubernetes API 접근

대시보드는 두 API만 사용합니다:
- CoreV1Api: Pod 목록/단건 조회
- CustomObjectsApi: metrics.k8s.io Pod 사용량 조회

설정은 Pod 내부면 ServiceAccount(incluster), 아니면 ~/.kube/config 순서로 로드하며
로드된 클라이언트 쌍은 프로세스 전체에서 재사용합니다.
"""
import os
import logging
from typing import NamedTuple, Optional

from kubernetes import client, config
from kubernetes.client.rest import ApiException

logger = logging.getLogger(__name__)


class K8sClients(NamedTuple):
    """대시보드가 사용하는 API 클라이언트 쌍 (튜플로 언패킹 가능)"""
    core_v1: client.CoreV1Api
    custom: client.CustomObjectsApi


_clients: Optional[K8sClients] = None
_config_source: Optional[str] = None


def is_running_in_cluster() -> bool:
    """KUBERNETES_SERVICE_HOST가 있으면 클러스터 내부로 판단"""
    return os.environ.get('KUBERNETES_SERVICE_HOST') is not None


def _load_config() -> str:
    """클러스터 설정 로드 후 사용한 설정 종류('in-cluster' 또는 'kubeconfig') 반환

    Raises:
        RuntimeError: 어떤 설정도 로드할 수 없을 때
    """
    if is_running_in_cluster():
        try:
            config.load_incluster_config()
            logger.info("Kubernetes API: using in-cluster ServiceAccount")
            return "in-cluster"
        except config.ConfigException as e:
            logger.warning(f"In-cluster config unusable ({e}), trying kubeconfig")

    try:
        config.load_kube_config()
    except config.ConfigException as e:
        logger.error(f"No usable Kubernetes configuration: {e}")
        raise RuntimeError(
            "Unable to load Kubernetes configuration: "
            "not running in a cluster and no usable kubeconfig found"
        ) from e
    logger.info("Kubernetes API: using kubeconfig")
    return "kubeconfig"


def get_k8s_clients() -> K8sClients:
    """Pod/메트릭 조회용 클라이언트 쌍 반환 (최초 호출 시 설정 로드)

    Raises:
        RuntimeError: K8s 설정 로드 실패 시 (다음 호출에서 다시 시도)
    """
    global _clients, _config_source

    if _clients is None:
        _config_source = _load_config()
        _clients = K8sClients(client.CoreV1Api(), client.CustomObjectsApi())
    return _clients


def reset_k8s_clients() -> None:
    """캐시된 클라이언트 폐기 (kubeconfig 변경 후 재연결 등)"""
    global _clients, _config_source
    _clients = None
    _config_source = None


def get_environment_info() -> dict:
    """현재 K8s 연결 환경 정보"""
    in_cluster = is_running_in_cluster()
    info = {
        "environment": "in-cluster" if in_cluster else "local",
        "config_source": _config_source or ("ServiceAccount token" if in_cluster else "kubeconfig"),
    }
    if in_cluster:
        info["kubernetes_host"] = os.environ.get('KUBERNETES_SERVICE_HOST')
        info["kubernetes_port"] = os.environ.get('KUBERNETES_SERVICE_PORT')
    return info


__all__ = [
    'K8sClients',
    'get_k8s_clients',
    'reset_k8s_clients',
    'is_running_in_cluster',
    'get_environment_info',
    'ApiException',
]
