"""
Pod 관련 비즈니스 로직
Pod 스냅샷으로부터 Ready 수, 재시작 횟수, 리소스 요약, 상태를 계산하고
클러스터에서 Pod 목록과 메트릭을 조회
"""

import logging
from typing import Dict, Iterable, Optional

from kubernetes.client.rest import ApiException
from pydantic import ValidationError
from urllib3.exceptions import HTTPError

from core.kubernetes import get_k8s_clients
from models.pod import (
    ContainerSpec,
    Pod,
    PodListResponse,
    PodMetrics,
    PodPhase,
    PodResources,
    PodStatusInfo,
    PodSummary,
    ResourceList,
    ResourceTotal,
    ResourceTotals,
)
from utils.resources import QuantityParseError, ResourceKind, normalize

logger = logging.getLogger(__name__)

METRICS_GROUP = "metrics.k8s.io"
METRICS_VERSION = "v1beta1"


# ============================================
# Pod 상태 계산
# ============================================

def readiness(pod: Pod) -> str:
    """Ready 상태인 컨테이너 수 / 전체 컨테이너 수 ('R/N')"""
    statuses = (pod.status.container_statuses if pod.status else None) or []
    ready = sum(1 for status in statuses if status.ready)
    return f"{ready}/{len(statuses)}"


def restarts(pod: Pod) -> int:
    """컨테이너 재시작 횟수의 합"""
    statuses = (pod.status.container_statuses if pod.status else None) or []
    return sum(max(0, status.restart_count or 0) for status in statuses)


def _add_quantity(total: ResourceTotal, kind: ResourceKind, quantity: Optional[str], container: str) -> ResourceTotal:
    if quantity is None:
        return total
    try:
        return total.add(normalize(kind, quantity))
    except QuantityParseError as e:
        logger.warning(f"Skipping {kind.value} quantity of container '{container}': {e}")
        return total


def _usage(value: int, kind: ResourceKind, usage: Optional[ResourceList], container: str) -> int:
    quantity = usage.get(kind) if usage else None
    if quantity is None:
        return value
    try:
        return value + normalize(kind, quantity)
    except QuantityParseError as e:
        logger.warning(f"Skipping {kind.value} usage of container '{container}': {e}")
        return value


def aggregate_resources(
    containers: Iterable[ContainerSpec],
    metrics: Optional[PodMetrics] = None,
) -> PodResources:
    """컨테이너 requests/limits와 메트릭 사용량을 리소스 종류별로 합산

    requests/limits는 값을 제공한 컨테이너 수도 함께 기록하므로
    '0으로 요청됨'과 '요청 없음'을 구분할 수 있습니다.
    해석할 수 없는 수량은 건너뜁니다.
    """
    containers = list(containers)
    totals = {}

    for kind in ResourceKind:
        requests = ResourceTotal()
        limits = ResourceTotal()
        usage = 0

        for container in containers:
            resources = container.resources
            if resources.requests:
                requests = _add_quantity(requests, kind, resources.requests.get(kind), container.name)
            if resources.limits:
                limits = _add_quantity(limits, kind, resources.limits.get(kind), container.name)

        if metrics:
            for container in metrics.containers:
                usage = _usage(usage, kind, container.usage, container.name)

        totals[kind.value] = ResourceTotals(usage=usage, requests=requests, limits=limits)

    return PodResources(**totals)


def format_resources(resources: PodResources) -> str:
    """'CPU: 사용량m (요청/제한) | Memory: 사용량Mi (요청/제한)' 형식 문자열"""
    cpu = resources.cpu
    memory = resources.memory
    return (
        f"CPU: {cpu.usage}m "
        f"({cpu.requests.render(ResourceKind.CPU)}/{cpu.limits.render(ResourceKind.CPU)}) | "
        f"Memory: {memory.usage}Mi "
        f"({memory.requests.render(ResourceKind.MEMORY)}/{memory.limits.render(ResourceKind.MEMORY)})"
    )


def resource_summary(
    containers: Iterable[ContainerSpec],
    metrics: Optional[PodMetrics] = None,
) -> str:
    """Pod 리소스 요약 문자열"""
    return format_resources(aggregate_resources(containers, metrics))


def pod_status(pod: Pod) -> PodStatusInfo:
    """Pod 상태 분류

    Pod 수준 reason이 있으면 그대로 사용하고, 없으면 컨테이너 상태를 순서대로
    확인하여 처음으로 waiting 또는 terminated 상태인 컨테이너의 reason을 사용합니다.
    해당 reason이 비어 있어도 나머지 컨테이너는 확인하지 않습니다.
    """
    status = pod.status
    if status is None:
        return PodStatusInfo()

    try:
        phase = PodPhase(status.phase) if status.phase else PodPhase.UNKNOWN
    except ValueError:
        phase = PodPhase.UNKNOWN

    reason = status.reason or ""
    if reason:
        return PodStatusInfo(phase=phase, reason=reason)

    for container in status.container_statuses or []:
        state = container.state
        if state is None:
            continue
        if state.waiting is not None:
            reason = state.waiting.reason or ""
            break
        if state.terminated is not None:
            reason = state.terminated.reason or ""
            break

    return PodStatusInfo(phase=phase, reason=reason)


def summarize_pod(pod: Pod, metrics: Optional[PodMetrics] = None) -> PodSummary:
    """대시보드 Pod 목록의 한 행 생성"""
    status = pod_status(pod)
    return PodSummary(
        name=pod.metadata.name,
        namespace=pod.metadata.namespace,
        node=pod.spec.node_name,
        ready=readiness(pod),
        restarts=restarts(pod),
        phase=status.phase,
        reason=status.reason,
        resources=resource_summary(pod.spec.containers, metrics),
    )


# ============================================
# 클러스터 조회
# ============================================

def _metrics_key(namespace: str, name: str) -> str:
    return f"{namespace}/{name}"


def fetch_pod_metrics(custom, namespace: Optional[str] = None) -> Optional[Dict[str, PodMetrics]]:
    """metrics-server에서 Pod 메트릭 조회

    metrics-server가 없거나 조회에 실패하면 None을 반환합니다.
    형식이 잘못된 항목은 건너뜁니다.
    """
    try:
        if namespace:
            response = custom.list_namespaced_custom_object(
                group=METRICS_GROUP,
                version=METRICS_VERSION,
                namespace=namespace,
                plural="pods",
            )
        else:
            response = custom.list_cluster_custom_object(
                group=METRICS_GROUP,
                version=METRICS_VERSION,
                plural="pods",
            )
    except ApiException as e:
        logger.warning(f"Pod metrics unavailable: {e.status} {e.reason}")
        return None
    except HTTPError as e:
        logger.warning(f"Pod metrics unavailable: {e}")
        return None

    pod_metrics = {}
    for item in response.get("items", []):
        try:
            metrics = PodMetrics.from_k8s(item)
        except ValidationError as e:
            logger.warning(f"Skipping malformed pod metrics item: {e.error_count()} errors")
            continue
        pod_metrics[_metrics_key(metrics.metadata.namespace, metrics.metadata.name)] = metrics
    return pod_metrics


async def list_pods(namespace: Optional[str] = None) -> PodListResponse:
    """Pod 목록 조회 (namespace가 없으면 전체 네임스페이스)

    Returns:
        PodListResponse: Pod 요약 목록 및 네임스페이스별 개수
    """
    core_v1, custom = get_k8s_clients()
    if namespace:
        pods = core_v1.list_namespaced_pod(namespace)
    else:
        pods = core_v1.list_pod_for_all_namespaces()

    pod_metrics = fetch_pod_metrics(custom, namespace)

    result = []
    pods_by_namespace: Dict[str, int] = {}
    for item in pods.items:
        pod = Pod.from_k8s(item)
        metrics = None
        if pod_metrics is not None:
            metrics = pod_metrics.get(_metrics_key(pod.metadata.namespace, pod.metadata.name))
        result.append(summarize_pod(pod, metrics))

        ns = pod.metadata.namespace
        pods_by_namespace[ns] = pods_by_namespace.get(ns, 0) + 1

    logger.debug(f"Listed {len(result)} pods (namespace={namespace or '*'})")
    return PodListResponse(
        count=len(result),
        pods=result,
        pods_by_namespace=pods_by_namespace,
        metrics_available=pod_metrics is not None,
    )


async def get_pod(namespace: str, name: str) -> PodSummary:
    """단일 Pod 요약 조회"""
    core_v1, custom = get_k8s_clients()
    pod = Pod.from_k8s(core_v1.read_namespaced_pod(name, namespace))

    metrics = None
    try:
        item = custom.get_namespaced_custom_object(
            group=METRICS_GROUP,
            version=METRICS_VERSION,
            namespace=namespace,
            plural="pods",
            name=name,
        )
        metrics = PodMetrics.from_k8s(item)
    except ApiException as e:
        logger.warning(f"Metrics for pod {namespace}/{name} unavailable: {e.status} {e.reason}")
    except (HTTPError, ValidationError) as e:
        logger.warning(f"Metrics for pod {namespace}/{name} unavailable: {e}")

    return summarize_pod(pod, metrics)


__all__ = [
    "readiness",
    "restarts",
    "aggregate_resources",
    "format_resources",
    "resource_summary",
    "pod_status",
    "summarize_pod",
    "fetch_pod_metrics",
    "list_pods",
    "get_pod",
]
