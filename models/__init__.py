# Pydantic models
from .pod import (
    ResourceList, ResourceRequirements, ContainerSpec, ContainerState,
    ContainerStateWaiting, ContainerStateRunning, ContainerStateTerminated,
    ContainerStatus, PodStatus, PodSpec, ObjectMeta, Pod, ContainerMetrics,
    PodMetrics, PodPhase, PodStatusInfo, ResourceTotal, ResourceTotals,
    PodResources, PodSummary, PodListResponse
)
from .metrics import (
    RawMetricSeries, ChartPoint, ChartSeries, RenderedSeries, TimeLabel, ChartData
)

__all__ = [
    # Pod snapshots
    'ResourceList', 'ResourceRequirements', 'ContainerSpec', 'ContainerState',
    'ContainerStateWaiting', 'ContainerStateRunning', 'ContainerStateTerminated',
    'ContainerStatus', 'PodStatus', 'PodSpec', 'ObjectMeta', 'Pod', 'ContainerMetrics',
    'PodMetrics',
    # Pod derived data
    'PodPhase', 'PodStatusInfo', 'ResourceTotal', 'ResourceTotals',
    'PodResources', 'PodSummary', 'PodListResponse',
    # Charts
    'RawMetricSeries', 'ChartPoint', 'ChartSeries', 'RenderedSeries', 'TimeLabel', 'ChartData',
]
