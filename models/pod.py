"""
Pod 관련 Pydantic 모델
클러스터 API가 반환하는 Pod/메트릭 스냅샷과 대시보드용 파생 데이터 구조 정의

스냅샷 모델은 필드가 비어 있어도 항상 생성되며, 누락된 필드는
정해진 기본값(빈 값, 0, None)으로 채워집니다.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from utils.resources import ResourceKind, format_quantity


class SnapshotModel(BaseModel):
    """K8s 스냅샷 공통 설정 (camelCase/snake_case 모두 허용, 알 수 없는 필드 무시)"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null 필드는 누락된 것으로 보고 기본값 적용
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


# ============================================
# 입력 스냅샷 (Pod spec/status)
# ============================================

class ResourceList(SnapshotModel):
    """리소스 이름 -> 수량 문자열 (cpu, memory만 사용)"""
    cpu: Optional[str] = None
    memory: Optional[str] = None

    @field_validator("cpu", "memory", mode="before")
    @classmethod
    def _quantity_to_str(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    def get(self, kind: ResourceKind) -> Optional[str]:
        return getattr(self, ResourceKind(kind).value)


class ResourceRequirements(SnapshotModel):
    """컨테이너 requests/limits"""
    requests: Optional[ResourceList] = None
    limits: Optional[ResourceList] = None


class ContainerSpec(SnapshotModel):
    """컨테이너 스펙"""
    name: str = ""
    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)


class ContainerStateWaiting(SnapshotModel):
    reason: Optional[str] = None
    message: Optional[str] = None


class ContainerStateRunning(SnapshotModel):
    started_at: Optional[Any] = Field(default=None, alias="startedAt")


class ContainerStateTerminated(SnapshotModel):
    reason: Optional[str] = None
    message: Optional[str] = None
    exit_code: Optional[int] = Field(default=None, alias="exitCode")


class ContainerState(SnapshotModel):
    """컨테이너의 현재 상태 (waiting, running, terminated 중 최대 하나)"""
    waiting: Optional[ContainerStateWaiting] = None
    running: Optional[ContainerStateRunning] = None
    terminated: Optional[ContainerStateTerminated] = None


class ContainerStatus(SnapshotModel):
    """컨테이너 런타임 상태"""
    name: str = ""
    ready: Optional[bool] = None
    restart_count: Optional[int] = Field(default=None, alias="restartCount")
    state: Optional[ContainerState] = None


class PodStatus(SnapshotModel):
    phase: Optional[str] = None
    reason: Optional[str] = None
    container_statuses: Optional[List[ContainerStatus]] = Field(
        default=None, alias="containerStatuses"
    )


class PodSpec(SnapshotModel):
    containers: List[ContainerSpec] = Field(default_factory=list)
    node_name: Optional[str] = Field(default=None, alias="nodeName")


class ObjectMeta(SnapshotModel):
    name: str = ""
    namespace: str = ""


def _snapshot_dict(obj: Any) -> Any:
    """kubernetes 클라이언트 모델 객체면 dict로 변환"""
    if obj is None or isinstance(obj, dict):
        return obj
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return obj


class Pod(SnapshotModel):
    """Pod 스냅샷"""
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: PodSpec = Field(default_factory=PodSpec)
    status: Optional[PodStatus] = None

    @classmethod
    def from_k8s(cls, obj: Any) -> "Pod":
        """kubernetes 클라이언트의 V1Pod 또는 API 응답 dict로부터 생성"""
        return cls.model_validate(_snapshot_dict(obj) or {})


# ============================================
# 메트릭 스냅샷 (metrics.k8s.io/v1beta1 PodMetrics)
# ============================================

class ContainerMetrics(SnapshotModel):
    """컨테이너별 순간 사용량"""
    name: str = ""
    usage: Optional[ResourceList] = None


class PodMetrics(SnapshotModel):
    """Pod 리소스 사용량 스냅샷"""
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    containers: List[ContainerMetrics] = Field(default_factory=list)

    @classmethod
    def from_k8s(cls, obj: Any) -> "PodMetrics":
        return cls.model_validate(_snapshot_dict(obj) or {})


# ============================================
# 파생 데이터
# ============================================

class PodPhase(str, Enum):
    """Pod 라이프사이클 단계"""
    PENDING = "Pending"  # 스케줄링 또는 이미지 다운로드 중
    RUNNING = "Running"  # 노드에 바인딩되고 최소 하나의 컨테이너가 실행 중
    SUCCEEDED = "Succeeded"  # 모든 컨테이너가 성공적으로 종료
    FAILED = "Failed"  # 모든 컨테이너 종료, 하나 이상 실패
    UNKNOWN = "Unknown"  # 상태를 알 수 없음 (노드 통신 오류 등)


class PodStatusInfo(BaseModel):
    """Pod 상태 분류 결과"""
    phase: PodPhase = PodPhase.UNKNOWN
    reason: str = ""


class ResourceTotal(BaseModel):
    """리소스 합계와 기여한 컨테이너 수

    값이 0이어도 기여한 컨테이너가 있으면 '요청 없음'과 구분됩니다.
    """
    value: int = Field(default=0, ge=0)
    contributors: int = Field(default=0, ge=0)

    def add(self, value: int) -> "ResourceTotal":
        return ResourceTotal(value=self.value + value, contributors=self.contributors + 1)

    def render(self, kind: ResourceKind) -> str:
        if self.contributors == 0:
            return "-"
        return format_quantity(kind, self.value)


class ResourceTotals(BaseModel):
    """한 리소스 종류의 사용량/요청/제한 합계"""
    usage: int = Field(default=0, ge=0)
    requests: ResourceTotal = Field(default_factory=ResourceTotal)
    limits: ResourceTotal = Field(default_factory=ResourceTotal)


class PodResources(BaseModel):
    """Pod 전체 리소스 합계"""
    cpu: ResourceTotals = Field(default_factory=ResourceTotals)
    memory: ResourceTotals = Field(default_factory=ResourceTotals)

    def get(self, kind: ResourceKind) -> ResourceTotals:
        return getattr(self, ResourceKind(kind).value)


class PodSummary(BaseModel):
    """대시보드 Pod 목록의 한 행"""
    name: str
    namespace: str
    node: Optional[str] = None
    ready: str
    restarts: int
    phase: PodPhase
    reason: str = ""
    resources: str


class PodListResponse(BaseModel):
    """Pod 목록 응답"""
    count: int
    pods: List[PodSummary]
    pods_by_namespace: Dict[str, int] = {}
    metrics_available: bool = False


__all__ = [
    "ResourceList",
    "ResourceRequirements",
    "ContainerSpec",
    "ContainerStateWaiting",
    "ContainerStateRunning",
    "ContainerStateTerminated",
    "ContainerState",
    "ContainerStatus",
    "PodStatus",
    "PodSpec",
    "ObjectMeta",
    "Pod",
    "ContainerMetrics",
    "PodMetrics",
    "PodPhase",
    "PodStatusInfo",
    "ResourceTotal",
    "ResourceTotals",
    "PodResources",
    "PodSummary",
    "PodListResponse",
]
