"""
메트릭 차트 관련 Pydantic 모델
Prometheus range query 결과와 차트용 시리즈 데이터 구조 정의
"""

import math
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_serializer


class RawMetricSeries(BaseModel):
    """라벨 하나에 대한 원본 샘플 목록 ([timestamp, "value"] 쌍)"""
    label: str
    values: List[List[Any]] = []


class ChartPoint(BaseModel):
    """차트의 한 점 (숫자가 아닌 값은 NaN으로 유지)"""
    time: Optional[float]
    value: Optional[float]

    @field_serializer("time", "value")
    def _serialize_number(self, number: Optional[float]) -> Optional[float]:
        # JSON에는 NaN/Infinity가 없으므로 null로 내보냄
        if number is None or not math.isfinite(number):
            return None
        return number


class ChartSeries(BaseModel):
    """차트 시리즈"""
    name: str
    data: List[ChartPoint] = []


class RenderedSeries(ChartSeries):
    """색상이 지정된 표시용 시리즈"""
    color: str


class TimeLabel(BaseModel):
    """X축 시간 라벨"""
    time: float
    label: str


class ChartData(BaseModel):
    """차트 API 응답"""
    query: str
    unit: str = ""
    time_diff: int
    selected: Optional[str] = None
    series: List[RenderedSeries] = Field(default_factory=list)
    rendered: List[RenderedSeries] = Field(default_factory=list)
    time_labels: List[TimeLabel] = Field(default_factory=list)


__all__ = [
    "RawMetricSeries",
    "ChartPoint",
    "ChartSeries",
    "RenderedSeries",
    "TimeLabel",
    "ChartData",
]
