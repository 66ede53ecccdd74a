"""
메트릭 시계열 변환
Prometheus 원본 시리즈를 차트용 시리즈로 변환하고 색상, 시간축 라벨, 값 표시 형식을 결정
"""

import math
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Iterable, List, Optional, Sequence, Tuple

from models.metrics import ChartPoint, ChartSeries, RawMetricSeries, RenderedSeries, TimeLabel

ONE_DAY = 86400


@dataclass(frozen=True)
class ChartPalettes:
    """라이트/다크 모드 색상표"""
    light: Tuple[str, ...]
    dark: Tuple[str, ...]

    def colors(self, dark_mode: bool) -> Tuple[str, ...]:
        return self.dark if dark_mode else self.light


DEFAULT_PALETTES = ChartPalettes(
    light=(
        "#10dc60",
        "#ffce00",
        "#f04141",
        "#0cd1e8",
        "#7044ff",
        "#326ce5",
        "#28e070",
        "#ffd31a",
        "#f25454",
        "#24d6ea",
        "#7e57ff",
        "#477be8",
    ),
    dark=(
        "#2fdf75",
        "#ffd534",
        "#ff4961",
        "#50c8ff",
        "#6a64ff",
        "#326ce5",
        "#44e283",
        "#ffd948",
        "#ff5b71",
        "#62ceff",
        "#7974ff",
        "#477be8",
    ),
)


def _to_float(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def to_chart_series(results: Iterable[RawMetricSeries]) -> List[ChartSeries]:
    """원본 시리즈를 차트 시리즈로 변환

    샘플 순서는 그대로 유지되며, 숫자로 변환할 수 없거나 빠진 값은 NaN으로 남겨
    시간축 정렬이 깨지지 않도록 합니다.
    """
    series = []
    for result in results:
        data = [
            ChartPoint(
                time=_to_float(sample[0] if sample else None),
                value=_to_float(sample[1] if len(sample) > 1 else None),
            )
            for sample in result.values
        ]
        series.append(ChartSeries(name=result.label, data=data))
    return series


def get_color(index: int, dark_mode: bool, palettes: ChartPalettes = DEFAULT_PALETTES) -> str:
    """시리즈 위치에 해당하는 색상"""
    if index < 0:
        index = 0
    colors = palettes.colors(dark_mode)
    return colors[index % len(colors)]


def render_series(
    series: Sequence[ChartSeries],
    selected: Optional[str] = None,
    dark_mode: bool = False,
    palettes: ChartPalettes = DEFAULT_PALETTES,
) -> List[RenderedSeries]:
    """표시할 시리즈 목록과 색상 결정

    색상은 전체 시리즈 목록에서의 위치로 정해지므로 하나만 선택해도
    원래 색상을 유지합니다. 선택된 라벨과 일치하는 시리즈가 없으면 빈 목록을 반환합니다.
    """
    if not selected:
        return [
            RenderedSeries(name=serie.name, data=list(serie.data), color=get_color(index, dark_mode, palettes))
            for index, serie in enumerate(series)
        ]

    matches = [index for index, serie in enumerate(series) if serie.name == selected]
    if not matches:
        return []

    # 같은 라벨이 여러 개면 첫 번째 시리즈의 색상을 사용
    color = get_color(matches[0], dark_mode, palettes)
    return [
        RenderedSeries(name=series[index].name, data=list(series[index].data), color=color)
        for index in matches
    ]


def toggle_selection(selected: Optional[str], name: str) -> Optional[str]:
    """범례 클릭: 이미 선택된 라벨이면 선택 해제, 아니면 선택"""
    return None if selected == name else name


def format_time(timestamp: float, time_diff: float, tz: Optional[tzinfo] = None) -> str:
    """X축 시간 라벨

    조회 범위가 24시간 이상이면 'MM/DD hh:mm', 그보다 짧으면 'hh:mm'
    """
    d = datetime.fromtimestamp(timestamp, tz)
    if time_diff >= ONE_DAY:
        return d.strftime("%m/%d %H:%M")
    return d.strftime("%H:%M")


def time_labels(
    series: Iterable[ChartSeries],
    time_diff: float,
    tz: Optional[tzinfo] = None,
) -> List[TimeLabel]:
    """시리즈에 포함된 시각들의 라벨 (오름차순, 중복 제거)"""
    times = sorted({
        point.time
        for serie in series
        for point in serie.data
        if point.time is not None and math.isfinite(point.time)
    })
    return [TimeLabel(time=t, label=format_time(t, time_diff, tz)) for t in times]


def format_value(value: float, unit: str = "") -> str:
    """툴팁 값 표시 (소수점 5자리 + 단위)"""
    return f"{value:.5f} {unit}".rstrip()


__all__ = [
    "ChartPalettes",
    "DEFAULT_PALETTES",
    "to_chart_series",
    "get_color",
    "render_series",
    "toggle_selection",
    "format_time",
    "time_labels",
    "format_value",
]
