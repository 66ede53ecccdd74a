"""
Metrics chart API
Prometheus range query 결과를 차트용 시리즈로 변환
"""
import time
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import APIRouter, HTTPException, Query

from core.config import settings
from models.metrics import ChartData
from services.prometheus import PrometheusQueryError, query_range
from services.timeseries import render_series, time_labels, to_chart_series

router = APIRouter(prefix="/api/metrics", tags=["metrics"])


@router.get("/chart", response_model=ChartData)
async def get_chart(
    query: str = Query(..., description="PromQL 쿼리"),
    start: Optional[float] = Query(None, description="시작 시각 (기본: end - 1시간)"),
    end: Optional[float] = Query(None, description="종료 시각 (기본: 현재)"),
    step: Optional[float] = Query(None, gt=0, description="샘플 간격 (초)"),
    label: Optional[str] = Query(None, description="라벨 템플릿 (e.g., {{pod}})"),
    selected: Optional[str] = Query(None, description="선택된 시리즈 라벨"),
    dark: Optional[bool] = Query(None, description="다크 모드 색상표 사용"),
    unit: str = Query("", description="Y축 단위"),
    tz: Optional[str] = Query(None, description="시간 라벨 타임존 (e.g., Asia/Seoul)"),
):
    """차트 데이터 조회"""
    end = end if end is not None else time.time()
    start = start if start is not None else end - 3600
    if start >= end:
        raise HTTPException(status_code=400, detail="start must be before end")

    try:
        zone = ZoneInfo(tz) if tz else None
    except (ZoneInfoNotFoundError, ValueError):
        raise HTTPException(status_code=400, detail=f"Unknown time zone: {tz}")

    dark_mode = settings.CHART_DARK_MODE if dark is None else dark
    time_diff = int(end - start)

    try:
        results = await query_range(
            query,
            start,
            end,
            step or settings.CHART_DEFAULT_STEP,
            label_template=label,
        )
    except PrometheusQueryError as e:
        raise HTTPException(status_code=502, detail=str(e))

    series = to_chart_series(results)
    rendered = render_series(series, selected, dark_mode)

    return ChartData(
        query=query,
        unit=unit,
        time_diff=time_diff,
        selected=selected or None,
        series=render_series(series, None, dark_mode),
        rendered=rendered,
        time_labels=time_labels(rendered, time_diff, zone),
    )
