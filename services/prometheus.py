"""
Prometheus range query 클라이언트
query_range 응답을 라벨별 원본 시리즈(RawMetricSeries)로 변환
"""

import logging
import re
from typing import Dict, List, Optional

import httpx

from core.config import settings
from models.metrics import RawMetricSeries

logger = logging.getLogger(__name__)

_TEMPLATE_PATTERN = re.compile(r"\{\{\s*([a-zA-Z_][a-zA-Z0-9_]*)\s*\}\}")


class PrometheusQueryError(Exception):
    """Prometheus 조회 실패"""


def format_label(metric: Dict[str, str], template: Optional[str] = None) -> str:
    """시리즈 라벨 생성

    템플릿이 있으면 '{{pod}}' 형태의 자리표시자를 메트릭 라벨 값으로 치환하고,
    없으면 '{key="value", ...}' 형식의 라벨 셋을 그대로 사용합니다.

    Example:
        >>> format_label({"pod": "web-1", "namespace": "default"}, "{{namespace}}/{{pod}}")
        'default/web-1'
    """
    if template:
        return _TEMPLATE_PATTERN.sub(lambda m: metric.get(m.group(1), ""), template)

    name = metric.get("__name__", "")
    labels = ", ".join(
        f'{key}="{value}"' for key, value in sorted(metric.items()) if key != "__name__"
    )
    if not labels:
        return name
    return f"{name}{{{labels}}}"


def parse_query_range(payload: dict, label_template: Optional[str] = None) -> List[RawMetricSeries]:
    """query_range 응답 JSON을 RawMetricSeries 목록으로 변환"""
    if payload.get("status") != "success":
        raise PrometheusQueryError(payload.get("error", "unexpected response from Prometheus"))

    data = payload.get("data") or {}
    if data.get("resultType") != "matrix":
        raise PrometheusQueryError(f"Unsupported result type: {data.get('resultType')}")

    return [
        RawMetricSeries(
            label=format_label(result.get("metric") or {}, label_template),
            values=result.get("values") or [],
        )
        for result in data.get("result") or []
    ]


async def query_range(
    query: str,
    start: float,
    end: float,
    step: float,
    label_template: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> List[RawMetricSeries]:
    """Prometheus range query 실행

    Args:
        query: PromQL 쿼리
        start: 시작 시각 (unix seconds)
        end: 종료 시각 (unix seconds)
        step: 샘플 간격 (seconds)
        label_template: 시리즈 라벨 템플릿 (e.g., '{{pod}}')
        client: 재사용할 httpx 클라이언트 (없으면 새로 생성)

    Returns:
        List[RawMetricSeries]: 라벨별 원본 시리즈

    Raises:
        PrometheusQueryError: 연결 실패, HTTP 오류, 잘못된 응답
    """
    params = {"query": query, "start": start, "end": end, "step": step}
    url = f"{settings.PROMETHEUS_URL.rstrip('/')}/api/v1/query_range"

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.PROMETHEUS_TIMEOUT) as owned:
                response = await owned.get(url, params=params)
        else:
            response = await client.get(url, params=params)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPError as e:
        logger.error(f"Prometheus query failed: {e}")
        raise PrometheusQueryError(f"Prometheus query failed: {e}") from e
    except ValueError as e:
        raise PrometheusQueryError(f"Invalid JSON from Prometheus: {e}") from e

    series = parse_query_range(payload, label_template)
    logger.debug(f"Prometheus returned {len(series)} series for query: {query}")
    return series


__all__ = [
    "PrometheusQueryError",
    "format_label",
    "parse_query_range",
    "query_range",
]
