# Business logic services
from .pod import (
    readiness,
    restarts,
    aggregate_resources,
    resource_summary,
    pod_status,
    summarize_pod,
    list_pods,
    get_pod,
)
from .timeseries import (
    ChartPalettes,
    DEFAULT_PALETTES,
    to_chart_series,
    get_color,
    render_series,
    toggle_selection,
    format_time,
    time_labels,
    format_value,
)
from .prometheus import PrometheusQueryError, query_range

__all__ = [
    # Pod
    'readiness', 'restarts', 'aggregate_resources', 'resource_summary',
    'pod_status', 'summarize_pod', 'list_pods', 'get_pod',
    # Time series
    'ChartPalettes', 'DEFAULT_PALETTES', 'to_chart_series', 'get_color',
    'render_series', 'toggle_selection', 'format_time', 'time_labels', 'format_value',
    # Prometheus
    'PrometheusQueryError', 'query_range',
]
