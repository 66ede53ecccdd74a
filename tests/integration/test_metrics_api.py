"""
Integration tests for metrics chart API
"""
import pytest
from unittest.mock import AsyncMock, patch

from services.prometheus import PrometheusQueryError, parse_query_range
from services.timeseries import DEFAULT_PALETTES


@pytest.fixture
def mock_query_range(prometheus_matrix):
    """Patch the Prometheus client used by the chart router"""
    with patch("routers.monitoring.metrics.query_range", new_callable=AsyncMock) as mock:
        mock.return_value = parse_query_range(prometheus_matrix, "{{pod}}")
        yield mock


class TestMetricsAPI:
    """Tests for /api/metrics/chart"""

    def test_chart_all_series(self, client, mock_query_range):
        """Test all series are rendered with palette colors"""
        response = client.get("/api/metrics/chart", params={
            "query": "sum(rate(container_cpu_usage_seconds_total[5m])) by (pod)",
            "start": 1710421200,
            "end": 1710424800,
            "label": "{{pod}}",
            "dark": "false",
        })
        assert response.status_code == 200
        data = response.json()

        assert data["time_diff"] == 3600
        assert [s["name"] for s in data["rendered"]] == ["web-1", "web-2", "web-3"]
        assert [s["color"] for s in data["rendered"]] == list(DEFAULT_PALETTES.light[:3])
        assert len(data["time_labels"]) == 2
        mock_query_range.assert_awaited_once()
        assert mock_query_range.await_args.kwargs["label_template"] == "{{pod}}"

    def test_non_numeric_values_are_null(self, client, mock_query_range):
        """Test non-numeric samples keep their point with a null value"""
        response = client.get("/api/metrics/chart", params={"query": "up", "start": 0, "end": 60})
        data = response.json()

        web2 = data["series"][1]["data"]
        web3 = data["series"][2]["data"]
        assert web2[0]["value"] is None
        assert web2[1]["value"] == 1.0
        assert web3[1]["value"] is None

    def test_selected_series_keeps_color(self, client, mock_query_range):
        """Test selecting a series keeps its original color"""
        response = client.get("/api/metrics/chart", params={
            "query": "up",
            "start": 0,
            "end": 172800,
            "selected": "web-3",
            "dark": "true",
        })
        data = response.json()

        assert data["selected"] == "web-3"
        assert len(data["series"]) == 3
        assert len(data["rendered"]) == 1
        assert data["rendered"][0]["color"] == DEFAULT_PALETTES.dark[2]
        assert data["rendered"][0]["color"] == data["series"][2]["color"]

    def test_long_span_labels(self, client, mock_query_range):
        """Test day-or-longer spans use 'MM/DD hh:mm' labels"""
        response = client.get("/api/metrics/chart", params={
            "query": "up",
            "start": 0,
            "end": 172800,
            "tz": "UTC",
        })
        labels = [label["label"] for label in response.json()["time_labels"]]
        assert labels == ["03/14 13:05", "03/14 13:06"]

    def test_invalid_range(self, client, mock_query_range):
        response = client.get("/api/metrics/chart", params={"query": "up", "start": 100, "end": 50})
        assert response.status_code == 400

    def test_unknown_timezone(self, client, mock_query_range):
        response = client.get("/api/metrics/chart", params={"query": "up", "tz": "Mars/Olympus"})
        assert response.status_code == 400

    def test_missing_query(self, client):
        response = client.get("/api/metrics/chart")
        assert response.status_code == 422

    def test_prometheus_failure(self, client):
        """Test Prometheus errors map to 502"""
        with patch("routers.monitoring.metrics.query_range", new_callable=AsyncMock) as mock:
            mock.side_effect = PrometheusQueryError("connection refused")

            response = client.get("/api/metrics/chart", params={"query": "up"})
            assert response.status_code == 502
            assert "connection refused" in response.json()["detail"]
