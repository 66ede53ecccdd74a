"""
Pytest configuration and fixtures
"""
import os
import sys
import pytest
from typing import Generator, AsyncGenerator
from unittest.mock import MagicMock, patch

# Add backend to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport


# ============================================
# App Fixtures
# ============================================

@pytest.fixture(scope="session")
def app():
    """Create FastAPI app for testing"""
    from main import app as fastapi_app
    return fastapi_app


@pytest.fixture
def client(app) -> Generator:
    """Synchronous test client"""
    with TestClient(app) as c:
        yield c


@pytest.fixture
async def async_client(app) -> AsyncGenerator:
    """Asynchronous test client"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ============================================
# Mock Fixtures
# ============================================

@pytest.fixture
def mock_k8s_clients():
    """Mock Kubernetes clients"""
    core_v1 = MagicMock()
    custom_api = MagicMock()
    with patch("services.pod.get_k8s_clients") as pods_mock, \
            patch("routers.health.get_k8s_clients") as health_mock:
        pods_mock.return_value = (core_v1, custom_api)
        health_mock.return_value = (core_v1, custom_api)
        yield {
            "core_v1": core_v1,
            "custom_api": custom_api,
            "mock": pods_mock,
        }


# ============================================
# Data Fixtures
# ============================================

@pytest.fixture
def running_pod():
    """Running pod with two containers, one restarted"""
    return {
        "metadata": {"name": "web-7d9f", "namespace": "default"},
        "spec": {
            "nodeName": "worker-1",
            "containers": [
                {
                    "name": "web",
                    "resources": {
                        "requests": {"cpu": "250m", "memory": "128Mi"},
                        "limits": {"cpu": "500m", "memory": "256Mi"},
                    },
                },
                {
                    "name": "sidecar",
                    "resources": {
                        "requests": {"cpu": "100m", "memory": "64Mi"},
                    },
                },
            ],
        },
        "status": {
            "phase": "Running",
            "containerStatuses": [
                {"name": "web", "ready": True, "restartCount": 2, "state": {"running": {}}},
                {"name": "sidecar", "ready": True, "restartCount": 1, "state": {"running": {}}},
            ],
        },
    }


@pytest.fixture
def crashing_pod():
    """Pod whose second container is in CrashLoopBackOff"""
    return {
        "metadata": {"name": "api-5c6b", "namespace": "backend"},
        "spec": {"containers": [{"name": "init"}, {"name": "api"}]},
        "status": {
            "phase": "Running",
            "containerStatuses": [
                {"name": "init", "ready": True, "restartCount": 0, "state": {"running": {}}},
                {
                    "name": "api",
                    "ready": False,
                    "restartCount": 7,
                    "state": {"waiting": {"reason": "CrashLoopBackOff"}},
                },
            ],
        },
    }


@pytest.fixture
def web_metrics():
    """metrics.k8s.io PodMetrics for running_pod"""
    return {
        "metadata": {"name": "web-7d9f", "namespace": "default"},
        "timestamp": "2024-03-14T13:05:00Z",
        "window": "30s",
        "containers": [
            {"name": "web", "usage": {"cpu": "120000000n", "memory": "100Mi"}},
            {"name": "sidecar", "usage": {"cpu": "3m", "memory": "20480Ki"}},
        ],
    }


@pytest.fixture
def prometheus_matrix():
    """Prometheus query_range response with three series"""
    return {
        "status": "success",
        "data": {
            "resultType": "matrix",
            "result": [
                {
                    "metric": {"pod": "web-1", "namespace": "default"},
                    "values": [[1710421500, "0.25"], [1710421560, "0.5"]],
                },
                {
                    "metric": {"pod": "web-2", "namespace": "default"},
                    "values": [[1710421500, "NaN"], [1710421560, "1"]],
                },
                {
                    "metric": {"pod": "web-3", "namespace": "default"},
                    "values": [[1710421500, "2"], [1710421560, "bogus"]],
                },
            ],
        },
    }
