"""
Application configuration settings
"""
import os
from typing import List


def _env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings"""

    # App
    APP_TITLE: str = "Kubernetes Cluster Dashboard API"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    CORS_CREDENTIALS: bool = True
    CORS_METHODS: List[str] = ["*"]
    CORS_HEADERS: List[str] = ["*"]

    # Prometheus
    PROMETHEUS_URL: str = os.getenv(
        "PROMETHEUS_URL",
        "http://prometheus-server.monitoring.svc.cluster.local:80"
    )
    PROMETHEUS_TIMEOUT: float = float(os.getenv("PROMETHEUS_TIMEOUT", "10.0"))

    # Charts
    CHART_DARK_MODE: bool = _env_bool("CHART_DARK_MODE")
    CHART_DEFAULT_STEP: int = int(os.getenv("CHART_DEFAULT_STEP", "60"))


settings = Settings()
