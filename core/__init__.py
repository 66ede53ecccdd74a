# Core module - configuration, Kubernetes clients
from .config import settings
from .kubernetes import (
    K8sClients,
    get_k8s_clients,
    reset_k8s_clients,
    is_running_in_cluster,
    get_environment_info,
)

__all__ = [
    'settings',
    'K8sClients',
    'get_k8s_clients',
    'reset_k8s_clients',
    'is_running_in_cluster',
    'get_environment_info',
]
