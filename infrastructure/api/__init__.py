"""Infrastructure API module."""
from .kubernetes_client import KubernetesClient
from .kuberhealthy_client import KuberhealthyClient

__all__ = [
    'KubernetesClient',
    'KuberhealthyClient',
]
