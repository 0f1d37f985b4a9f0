"""Infrastructure layer - cluster and reporting API clients."""
from .api import KubernetesClient, KuberhealthyClient

__all__ = [
    'KubernetesClient',
    'KuberhealthyClient',
]
