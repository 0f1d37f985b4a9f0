"""Cluster directory interface used to discover DNS endpoints."""
from abc import ABC, abstractmethod
from typing import Any, Dict

from ..entities.endpoints import EndpointsList


class IDirectoryService(ABC):
    """Interface for the Kubernetes endpoint/node API."""

    @abstractmethod
    async def list_endpoints(self, namespace: str, label_selector: str) -> EndpointsList:
        """List endpoints matching a label selector."""
        pass

    @abstractmethod
    async def get_node(self, name: str) -> Dict[str, Any]:
        """Fetch a node object as raw JSON."""
        pass
