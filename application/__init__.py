"""Application layer - the DNS check engine."""
from .services import Checker, EndpointCheck, NodeReadinessGate

__all__ = [
    'Checker',
    'EndpointCheck',
    'NodeReadinessGate',
]
