"""Application services root exports."""
from .dns_check import Checker, EndpointCheck, NodeReadinessGate

__all__ = [
    "Checker",
    "EndpointCheck",
    "NodeReadinessGate",
]
