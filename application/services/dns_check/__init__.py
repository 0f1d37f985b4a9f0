from .endpoint_ips import get_ips_from_endpoints
from .resolver import ResolverHandle, SYSTEM_RESOLVER, create_resolver, dns_lookup
from .endpoint_check import EndpointCheck
from .checker import Checker
from .readiness import NodeReadinessGate

__all__ = [
    "get_ips_from_endpoints",
    "ResolverHandle",
    "SYSTEM_RESOLVER",
    "create_resolver",
    "dns_lookup",
    "EndpointCheck",
    "Checker",
    "NodeReadinessGate",
]
