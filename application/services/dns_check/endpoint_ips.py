from __future__ import annotations

from typing import List, Optional

from domain.entities.endpoints import EndpointsList
from domain.errors import NoEndpointsFound, NoIPsFound


def get_ips_from_endpoints(endpoints: Optional[EndpointsList]) -> List[str]:
    """Flatten endpoints → subsets → addresses into IPs, keeping their order."""
    if endpoints is None or not endpoints.items:
        raise NoEndpointsFound()

    ips = [
        address.ip
        for item in endpoints.items
        for subset in item.subsets
        for address in subset.addresses
    ]
    if not ips:
        raise NoIPsFound()
    return ips
