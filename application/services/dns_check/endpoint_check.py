from __future__ import annotations

from typing import Callable, List, Optional

from core.logging.logger import StructuredLogger
from domain.errors import DirectoryQueryFailed, ResolutionFailed
from domain.interfaces.directory import IDirectoryService
from .blocking import run_blocking
from .endpoint_ips import get_ips_from_endpoints
from .resolver import ResolverHandle, create_resolver, dns_lookup

Lookup = Callable[[ResolverHandle, str], None]
ResolverFactory = Callable[[str], ResolverHandle]


class EndpointCheck:
    """Resolve a hostname through every DNS endpoint selected by label.

    Servers are tried in the order the API returns them and the first failure
    ends the check; the remaining servers are not queried.
    """

    def __init__(
        self,
        directory: IDirectoryService,
        logger: StructuredLogger,
        *,
        namespace: str = "",
        label_selector: str,
        resolver_factory: Optional[ResolverFactory] = None,
        lookup: Optional[Lookup] = None,
    ) -> None:
        self.directory = directory
        self.logger = logger
        self.namespace = namespace
        self.label_selector = label_selector
        self.resolver_factory = resolver_factory or create_resolver
        self.lookup = lookup or dns_lookup

    async def discover(self) -> List[str]:
        """IPs of the DNS endpoints matching the selector."""
        try:
            endpoints = await self.directory.list_endpoints(self.namespace, self.label_selector)
        except Exception as e:
            message = f"DNS status check unable to get dns endpoints from cluster: {e}"
            self.logger.error(lambda: message)
            raise DirectoryQueryFailed(message) from e
        ips = get_ips_from_endpoints(endpoints)
        self.logger.debug(
            lambda: "dns-endpoints-discovered",
            extra={"selector": self.label_selector, "namespace": self.namespace or "*", "ips": ips},
        )
        return ips

    async def run(self, hostname: str) -> None:
        for ip in await self.discover():
            resolver = self.resolver_factory(ip)
            self.logger.trace(lambda: "dns-endpoint-lookup", extra={"server": str(resolver), "host": hostname})
            try:
                await run_blocking(self.lookup, resolver, hostname)
            except ResolutionFailed as e:
                failure = e if e.server else ResolutionFailed(hostname, e.error, server=ip)
                self.logger.error(lambda: str(failure), extra={"server": ip})
                if failure is e:
                    raise
                raise failure from e
        self.logger.info(lambda: f"DNS Status check from service endpoint determined that {hostname} was OK.")
