"""Error taxonomy for the DNS resolution check."""
from typing import Optional


class DNSCheckError(Exception):
    """Base class for every error raised by the check."""


class ConfigurationInvalid(DNSCheckError):
    """Required settings are missing; the check never runs."""


class DirectoryQueryFailed(DNSCheckError):
    """The endpoint query against the cluster API failed."""


class NoEndpointsFound(DNSCheckError):
    def __init__(self, message: str = "no endpoints found") -> None:
        super().__init__(message)


class NoIPsFound(DNSCheckError):
    def __init__(self, message: str = "no ips found in endpoints list") -> None:
        super().__init__(message)


class InvalidResolverTarget(DNSCheckError):
    def __init__(self, message: str = "need a valid ip to create Resolver") -> None:
        super().__init__(message)


class ResolutionFailed(DNSCheckError):
    """A single hostname lookup failed."""

    def __init__(self, hostname: str, error: Optional[BaseException] = None, server: Optional[str] = None) -> None:
        self.hostname = hostname
        self.error = error
        self.server = server
        via = f" via {server}" if server else ""
        message = f"DNS Status check determined that {hostname} is DOWN{via}: {error}"
        super().__init__(message)


class CheckTimedOut(DNSCheckError):
    def __init__(self, message: str = "Failed to complete DNS Status check in time! Timeout was reached.") -> None:
        super().__init__(message)


class ReportingFailed(DNSCheckError):
    """The verdict could not be delivered to Kuberhealthy."""
