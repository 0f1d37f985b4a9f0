from __future__ import annotations

import socket
from dataclasses import dataclass
from typing import Any, Optional

import dns.exception
import dns.resolver

from domain.errors import InvalidResolverTarget, ResolutionFailed

DNS_PORT = 53
# per-query timeout towards a pinned server
DIAL_TIMEOUT_S = 10.0


@dataclass(frozen=True)
class ResolverHandle:
    """Where lookups go. ``server_ip`` of None means the host's own resolver path."""

    server_ip: Optional[str] = None
    port: int = DNS_PORT
    timeout_s: float = DIAL_TIMEOUT_S

    @property
    def is_system_default(self) -> bool:
        return self.server_ip is None

    def __str__(self) -> str:
        return "system" if self.server_ip is None else f"{self.server_ip}:{self.port}/udp"


SYSTEM_RESOLVER = ResolverHandle()


def create_resolver(ip: Any = None) -> ResolverHandle:
    """Build a handle bound to ``ip``, or the system default when no ip is given.

    Nothing is sent on the wire here, so any non-empty string is accepted.
    """
    if ip is None:
        return SYSTEM_RESOLVER
    if not isinstance(ip, str) or not ip:
        raise InvalidResolverTarget()
    return ResolverHandle(server_ip=ip)


def _pinned_resolver(handle: ResolverHandle) -> dns.resolver.Resolver:
    resolver = dns.resolver.Resolver(configure=False)
    # port first: dnspython binds it into each nameserver when they are assigned
    resolver.port = handle.port
    resolver.nameservers = [handle.server_ip]
    resolver.timeout = handle.timeout_s
    resolver.lifetime = handle.timeout_s
    return resolver


def dns_lookup(resolver: ResolverHandle, host: str) -> None:
    """Resolve ``host`` once. Blocking; returns nothing because only resolvability matters."""
    try:
        if resolver.is_system_default:
            socket.getaddrinfo(host, None)
        else:
            # UDP only; A and AAAA, succeeding when either family answers
            _pinned_resolver(resolver).resolve_name(host)
    except (socket.gaierror, UnicodeError) as e:
        raise ResolutionFailed(host, e) from e
    except (dns.exception.DNSException, ValueError) as e:
        # ValueError: dnspython rejects a nameserver that is not an IP address
        raise ResolutionFailed(host, e, server=resolver.server_ip) from e
