import socket

import dns.exception
import dns.resolver
import pytest
from unittest.mock import patch

from application.services.dns_check.resolver import (
    DIAL_TIMEOUT_S,
    DNS_PORT,
    SYSTEM_RESOLVER,
    ResolverHandle,
    create_resolver,
    dns_lookup,
)
from domain.errors import InvalidResolverTarget, ResolutionFailed


# ============================================================================
# create_resolver
# ============================================================================

def test_create_resolver_binds_ip():
    handle = create_resolver("8.8.8.8")
    assert handle == ResolverHandle(server_ip="8.8.8.8", port=DNS_PORT, timeout_s=DIAL_TIMEOUT_S)
    assert handle.port == 53
    assert handle.timeout_s == 10.0
    assert not handle.is_system_default


def test_create_resolver_without_ip_is_system_default():
    assert create_resolver() is SYSTEM_RESOLVER
    assert create_resolver(None).is_system_default


@pytest.mark.parametrize("bad", ["", 0, b"8.8.8.8"])
def test_create_resolver_rejects_empty_or_non_string(bad):
    with pytest.raises(InvalidResolverTarget, match="need a valid ip"):
        create_resolver(bad)


def test_create_resolver_accepts_invalid_looking_ip_without_io():
    with patch("socket.socket") as sock, patch("socket.getaddrinfo") as gai:
        handle = create_resolver("not-an-ip")
    assert handle.server_ip == "not-an-ip"
    sock.assert_not_called()
    gai.assert_not_called()


# ============================================================================
# dns_lookup
# ============================================================================

def test_lookup_system_default_uses_getaddrinfo():
    with patch("application.services.dns_check.resolver.socket.getaddrinfo", return_value=[]) as gai:
        dns_lookup(SYSTEM_RESOLVER, "kubernetes.default")
    gai.assert_called_once_with("kubernetes.default", None)


def test_lookup_system_default_failure():
    err = socket.gaierror(socket.EAI_NONAME, "Name or service not known")
    with patch("application.services.dns_check.resolver.socket.getaddrinfo", side_effect=err):
        with pytest.raises(ResolutionFailed) as exc_info:
            dns_lookup(SYSTEM_RESOLVER, "bad.host.invalid")
    assert exc_info.value.hostname == "bad.host.invalid"
    assert exc_info.value.server is None
    assert "DNS Status check determined that bad.host.invalid is DOWN" in str(exc_info.value)


def test_lookup_pinned_server_configures_dnspython():
    seen = {}

    def fake_resolve_name(self, name, *args, **kwargs):
        seen["name"] = name
        seen["nameservers"] = [getattr(ns, "address", ns) for ns in self.nameservers]
        seen["port"] = self.port
        seen["timeout"] = self.timeout
        seen["tcp"] = kwargs.get("tcp", False)

    with patch.object(dns.resolver.Resolver, "resolve_name", fake_resolve_name):
        dns_lookup(create_resolver("10.96.0.10"), "google.com")

    assert seen["name"] == "google.com"
    assert seen["nameservers"] == ["10.96.0.10"]
    assert seen["port"] == 53
    assert seen["timeout"] == 10.0
    assert seen["tcp"] is False


def test_lookup_pinned_server_nxdomain():
    with patch.object(dns.resolver.Resolver, "resolve_name", side_effect=dns.resolver.NXDOMAIN()):
        with pytest.raises(ResolutionFailed) as exc_info:
            dns_lookup(create_resolver("10.0.0.1"), "bad.host.com")
    assert exc_info.value.server == "10.0.0.1"
    assert "bad.host.com is DOWN" in str(exc_info.value)
    assert isinstance(exc_info.value.error, dns.resolver.NXDOMAIN)


def test_lookup_pinned_server_timeout():
    with patch.object(dns.resolver.Resolver, "resolve_name", side_effect=dns.exception.Timeout()):
        with pytest.raises(ResolutionFailed):
            dns_lookup(create_resolver("10.0.0.1"), "google.com")


def test_lookup_pinned_server_not_an_ip():
    with pytest.raises(ResolutionFailed) as exc_info:
        dns_lookup(create_resolver("not-an-ip"), "google.com")
    assert exc_info.value.hostname == "google.com"


# ============================================================================
# Live queries
# ============================================================================

@pytest.mark.network
def test_live_lookup_public_resolver(network_enabled):
    dns_lookup(create_resolver("8.8.8.8"), "google.com")


@pytest.mark.network
def test_live_lookup_unresolvable(network_enabled):
    with pytest.raises(ResolutionFailed, match="bad.host.invalid"):
        dns_lookup(create_resolver("8.8.8.8"), "bad.host.invalid")
