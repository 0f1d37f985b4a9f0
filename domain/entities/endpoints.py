"""Endpoint entities mirroring the Kubernetes v1 EndpointsList shape."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class EndpointAddress:
    """A single backing address of an endpoint subset."""

    ip: str
    hostname: Optional[str] = None
    node_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EndpointAddress":
        return cls(
            ip=data.get('ip', ''),
            hostname=data.get('hostname'),
            node_name=data.get('nodeName'),
        )


@dataclass
class EndpointSubset:
    """Group of addresses sharing the same ports."""

    addresses: List[EndpointAddress] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EndpointSubset":
        return cls(
            addresses=[EndpointAddress.from_dict(a) for a in data.get('addresses') or []],
        )


@dataclass
class Endpoints:
    """One Endpoints object, usually backing a single Service."""

    name: str = ''
    namespace: str = ''
    subsets: List[EndpointSubset] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Endpoints":
        metadata = data.get('metadata') or {}
        return cls(
            name=metadata.get('name', ''),
            namespace=metadata.get('namespace', ''),
            subsets=[EndpointSubset.from_dict(s) for s in data.get('subsets') or []],
        )


@dataclass
class EndpointsList:
    """Result of listing endpoints with a label selector."""

    items: List[Endpoints] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EndpointsList":
        return cls(items=[Endpoints.from_dict(i) for i in data.get('items') or []])
