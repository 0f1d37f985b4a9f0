"""Check entities: the immutable run description and its single outcome."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..errors import ConfigurationInvalid


@dataclass(frozen=True)
class CheckSpec:
    """What to resolve, where, and how long the run may take."""

    hostname: str
    timeout: float
    namespace: str = ''
    label_selector: str = ''
    node_name: str = ''

    def __post_init__(self) -> None:
        if not self.hostname:
            raise ConfigurationInvalid("HOSTNAME environment variable has not been set")
        if self.timeout <= 0:
            raise ConfigurationInvalid(f"check timeout must be positive, got {self.timeout}")

    @property
    def uses_endpoints(self) -> bool:
        """True when a label selector switches the run to endpoint checks."""
        return bool(self.label_selector)


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True)
class CheckOutcome:
    """The verdict of one run. Produced once, reported once."""

    kind: OutcomeKind
    reason: Optional[str] = None

    @classmethod
    def success(cls) -> "CheckOutcome":
        return cls(OutcomeKind.SUCCESS)

    @classmethod
    def failure(cls, reason: str) -> "CheckOutcome":
        return cls(OutcomeKind.FAILURE, reason)

    @classmethod
    def timed_out(cls, reason: str) -> "CheckOutcome":
        return cls(OutcomeKind.TIMED_OUT, reason)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    def messages(self) -> list[str]:
        """Error list in the shape Kuberhealthy expects."""
        return [] if self.ok else [self.reason or self.kind.value]
