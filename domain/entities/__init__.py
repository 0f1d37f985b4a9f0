"""Domain entities."""
from .check import CheckSpec, CheckOutcome, OutcomeKind
from .endpoints import EndpointAddress, EndpointSubset, Endpoints, EndpointsList

__all__ = [
    'CheckSpec',
    'CheckOutcome',
    'OutcomeKind',
    'EndpointAddress',
    'EndpointSubset',
    'Endpoints',
    'EndpointsList',
]
