"""Domain layer - check entities, errors, and collaborator interfaces."""
from .entities import (
    CheckSpec, CheckOutcome, OutcomeKind,
    EndpointAddress, EndpointSubset, Endpoints, EndpointsList,
)
from .errors import (
    DNSCheckError, ConfigurationInvalid, DirectoryQueryFailed, NoEndpointsFound,
    NoIPsFound, InvalidResolverTarget, ResolutionFailed, CheckTimedOut, ReportingFailed,
)
from .interfaces import IDirectoryService, IReportingSink

__all__ = [
    # Entities
    'CheckSpec',
    'CheckOutcome',
    'OutcomeKind',
    'EndpointAddress',
    'EndpointSubset',
    'Endpoints',
    'EndpointsList',
    # Errors
    'DNSCheckError',
    'ConfigurationInvalid',
    'DirectoryQueryFailed',
    'NoEndpointsFound',
    'NoIPsFound',
    'InvalidResolverTarget',
    'ResolutionFailed',
    'CheckTimedOut',
    'ReportingFailed',
    # Interfaces
    'IDirectoryService',
    'IReportingSink',
]
