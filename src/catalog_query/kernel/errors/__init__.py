"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    ├── ApplicationError         (application.py)
    │   ├── FetchFailure
    │   └── TimeoutError
    └── InfrastructureError      (infrastructure.py)
        ├── SerializationError
        │   ├── MalformedPersistedHistory
        │   └── MalformedAddressState
        └── ExternalServiceError
"""

from catalog_query.kernel.errors.application import (
    ApplicationError,
    FetchFailure,
    TimeoutError,
)
from catalog_query.kernel.errors.base import BaseError
from catalog_query.kernel.errors.domain import DomainError, ValidationError
from catalog_query.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    MalformedAddressState,
    MalformedPersistedHistory,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "FetchFailure",
    "InfrastructureError",
    "MalformedAddressState",
    "MalformedPersistedHistory",
    "SerializationError",
    "TimeoutError",
    "ValidationError",
]
