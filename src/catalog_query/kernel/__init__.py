"""Kernel – framework-agnostic errors and time primitives."""

from catalog_query.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ExternalServiceError,
    FetchFailure,
    InfrastructureError,
    MalformedAddressState,
    MalformedPersistedHistory,
    SerializationError,
    TimeoutError,
    ValidationError,
)
from catalog_query.kernel.time import LoopScheduler, ManualScheduler, Scheduler

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "FetchFailure",
    "InfrastructureError",
    "LoopScheduler",
    "MalformedAddressState",
    "MalformedPersistedHistory",
    "ManualScheduler",
    "Scheduler",
    "SerializationError",
    "TimeoutError",
    "ValidationError",
]
