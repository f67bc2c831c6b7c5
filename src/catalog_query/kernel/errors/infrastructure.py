"""Infrastructure errors – I/O failures, persisted payloads, external integrations."""

from __future__ import annotations

from typing import Any

from catalog_query.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class MalformedPersistedHistory(SerializationError):
    """A stored search-history payload is not a JSON list of strings."""

    default_code = "malformed_persisted_history"

    def __init__(self, key: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Persisted history under '{key}' is malformed: {reason}",
            payload_type="search_history",
            **kwargs,
        )
        self.key = key
        self.reason = reason


class MalformedAddressState(SerializationError):
    """A query-string field could not be decoded."""

    default_code = "malformed_address_state"

    def __init__(self, field: str, value: str, **kwargs: Any) -> None:
        super().__init__(
            f"Address field '{field}' has undecodable value {value!r}",
            payload_type="address_state",
            **kwargs,
        )
        self.field = field
        self.value = value


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


__all__ = [
    "ExternalServiceError",
    "InfrastructureError",
    "MalformedAddressState",
    "MalformedPersistedHistory",
    "SerializationError",
]
