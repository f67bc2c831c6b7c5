"""Domain errors – query and paging rule violations."""

from __future__ import annotations

from typing import Any

from catalog_query.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A listing rule was broken by the caller."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """One or more request fields are out of range.

    ``errors`` holds ``{"field": ..., "message": ...}`` entries, one per
    offending field, in the order they were checked.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = list(errors or [])

    @classmethod
    def check(cls, message: str, **failed: str | None) -> None:
        """Raise when any keyword maps to a failure text; ``None`` means ok."""
        errors = [{"field": f, "message": m} for f, m in failed.items() if m is not None]
        if errors:
            raise cls(message, errors=errors)

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors]

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.errors}


__all__ = ["DomainError", "ValidationError"]
