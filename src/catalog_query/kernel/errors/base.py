"""Kernel errors – BaseError, root of the catalog-query error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error carries two texts: ``message`` for logs and ``user_message``
    for whatever a listing page shows. The latter falls back to
    ``default_user_message`` and then to ``message``.

    Args:
        message: Diagnostic description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context, kept JSON-friendly.
        cause: Original exception, also chained as ``__cause__``.
        user_message: Text safe to render on a page.
    """

    default_code: str = "base_error"
    default_user_message: str | None = None

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        self._user_message = user_message
        if cause is not None:
            self.__cause__ = cause

    @property
    def user_message(self) -> str:
        return self._user_message or self.default_user_message or self.message

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Flat mapping for structured log fields."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
