"""Config settings – Settings base class and ListingSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from catalog_query.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ListingSettings(Settings):
    """Tunables shared by every browse page.

    Environment variables use the ``CATALOG_`` prefix, e.g.
    ``CATALOG_DEBOUNCE_MS=300`` or ``CATALOG_PAGE_LIMIT=24``. An empty
    ``CATALOG_DEFAULT_SORT`` leaves the source order alone.
    """

    _prefix: ClassVar[str] = "CATALOG"

    debounce_ms: int = 500
    page_limit: int = 12
    history_capacity: int = 5
    history_key_prefix: str = "searchHistory"
    default_sort: str | None = "-updatedAt"
    api_base_url: str = ""
    request_timeout: float = 10.0

    def _validate(self) -> None:
        for name in ("debounce_ms", "page_limit", "history_capacity"):
            value = getattr(self, name)
            if value < 1:
                raise InvalidSettingValueError(name, value, "must be >= 1")
        if self.request_timeout <= 0:
            raise InvalidSettingValueError("request_timeout", self.request_timeout, "must be > 0")
        if not self.history_key_prefix:
            raise InvalidSettingValueError("history_key_prefix", self.history_key_prefix, "must not be empty")

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000


__all__ = ["ListingSettings", "Settings"]
