"""Observability – get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **context: Any) -> Any:
    """Return a structlog logger bound to *context*.

    ``None`` values are not bound, so optional context such as the listing
    namespace of a page without search history does not appear as ``null``
    on every event.
    """
    logger = structlog.get_logger(name)
    bound = {k: v for k, v in context.items() if v is not None}
    return logger.bind(**bound) if bound else logger


__all__ = ["get_logger"]
