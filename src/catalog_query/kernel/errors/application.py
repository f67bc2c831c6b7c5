"""Application-layer errors – failures surfaced to the listing page."""

from __future__ import annotations

from catalog_query.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class FetchFailure(ApplicationError):
    """The data source could not produce a page of results.

    Never raised out of the controller: it is converted into an empty
    :class:`~catalog_query.application.search.ListingView` carrying
    ``user_message`` as its error.
    """

    default_code = "fetch_failure"

    def __init__(self, message: str = "Failed to load results.", **kwargs: object) -> None:
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class TimeoutError(ApplicationError):  # noqa: A001
    """Operation timed out."""

    default_code = "timeout"
    default_user_message = "The catalog took too long to answer."


__all__ = ["ApplicationError", "FetchFailure", "TimeoutError"]
