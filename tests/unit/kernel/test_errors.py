"""Unit tests for the kernel error hierarchy."""
from __future__ import annotations

import pytest

from catalog_query.config.validation import ConfigError
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
    TimeoutError as AppTimeoutError,
    ValidationError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        err = BaseError("boom")
        assert err.code == "base_error"
        assert err.message == "boom"
        assert err.detail == {}

    def test_explicit_code_and_detail(self) -> None:
        err = BaseError("boom", code="custom", detail={"k": 1})
        assert err.code == "custom"
        assert err.to_dict() == {"code": "custom", "message": "boom", "detail": {"k": 1}}

    def test_str_includes_code(self) -> None:
        assert str(BaseError("boom")) == "[base_error] boom"

    def test_empty_detail_left_out_of_dict(self) -> None:
        assert BaseError("boom").to_dict() == {"code": "base_error", "message": "boom"}

    def test_user_message_falls_back_to_message(self) -> None:
        assert BaseError("boom").user_message == "boom"

    def test_default_user_message(self) -> None:
        err = AppTimeoutError("GET /kpis after 10s")
        assert err.user_message == "The catalog took too long to answer."
        assert err.message == "GET /kpis after 10s"

    def test_cause_is_chained(self) -> None:
        original = ValueError("low level")
        err = BaseError("wrapped", cause=original)
        assert err.__cause__ is original
        assert "ValueError" in err.to_dict()["cause"]

    def test_repr(self) -> None:
        assert repr(DomainError("bad")) == "DomainError(code='domain_error', message='bad')"


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls, parent",
        [
            (ValidationError, DomainError),
            (FetchFailure, ApplicationError),
            (AppTimeoutError, ApplicationError),
            (ConfigError, ApplicationError),
            (SerializationError, InfrastructureError),
            (MalformedPersistedHistory, SerializationError),
            (MalformedAddressState, SerializationError),
            (ExternalServiceError, InfrastructureError),
        ],
    )
    def test_subclassing(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)
        assert issubclass(cls, BaseError)


class TestValidationError:
    def test_errors_in_dict(self) -> None:
        err = ValidationError("invalid", errors=[{"field": "page", "message": "must be >= 1"}])
        assert err.to_dict()["errors"] == [{"field": "page", "message": "must be >= 1"}]

    def test_errors_default_empty(self) -> None:
        assert ValidationError("invalid").errors == []

    def test_check_passes_when_nothing_failed(self) -> None:
        ValidationError.check("invalid", page=None, limit=None)

    def test_check_collects_failed_fields(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ValidationError.check("invalid", page="must be >= 1", limit=None, text="too long")
        assert exc_info.value.fields == ["page", "text"]


class TestFetchFailure:
    def test_user_message_defaults_to_message(self) -> None:
        err = FetchFailure("Failed to load concepts.")
        assert err.user_message == "Failed to load concepts."
        assert err.code == "fetch_failure"

    def test_explicit_user_message(self) -> None:
        err = FetchFailure("upstream 502", user_message="Please try again later.")
        assert err.message == "upstream 502"
        assert err.user_message == "Please try again later."


class TestInfrastructureErrors:
    def test_malformed_history_carries_key_and_reason(self) -> None:
        err = MalformedPersistedHistory("searchHistory:kpis", "not valid JSON")
        assert err.key == "searchHistory:kpis"
        assert err.reason == "not valid JSON"
        assert err.payload_type == "search_history"
        assert "searchHistory:kpis" in err.message

    def test_malformed_address_state(self) -> None:
        err = MalformedAddressState("page", "-3")
        assert err.field == "page"
        assert err.value == "-3"
        assert err.code == "malformed_address_state"

    def test_external_service_error(self) -> None:
        err = ExternalServiceError("/kpis", status_code=503)
        assert err.service == "/kpis"
        assert err.status_code == 503
        assert "/kpis" in err.message
