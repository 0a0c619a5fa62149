"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

from radioking.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    InternalError,
    NotFoundError,
    SerializationError,
    UnauthorizedError,
    ValidationError,
)
from radioking.kernel.messaging import (
    ConsumerAlreadyRunningError,
    ConsumerError,
    ConsumerStartError,
    MessagingError,
    PublishError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        assert BaseError("wrap", cause=cause).__cause__ is cause

    def test_str_without_cause_is_message(self) -> None:
        assert str(BaseError("oops")) == "oops"

    def test_str_appends_cause(self) -> None:
        err = BaseError("failed to create playlist", cause=RuntimeError("disk full"))
        assert str(err) == "failed to create playlist: disk full"


# ---------------------------------------------------------------------------
# Taxonomy
# ---------------------------------------------------------------------------


class TestHierarchy:
    def test_validation_and_not_found_are_domain_errors(self) -> None:
        assert issubclass(ValidationError, DomainError)
        assert issubclass(NotFoundError, DomainError)

    def test_internal_and_unauthorized_are_application_errors(self) -> None:
        assert issubclass(InternalError, ApplicationError)
        assert issubclass(UnauthorizedError, ApplicationError)

    def test_serialization_is_infrastructure_error(self) -> None:
        assert issubclass(SerializationError, InfrastructureError)

    def test_transport_errors_are_outside_base_error(self) -> None:
        for exc_type in (MessagingError, PublishError, ConsumerError):
            assert not issubclass(exc_type, BaseError)

    def test_supervisor_errors_are_consumer_errors(self) -> None:
        assert issubclass(ConsumerAlreadyRunningError, ConsumerError)
        assert issubclass(ConsumerStartError, ConsumerError)
        assert str(ConsumerAlreadyRunningError()) == "consumer service is already running"


class TestValidationError:
    def test_errors_default_empty(self) -> None:
        assert ValidationError("bad").errors == []

    def test_errors_in_to_dict(self) -> None:
        err = ValidationError("track 1 invalid", errors=[{"track": 1}])
        assert err.to_dict()["errors"] == [{"track": 1}]
        assert err.code == "validation_error"


class TestNotFoundError:
    def test_message_with_identifier(self) -> None:
        err = NotFoundError("playlist", 5)
        assert str(err) == "playlist 5 not found"
        assert err.resource == "playlist"
        assert err.identifier == 5

    def test_message_without_identifier(self) -> None:
        assert str(NotFoundError("playlist")) == "playlist not found"


class TestSerializationError:
    def test_payload_type_kept(self) -> None:
        err = SerializationError("bad json", payload_type="TrackPlayedEvent")
        assert err.payload_type == "TrackPlayedEvent"
        assert err.code == "serialization_error"
