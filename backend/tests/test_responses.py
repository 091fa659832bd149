"""Tests for the API call outcome taxonomy."""
import pytest
from pydantic import ValidationError

from uldar.core.responses import (
    Forbidden,
    InvalidRequest,
    NonOk,
    NotFound,
    Ok,
    SystemError,
    UnsupportedRequest,
    to_envelope,
)


def test_ok_defaults_to_empty_value():
    assert Ok().value is None


def test_ok_of_builds_object_from_fields():
    assert Ok.of(id=7).value == {"id": 7}


def test_invalid_request_requires_errors():
    with pytest.raises(ValidationError):
        InvalidRequest(errors=frozenset())


def test_invalid_request_of_single_error():
    assert InvalidRequest.of("bad") == InvalidRequest(errors={"bad"})


def test_variants_compare_by_type_and_value():
    assert Forbidden() == Forbidden()
    assert Forbidden() != NotFound()
    assert UnsupportedRequest() != SystemError()
    assert all(isinstance(v(), NonOk) for v in (Forbidden, NotFound, UnsupportedRequest, SystemError))
    assert not isinstance(Ok(), NonOk)


def test_responses_are_immutable():
    ok = Ok(value=1)
    with pytest.raises(ValidationError):
        ok.value = 2


def test_envelope_for_ok():
    assert to_envelope(Ok.of(id="x")) == {"data": {"id": "x"}, "error": None, "meta": None}


def test_envelope_for_invalid_request_lists_errors_sorted():
    envelope = to_envelope(InvalidRequest(errors={"b", "a"}))
    assert envelope["data"] is None
    assert envelope["error"]["code"] == "invalid_request"
    assert envelope["error"]["field_errors"] == ["a", "b"]


def test_envelope_for_forbidden():
    assert to_envelope(Forbidden())["error"]["code"] == "forbidden"
