"""Uldar — API call outcomes and response envelope helpers."""
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, field_validator


class ApiCallResponse(BaseModel):
    """Closed set of outcomes every API call reduces to: `Ok` or one of the `NonOk` variants."""

    model_config = ConfigDict(frozen=True)

    code: ClassVar[str]


class Ok(ApiCallResponse):
    """Successful call carrying an application defined value (None when empty)."""

    code: ClassVar[str] = "ok"

    value: Any = None

    @classmethod
    def of(cls, **fields: Any) -> "Ok":
        """Ok carrying an object built from named fields, e.g. `Ok.of(id=entity_id)`."""
        return cls(value=fields)


class NonOk(ApiCallResponse):
    """Any terminal outcome other than success."""

    code: ClassVar[str] = "error"


class Forbidden(NonOk):
    code: ClassVar[str] = "forbidden"


class InvalidRequest(NonOk):
    """Payload failed decoding or domain validation."""

    code: ClassVar[str] = "invalid_request"

    errors: frozenset[str]

    @field_validator("errors")
    @classmethod
    def _not_empty(cls, errors: frozenset[str]) -> frozenset[str]:
        if not errors:
            raise ValueError("InvalidRequest requires at least one error")
        return errors

    @classmethod
    def of(cls, error: str) -> "InvalidRequest":
        return cls(errors=frozenset({error}))


class NotFound(NonOk):
    code: ClassVar[str] = "not_found"


class UnsupportedRequest(NonOk):
    code: ClassVar[str] = "unsupported_request"


class SystemError(NonOk):  # noqa: A001
    code: ClassVar[str] = "system_error"


def success_response(data: Any, meta: dict | None = None) -> dict:
    return {"data": data, "error": None, "meta": meta}


def error_response(code: str, message: str, field_errors: list[str] | None = None, meta: dict | None = None) -> dict:
    return {
        "data": None,
        "error": {
            "code": code,
            "message": message,
            "field_errors": field_errors or []
        },
        "meta": meta
    }


_MESSAGES = {
    Forbidden: "Operation is not allowed",
    InvalidRequest: "Request is invalid",
    NotFound: "Entity not found",
    UnsupportedRequest: "Request is not supported",
    SystemError: "Internal error",
}


def to_envelope(response: ApiCallResponse) -> dict:
    """Render a call outcome as the standard {data, error, meta} envelope."""
    if isinstance(response, Ok):
        return success_response(response.value)
    field_errors = sorted(response.errors) if isinstance(response, InvalidRequest) else None
    return error_response(response.code, _MESSAGES.get(type(response), "Request failed"), field_errors)
