"""Uldar — Extension SDK: typed API calls and the base class for API extensions."""
import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter

from uldar.config import get_settings
from uldar.core.responses import ApiCallResponse, InvalidRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D")
UserT = TypeVar("UserT")

# In-extension path: the request path without its leading extension name
Path = tuple[str, ...]


def dump_payload(data: Any) -> str:
    """Compact JSON rendering of a payload for log messages."""
    try:
        return json.dumps(data, default=str, separators=(",", ":"))
    except Exception:
        pass
    try:
        return repr(data)
    except Exception:
        return f"<unprintable {type(data).__name__} payload>"


@dataclass(frozen=True)
class ApiCallRequest(Generic[D, UserT]):
    """Payload plus the caller identity; `identity=None` means anonymous."""

    data: D
    identity: UserT | None = None


Handler = Callable[[ApiCallRequest[T, UserT]], Awaitable[ApiCallResponse]]


class ApiCall(Generic[T, UserT]):
    """
    Bridges a raw payload to a typed handler.
    The payload is decoded first; a decode failure becomes InvalidRequest and the handler is never invoked.
    """

    def __init__(self, decode: Callable[[Any], T], handler: Handler[T, UserT]):
        self._decode = decode
        self._handler = handler

    @classmethod
    def typed(cls, model: Any, handler: Handler[T, UserT]) -> "ApiCall[T, UserT]":
        """ApiCall decoding the payload into `model` (a pydantic model or any type pydantic can validate)."""
        return cls(TypeAdapter(model).validate_python, handler)

    async def __call__(self, request: ApiCallRequest[Any, UserT]) -> ApiCallResponse:
        try:
            value = self._decode(request.data)
        except Exception as e:
            logger.warning(
                "Request can't be converted to action model. %s. Error: %s", dump_payload(request.data), e
            )
            return InvalidRequest.of(get_settings().INVALID_REQUEST_MESSAGE)
        return await self._handler(ApiCallRequest(value, request.identity))


class ApiExtension(ABC, Generic[UserT]):
    """
    Base class all backend API extensions must extend.
    An extension is addressed by its `name` (first request path segment) and
    serves a finite table of handlers keyed by the rest of the path.
    """

    name: str

    @property
    @abstractmethod
    def handlers(self) -> Mapping[Path, ApiCall[Any, UserT]]:
        """In-extension path -> handler. Only these exact paths are served."""

    def is_defined_at(self, path: Sequence[str]) -> bool:
        return tuple(path) in self.handlers

    def handler_for(self, path: Sequence[str]) -> ApiCall[Any, UserT]:
        return self.handlers[tuple(path)]
