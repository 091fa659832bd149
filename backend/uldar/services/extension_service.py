"""Uldar — Extension registry and API call dispatch."""
import asyncio
import logging
from collections.abc import Iterable, Sequence
from types import MappingProxyType
from typing import Any, Generic

from uldar.core.exceptions import DuplicateRegistrationError
from uldar.core.responses import ApiCallResponse, SystemError, UnsupportedRequest
from uldar.sdk.extension import ApiCallRequest, ApiExtension, UserT, dump_payload

logger = logging.getLogger(__name__)


class ApiExtensionRegistry(Generic[UserT]):
    """Immutable name -> extension lookup, built once at startup."""

    def __init__(self, extensions: Iterable[ApiExtension[UserT]]):
        by_name: dict[str, ApiExtension[UserT]] = {}
        for extension in extensions:
            if extension.name in by_name:
                raise DuplicateRegistrationError("extension", extension.name)
            by_name[extension.name] = extension
        self._extensions = MappingProxyType(by_name)

    @property
    def names(self) -> list[str]:
        return sorted(self._extensions)

    def get_extension(self, name: str) -> ApiExtension[UserT] | None:
        return self._extensions.get(name)


class ExtensionService(Generic[UserT]):
    """Delegates API calls to the extension named by the first path segment."""

    def __init__(self, registry: ApiExtensionRegistry[UserT]):
        self.registry = registry

    async def process_api_call(
        self, path: Sequence[str], request: ApiCallRequest[Any, UserT]
    ) -> ApiCallResponse:
        """
        Resolve extension and handler for `path` and run the handler.
        Unknown extension or path -> UnsupportedRequest; any fault raised by the handler -> SystemError.
        """
        if not path:
            logger.warning("Extension not found for empty path")
            return UnsupportedRequest()

        name, sub_path = path[0], tuple(path[1:])
        extension = self.registry.get_extension(name)
        if extension is None:
            logger.warning("Extension not found for path %s", list(path))
            return UnsupportedRequest()
        if not extension.is_defined_at(sub_path):
            logger.warning("Extension %r has no handler for path %s", name, list(sub_path))
            return UnsupportedRequest()

        try:
            return await extension.handler_for(sub_path)(request)
        except asyncio.CancelledError:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise
            logger.error(_system_error_message(path, request), exc_info=True)
            return SystemError()
        except Exception:
            logger.error(_system_error_message(path, request), exc_info=True)
            return SystemError()


def _system_error_message(path: Sequence[str], request: ApiCallRequest[Any, Any]) -> str:
    return f"System error on processing request = {dump_payload(request.data)} for path {list(path)}"
