"""Uldar — Widget SDK: data providers and the rendering configuration repository contract."""
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from uldar.core.exceptions import UnsupportedWidgetApiError
from uldar.schemas.widget import WidgetApiRequest, WidgetRenderingConfiguration

ConfigIdT = TypeVar("ConfigIdT")


class WidgetDataProvider(ABC):
    """Backend for one UI widget: produces its render model and serves its API calls."""

    id: str

    @abstractmethod
    async def get_render_model(self, configuration: Any) -> Any:
        """Render model for the widget given its configuration."""

    @abstractmethod
    async def process_api_request(self, request: WidgetApiRequest) -> Any:
        """Response to an API request sent by the widget."""


class StaticWidgetDataProvider(WidgetDataProvider):
    """
    Provider for widgets without backend logic: the configuration itself is the render model,
    so the stored configuration works as the widget's model storage.
    """

    def __init__(self, id: str):
        self.id = id

    async def get_render_model(self, configuration: Any) -> Any:
        return configuration

    async def process_api_request(self, request: WidgetApiRequest) -> Any:
        raise UnsupportedWidgetApiError(f"API calls are not supported for static widget {self.id!r}")


class WidgetRenderingRepository(ABC, Generic[ConfigIdT]):
    """Stores whole widget rendering configuration trees."""

    @abstractmethod
    async def save(self, wrc: WidgetRenderingConfiguration) -> ConfigIdT:
        ...

    @abstractmethod
    async def delete(self, id: ConfigIdT) -> bool:
        """False when nothing is stored under id."""

    @abstractmethod
    async def update(self, id: ConfigIdT, wrc: WidgetRenderingConfiguration) -> bool:
        """False when nothing is stored under id."""
