"""Uldar — Widget data provider registry and widget tree rendering."""
import asyncio
import logging
from collections.abc import Iterable
from types import MappingProxyType
from typing import Any

from uldar.core.exceptions import DuplicateRegistrationError
from uldar.schemas.widget import WidgetApiRequest, WidgetApiResponse, WidgetRenderingConfiguration
from uldar.sdk.widget import WidgetDataProvider

logger = logging.getLogger(__name__)

MISSING_PROVIDER_ERROR = "No data provider found for widget"


class WidgetDataProviderRegistry:
    """Immutable widget id -> data provider lookup, built once at startup."""

    def __init__(self, providers: Iterable[WidgetDataProvider]):
        by_id: dict[str, WidgetDataProvider] = {}
        for provider in providers:
            if provider.id in by_id:
                raise DuplicateRegistrationError("widget data provider", provider.id)
            by_id[provider.id] = provider
        self._providers = MappingProxyType(by_id)

    @property
    def widget_ids(self) -> list[str]:
        return sorted(self._providers)

    def get_provider(self, id: str) -> WidgetDataProvider | None:
        return self._providers.get(id)

    def has_provider(self, id: str) -> bool:
        return self.get_provider(id) is not None


class WidgetDataProviderService:
    """Renders widget trees and routes widget API requests to their providers."""

    def __init__(self, registry: WidgetDataProviderRegistry):
        self.registry = registry

    async def resolve(self, configuration: WidgetRenderingConfiguration) -> dict[str, Any]:
        """
        Render model tree for the given configuration.
        A node whose widget has no provider renders as an inline error object; the rest of the tree is unaffected.
        Children are resolved concurrently and returned in configuration order.
        """
        provider = self.registry.get_provider(configuration.id)
        if provider is None:
            logger.warning("No data provider found for widget %r", configuration.id)
            return {"error": MISSING_PROVIDER_ERROR}

        model = await provider.get_render_model(configuration.configuration)
        nested = await asyncio.gather(*(self.resolve(child) for child in configuration.nested))
        return {
            "widgetId": configuration.id,
            "model": model,
            "nested": list(nested),
        }

    async def process_api_request(self, id: str, request: WidgetApiRequest) -> WidgetApiResponse | None:
        """
        Provider response for an API request sent by widget `id`, wrapped so a None answer stays distinguishable.
        None if no provider is registered for the widget.
        """
        provider = self.registry.get_provider(id)
        if provider is None:
            return None
        return WidgetApiResponse(data=await provider.process_api_request(request))
