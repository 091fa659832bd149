"""Uldar — WidgetRenderingConfigurationService: validated persistence of widget trees."""
import logging
from typing import Generic

from uldar.core.exceptions import WidgetDataProviderNotFoundError
from uldar.schemas.widget import WidgetRenderingConfiguration
from uldar.sdk.widget import ConfigIdT, WidgetRenderingRepository
from uldar.services.widget_service import WidgetDataProviderRegistry

logger = logging.getLogger(__name__)


class WidgetRenderingConfigurationService(Generic[ConfigIdT]):
    """
    Saves, updates and deletes whole widget rendering configurations.
    Unlike rendering, saving rejects the whole tree when any widget id has no registered data provider.
    """

    def __init__(self, registry: WidgetDataProviderRegistry, repository: WidgetRenderingRepository[ConfigIdT]):
        self.registry = registry
        self.repository = repository

    def get_non_registered_widget_ids(self, wrc: WidgetRenderingConfiguration) -> list[str]:
        """Widget ids of the tree (pre-order, duplicates kept) with no registered data provider."""
        return [id for id in wrc.widget_ids() if not self.registry.has_provider(id)]

    def _ensure_registered(self, wrc: WidgetRenderingConfiguration) -> None:
        missing = self.get_non_registered_widget_ids(wrc)
        if missing:
            logger.warning("Rejecting widget rendering configuration, unknown widget ids %s", missing)
            raise WidgetDataProviderNotFoundError(missing)

    async def create(self, wrc: WidgetRenderingConfiguration) -> ConfigIdT:
        """Raises WidgetDataProviderNotFoundError if any widget of the tree has no data provider."""
        self._ensure_registered(wrc)
        return await self.repository.save(wrc)

    async def update(self, id: ConfigIdT, wrc: WidgetRenderingConfiguration) -> bool:
        """Replace the stored tree. False if nothing is stored under id."""
        self._ensure_registered(wrc)
        return await self.repository.update(id, wrc)

    async def delete(self, id: ConfigIdT) -> bool:
        return await self.repository.delete(id)
