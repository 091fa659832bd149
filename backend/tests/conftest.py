"""Shared pytest fixtures."""
import uuid

import pytest

from uldar.config import get_settings
from uldar.services.crud_extension import CrudApiExtension
from uldar.services.extension_service import ApiExtensionRegistry, ExtensionService
from uldar.services.widget_service import WidgetDataProviderRegistry, WidgetDataProviderService

from tests.helpers import EchoProvider, NoteCreate, NoteFilter, NoteService, NoteUpdate


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def note_service() -> NoteService:
    return NoteService()


@pytest.fixture
def notes_extension(note_service: NoteService) -> CrudApiExtension:
    return CrudApiExtension(
        "notes",
        note_service,
        create_model=NoteCreate,
        update_model=NoteUpdate,
        filter_model=NoteFilter,
        entity_id=uuid.UUID,
    )


@pytest.fixture
def extension_service(notes_extension: CrudApiExtension) -> ExtensionService:
    return ExtensionService(ApiExtensionRegistry([notes_extension]))


@pytest.fixture
def widget_registry() -> WidgetDataProviderRegistry:
    return WidgetDataProviderRegistry([EchoProvider("news"), EchoProvider("weather")])


@pytest.fixture
def widget_service(widget_registry: WidgetDataProviderRegistry) -> WidgetDataProviderService:
    return WidgetDataProviderService(widget_registry)
