"""
Uldar — FastAPI application factory
"""
import logging
from collections.abc import Iterable
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from uldar.api.v1.router import api_router
from uldar.config import Settings, get_settings
from uldar.repositories.memory import InMemoryWidgetRenderingRepository
from uldar.sdk.extension import ApiExtension
from uldar.sdk.widget import WidgetDataProvider, WidgetRenderingRepository
from uldar.services.extension_service import ApiExtensionRegistry, ExtensionService
from uldar.services.widget_configuration_service import WidgetRenderingConfigurationService
from uldar.services.widget_service import WidgetDataProviderRegistry, WidgetDataProviderService

logger = logging.getLogger(__name__)


def create_app(
    extensions: Iterable[ApiExtension] = (),
    widget_providers: Iterable[WidgetDataProvider] = (),
    configuration_repository: WidgetRenderingRepository | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Build the application around the given extensions and widget data providers.
    Registries are built once here and shared read-only by every request.
    Without a configuration repository, widget configurations are kept in memory.
    """
    settings = settings or get_settings()
    logging.getLogger("uldar").setLevel(settings.LOG_LEVEL.upper())

    extension_registry = ApiExtensionRegistry(extensions)
    widget_registry = WidgetDataProviderRegistry(widget_providers)
    repository = configuration_repository or InMemoryWidgetRenderingRepository()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan: report what is registered."""
        logger.info(
            "%s started: extensions=%s widgets=%s",
            settings.APP_NAME, extension_registry.names, widget_registry.widget_ids,
        )
        yield

    app = FastAPI(
        title=settings.APP_NAME,
        description="Pluggable backend API extensions and widget rendering",
        version="0.1.0",
        docs_url=f"{settings.API_PREFIX}/docs",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.extension_service = ExtensionService(extension_registry)
    app.state.widget_service = WidgetDataProviderService(widget_registry)
    app.state.widget_configuration_service = WidgetRenderingConfigurationService(widget_registry, repository)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/health")
    async def health():
        """Health check for load balancers and Docker."""
        return {"status": "ok", "service": "uldar"}

    return app
