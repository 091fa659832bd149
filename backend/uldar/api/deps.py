"""Uldar — FastAPI dependencies (caller identity, services wired by create_app)."""
from typing import Annotated, Any

from fastapi import Depends, Request

from uldar.services.extension_service import ExtensionService
from uldar.services.widget_configuration_service import WidgetRenderingConfigurationService
from uldar.services.widget_service import WidgetDataProviderService


async def get_current_user(request: Request) -> Any | None:
    """
    Caller identity from request.state.user.
    Populated by the deployment's auth middleware; None (anonymous) when there is none.
    """
    return getattr(request.state, "user", None)


def get_extension_service(request: Request) -> ExtensionService:
    return request.app.state.extension_service


def get_widget_service(request: Request) -> WidgetDataProviderService:
    return request.app.state.widget_service


def get_widget_configuration_service(request: Request) -> WidgetRenderingConfigurationService:
    return request.app.state.widget_configuration_service


CurrentUser = Annotated[Any | None, Depends(get_current_user)]
Extensions = Annotated[ExtensionService, Depends(get_extension_service)]
Widgets = Annotated[WidgetDataProviderService, Depends(get_widget_service)]
WidgetConfigurations = Annotated[WidgetRenderingConfigurationService, Depends(get_widget_configuration_service)]
