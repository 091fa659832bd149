"""Extension SDK init."""
# Exposes the main SDK components
from uldar.sdk.crud import CrudAccessPolicy, CrudRepository, CrudService, CrudValidator, PreValidated, Secured
from uldar.sdk.extension import ApiCall, ApiCallRequest, ApiExtension
from uldar.sdk.widget import StaticWidgetDataProvider, WidgetDataProvider, WidgetRenderingRepository

__all__ = [
    "ApiCall",
    "ApiCallRequest",
    "ApiExtension",
    "CrudAccessPolicy",
    "CrudRepository",
    "CrudService",
    "CrudValidator",
    "PreValidated",
    "Secured",
    "StaticWidgetDataProvider",
    "WidgetDataProvider",
    "WidgetRenderingRepository",
]
