"""Uldar — API v1 router aggregation."""
from fastapi import APIRouter

from uldar.api.v1.endpoints import extensions, widget_configurations, widgets

api_router = APIRouter()

api_router.include_router(extensions.router, prefix="/extensions", tags=["extensions"])
api_router.include_router(widgets.router, prefix="/widgets", tags=["widgets"])
api_router.include_router(widget_configurations.router, prefix="/widget-configurations", tags=["widget-configurations"])
