"""Uldar — Widget endpoints: tree rendering and widget API calls."""
from typing import Any

from fastapi import APIRouter, Body, HTTPException, status

from uldar.api.deps import Widgets
from uldar.core.exceptions import UnsupportedWidgetApiError
from uldar.schemas.common import ApiResponse
from uldar.schemas.widget import WidgetApiRequest, WidgetRenderingConfiguration

router = APIRouter()


@router.post("/render", response_model=ApiResponse[dict[str, Any]])
async def render_widget_tree(body: WidgetRenderingConfiguration, service: Widgets):
    """Resolve render models for a whole widget tree. Unknown widgets render as inline error objects."""
    return ApiResponse(data=await service.resolve(body))


@router.post("/{widget_id}/api", response_model=ApiResponse[Any])
async def widget_api_call(widget_id: str, service: Widgets, data: Any = Body(default=None)):
    """Forward an API request to the data provider of `widget_id`."""
    try:
        result = await service.process_api_request(widget_id, WidgetApiRequest(data=data))
    except UnsupportedWidgetApiError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No data provider for widget {widget_id!r}")
    return ApiResponse(data=result.data)
