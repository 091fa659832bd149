"""Uldar — Widget rendering configuration endpoints. POST, PUT/{id}, DELETE/{id}."""
from fastapi import APIRouter, HTTPException, status

from uldar.api.deps import WidgetConfigurations
from uldar.core.exceptions import WidgetDataProviderNotFoundError
from uldar.schemas.common import ApiResponse
from uldar.schemas.widget import WidgetRenderingConfiguration

router = APIRouter()


def _unknown_widgets(e: WidgetDataProviderNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"message": "WidgetDataProvider not found", "widget_ids": e.widget_ids},
    )


@router.post("", response_model=ApiResponse[dict], status_code=status.HTTP_201_CREATED)
async def create_configuration(body: WidgetRenderingConfiguration, service: WidgetConfigurations):
    """Save a widget tree. Rejected when any widget id has no data provider."""
    try:
        id = await service.create(body)
    except WidgetDataProviderNotFoundError as e:
        raise _unknown_widgets(e)
    return ApiResponse(data={"id": id})


@router.put("/{id}", response_model=ApiResponse[dict])
async def update_configuration(id: str, body: WidgetRenderingConfiguration, service: WidgetConfigurations):
    """Replace a stored widget tree."""
    try:
        updated = await service.update(id, body)
    except WidgetDataProviderNotFoundError as e:
        raise _unknown_widgets(e)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return ApiResponse(data={"id": id})


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_configuration(id: str, service: WidgetConfigurations):
    if not await service.delete(id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
