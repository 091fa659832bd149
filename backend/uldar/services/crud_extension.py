"""Uldar — Exposes a CrudService as an API extension."""
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Generic

from uldar.core.responses import ApiCallResponse, NonOk, Ok
from uldar.sdk.crud import CreateT, CrudService, FilterT, IdT, UpdateT
from uldar.sdk.extension import ApiCall, ApiCallRequest, ApiExtension, Path, UserT


class CrudApiExtension(ApiExtension[UserT], Generic[IdT, CreateT, UpdateT, FilterT, UserT]):
    """
    Serves the seven CRUD paths of one resource kind:
    create, update, delete, getEditModel, getPreviewModel, getReadModel, fetchPreviewModels.
    Payloads are decoded with pydantic into the model types given here.
    """

    def __init__(
        self,
        name: str,
        crud_service: CrudService[IdT, CreateT, UpdateT, FilterT, UserT],
        *,
        create_model: Any,
        update_model: Any,
        filter_model: Any,
        entity_id: Any,
    ):
        self.name = name
        self.crud_service = crud_service
        self._handlers: Mapping[Path, ApiCall[Any, UserT]] = MappingProxyType({
            ("create",): ApiCall.typed(create_model, self._create),
            ("update",): ApiCall.typed(update_model, self._update),
            ("delete",): ApiCall.typed(entity_id, self._delete),
            ("getEditModel",): ApiCall.typed(entity_id, self._get_edit_model),
            ("getPreviewModel",): ApiCall.typed(entity_id, self._get_preview_model),
            ("getReadModel",): ApiCall.typed(entity_id, self._get_read_model),
            ("fetchPreviewModels",): ApiCall.typed(filter_model, self._fetch_preview_models),
        })

    @property
    def handlers(self) -> Mapping[Path, ApiCall[Any, UserT]]:
        return self._handlers

    async def _create(self, request: ApiCallRequest[CreateT, UserT]) -> ApiCallResponse:
        result = await self.crud_service.create(request.data, request.identity)
        if isinstance(result, NonOk):
            return result
        return Ok.of(id=result)

    async def _update(self, request: ApiCallRequest[UpdateT, UserT]) -> ApiCallResponse:
        result = await self.crud_service.update(request.data, request.identity)
        if isinstance(result, NonOk):
            return result
        return Ok.of(id=result)

    async def _delete(self, request: ApiCallRequest[IdT, UserT]) -> ApiCallResponse:
        result = await self.crud_service.delete(request.data, request.identity)
        if isinstance(result, NonOk):
            return result
        return Ok.of(removed=result)

    async def _get_edit_model(self, request: ApiCallRequest[IdT, UserT]) -> ApiCallResponse:
        return await self.crud_service.get_edit_model(request.data, request.identity)

    async def _get_preview_model(self, request: ApiCallRequest[IdT, UserT]) -> ApiCallResponse:
        return await self.crud_service.get_preview_model(request.data, request.identity)

    async def _get_read_model(self, request: ApiCallRequest[IdT, UserT]) -> ApiCallResponse:
        return await self.crud_service.get_read_model(request.data, request.identity)

    async def _fetch_preview_models(self, request: ApiCallRequest[FilterT, UserT]) -> ApiCallResponse:
        return await self.crud_service.fetch_preview_models(request.data, request.identity)
