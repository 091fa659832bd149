"""Test doubles shared across the suite: a notes CRUD resource, stub checks and widget providers."""
import asyncio
import uuid
from typing import Any

from pydantic import BaseModel

from uldar.core.responses import ApiCallResponse, NonOk, NotFound, Ok
from uldar.repositories.memory import InMemoryCrudRepository
from uldar.schemas.widget import WidgetApiRequest
from uldar.sdk.crud import CrudAccessPolicy, CrudService, CrudValidator
from uldar.sdk.widget import WidgetDataProvider


class NoteCreate(BaseModel):
    title: str
    body: str = ""


class NoteUpdate(BaseModel):
    id: uuid.UUID
    title: str
    body: str = ""


class NoteFilter(BaseModel):
    title_contains: str = ""


class NoteService(CrudService[uuid.UUID, NoteCreate, NoteUpdate, NoteFilter, str]):
    """Notes resource backed by an in-memory CrudRepository."""

    def __init__(self, repository: InMemoryCrudRepository[dict] | None = None):
        self.repository = repository or InMemoryCrudRepository()

    async def create(self, model: NoteCreate, user: str | None) -> NonOk | uuid.UUID:
        return await self.repository.create({**model.model_dump(), "author": user})

    async def update(self, model: NoteUpdate, user: str | None) -> NonOk | uuid.UUID:
        note = await self.repository.fetch(model.id)
        if note is None:
            return NotFound()
        note.update(title=model.title, body=model.body)
        await self.repository.update(model.id, note)
        return model.id

    async def delete(self, entity_id: uuid.UUID, user: str | None) -> NonOk | bool:
        return await self.repository.delete(entity_id)

    async def get_edit_model(self, entity_id: uuid.UUID, user: str | None) -> ApiCallResponse:
        note = await self.repository.fetch(entity_id)
        if note is None:
            return NotFound()
        return Ok(value=note)

    async def get_preview_model(self, entity_id: uuid.UUID, user: str | None) -> ApiCallResponse:
        note = await self.repository.fetch(entity_id)
        if note is None:
            return NotFound()
        return Ok.of(id=entity_id, title=note["title"])

    async def get_read_model(self, entity_id: uuid.UUID, user: str | None) -> ApiCallResponse:
        return await self.get_edit_model(entity_id, user)

    async def fetch_preview_models(self, filter: NoteFilter, user: str | None) -> ApiCallResponse:
        notes = await self.repository.list_all()
        return Ok(value=[
            {"id": id, "title": note["title"]}
            for id, note in notes
            if filter.title_contains in note["title"]
        ])


class RecordingService(CrudService[Any, Any, Any, Any, Any]):
    """CrudService returning fixed results and recording every call it receives."""

    def __init__(self, result: Any = "entity-1", log: list[str] | None = None):
        self.result = result
        self.log = log if log is not None else []

    async def create(self, model, user):
        self.log.append("create")
        return self.result

    async def update(self, model, user):
        self.log.append("update")
        return self.result

    async def delete(self, entity_id, user):
        self.log.append("delete")
        return True

    async def get_edit_model(self, entity_id, user):
        self.log.append("get_edit_model")
        return Ok(value="edit")

    async def get_preview_model(self, entity_id, user):
        self.log.append("get_preview_model")
        return Ok(value="preview")

    async def get_read_model(self, entity_id, user):
        self.log.append("get_read_model")
        return Ok(value="read")

    async def fetch_preview_models(self, filter, user):
        self.log.append("fetch_preview_models")
        return Ok(value=[])


class StubValidator(CrudValidator[Any, Any, Any, Any]):
    def __init__(self, errors: set[str] | None = None, log: list[str] | None = None):
        self.errors = errors or set()
        self.log = log if log is not None else []

    async def _check(self, name: str) -> set[str]:
        await asyncio.sleep(0)
        self.log.append(name)
        return set(self.errors)

    async def validate_create_model(self, model, user):
        return await self._check("validate_create_model")

    async def validate_updated_model(self, model, user):
        return await self._check("validate_updated_model")

    async def can_be_deleted(self, entity_id, user):
        return await self._check("can_be_deleted")


class StubPolicy(CrudAccessPolicy[Any, Any, Any, Any, Any]):
    def __init__(self, allowed: bool = True, log: list[str] | None = None):
        self.allowed = allowed
        self.log = log if log is not None else []

    async def _check(self, name: str) -> bool:
        await asyncio.sleep(0)
        self.log.append(name)
        return self.allowed

    async def allowed_to_create(self, model, user):
        return await self._check("allowed_to_create")

    async def allowed_to_update(self, model, user):
        return await self._check("allowed_to_update")

    async def allowed_to_delete(self, entity_id, user):
        return await self._check("allowed_to_delete")

    async def allowed_to_edit(self, entity_id, user):
        return await self._check("allowed_to_edit")

    async def allowed_get_preview_model(self, entity_id, user):
        return await self._check("allowed_get_preview_model")

    async def allowed_get_read_model(self, entity_id, user):
        return await self._check("allowed_get_read_model")

    async def allowed_fetch_preview_models(self, filter, user):
        return await self._check("allowed_fetch_preview_models")


class EchoProvider(WidgetDataProvider):
    """Renders {"echo": configuration} after an optional delay; echoes widget API requests."""

    def __init__(self, id: str, delay: float = 0.0):
        self.id = id
        self.delay = delay

    async def get_render_model(self, configuration: Any) -> Any:
        await asyncio.sleep(self.delay)
        return {"echo": configuration}

    async def process_api_request(self, request: WidgetApiRequest) -> Any:
        return {"widget": self.id, "received": request.data}


class SilentProvider(EchoProvider):
    """Provider answering every widget API request with None."""

    async def process_api_request(self, request: WidgetApiRequest) -> Any:
        return None
