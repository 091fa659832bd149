"""Uldar — In-memory repositories (development wiring and tests)."""
import copy
import uuid
from typing import Generic

from uldar.schemas.widget import WidgetRenderingConfiguration
from uldar.sdk.crud import CrudRepository, EntityT
from uldar.sdk.widget import WidgetRenderingRepository


class InMemoryCrudRepository(CrudRepository[EntityT, uuid.UUID], Generic[EntityT]):
    """Dict-backed CrudRepository; entities are copied in and out."""

    def __init__(self) -> None:
        self._entities: dict[uuid.UUID, EntityT] = {}

    async def create(self, entity: EntityT) -> uuid.UUID:
        id = uuid.uuid4()
        self._entities[id] = copy.deepcopy(entity)
        return id

    async def delete(self, id: uuid.UUID) -> bool:
        if id not in self._entities:
            return False
        del self._entities[id]
        return True

    async def update(self, id: uuid.UUID, entity: EntityT) -> bool:
        if id not in self._entities:
            return False
        self._entities[id] = copy.deepcopy(entity)
        return True

    async def fetch(self, id: uuid.UUID) -> EntityT | None:
        entity = self._entities.get(id)
        return copy.deepcopy(entity) if entity is not None else None

    async def list_all(self) -> list[tuple[uuid.UUID, EntityT]]:
        return [(id, copy.deepcopy(entity)) for id, entity in self._entities.items()]


class InMemoryWidgetRenderingRepository(WidgetRenderingRepository[str]):
    """Dict-backed store of whole widget rendering configurations keyed by generated string ids."""

    def __init__(self) -> None:
        self._configurations: dict[str, WidgetRenderingConfiguration] = {}

    async def save(self, wrc: WidgetRenderingConfiguration) -> str:
        id = str(uuid.uuid4())
        self._configurations[id] = wrc.model_copy(deep=True)
        return id

    async def delete(self, id: str) -> bool:
        if id not in self._configurations:
            return False
        del self._configurations[id]
        return True

    async def update(self, id: str, wrc: WidgetRenderingConfiguration) -> bool:
        if id not in self._configurations:
            return False
        self._configurations[id] = wrc.model_copy(deep=True)
        return True

    async def get(self, id: str) -> WidgetRenderingConfiguration | None:
        wrc = self._configurations.get(id)
        return wrc.model_copy(deep=True) if wrc is not None else None
