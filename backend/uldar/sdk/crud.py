"""Uldar — CRUD SDK: service contract, validation/security decorators and repository contract.

Every CRUD component is generic over the same bundle of types:
IdT (entity identity), CreateT / UpdateT (create and update models),
FilterT (list filter model) and UserT (caller identity).

Decorators wrap a service and implement the same contract, so they stack by nesting:

    Secured(PreValidated(service, validator), policy)   # authorization runs first
    PreValidated(Secured(service, policy), validator)   # validation runs first
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from uldar.core.responses import ApiCallResponse, Forbidden, InvalidRequest, NonOk
from uldar.sdk.extension import UserT

IdT = TypeVar("IdT")
CreateT = TypeVar("CreateT")
UpdateT = TypeVar("UpdateT")
FilterT = TypeVar("FilterT")
EntityT = TypeVar("EntityT")


class CrudService(ABC, Generic[IdT, CreateT, UpdateT, FilterT, UserT]):
    """
    CRUD operations over one resource kind.
    Mutations return a NonOk outcome or their success value; reads return a ready response.
    `user` is the identity the operation is invoked on behalf of (None for anonymous).
    """

    @abstractmethod
    async def create(self, model: CreateT, user: UserT | None) -> NonOk | IdT:
        """Create an entity, returning its identity."""

    @abstractmethod
    async def update(self, model: UpdateT, user: UserT | None) -> NonOk | IdT:
        """Update an existing entity, returning its identity."""

    @abstractmethod
    async def delete(self, entity_id: IdT, user: UserT | None) -> NonOk | bool:
        """Delete an entity; False if it wasn't found."""

    @abstractmethod
    async def get_edit_model(self, entity_id: IdT, user: UserT | None) -> ApiCallResponse:
        ...

    @abstractmethod
    async def get_preview_model(self, entity_id: IdT, user: UserT | None) -> ApiCallResponse:
        ...

    @abstractmethod
    async def get_read_model(self, entity_id: IdT, user: UserT | None) -> ApiCallResponse:
        ...

    @abstractmethod
    async def fetch_preview_models(self, filter: FilterT, user: UserT | None) -> ApiCallResponse:
        """List preview models matching the filter."""


class CrudValidator(ABC, Generic[IdT, CreateT, UpdateT, UserT]):
    """Domain checks for mutating operations. Each returns a set of errors, empty when valid."""

    @abstractmethod
    async def validate_create_model(self, model: CreateT, user: UserT | None) -> set[str]:
        ...

    @abstractmethod
    async def validate_updated_model(self, model: UpdateT, user: UserT | None) -> set[str]:
        ...

    @abstractmethod
    async def can_be_deleted(self, entity_id: IdT, user: UserT | None) -> set[str]:
        ...


class CrudAccessPolicy(ABC, Generic[IdT, CreateT, UpdateT, FilterT, UserT]):
    """Authorization predicates, one per CRUD operation. True means allowed."""

    @abstractmethod
    async def allowed_to_create(self, model: CreateT, user: UserT | None) -> bool:
        ...

    @abstractmethod
    async def allowed_to_update(self, model: UpdateT, user: UserT | None) -> bool:
        ...

    @abstractmethod
    async def allowed_to_delete(self, entity_id: IdT, user: UserT | None) -> bool:
        ...

    @abstractmethod
    async def allowed_to_edit(self, entity_id: IdT, user: UserT | None) -> bool:
        ...

    @abstractmethod
    async def allowed_get_preview_model(self, entity_id: IdT, user: UserT | None) -> bool:
        ...

    @abstractmethod
    async def allowed_get_read_model(self, entity_id: IdT, user: UserT | None) -> bool:
        ...

    @abstractmethod
    async def allowed_fetch_preview_models(self, filter: FilterT, user: UserT | None) -> bool:
        ...


class PreValidated(CrudService[IdT, CreateT, UpdateT, FilterT, UserT]):
    """Runs the validator before create/update/delete; reads pass through untouched."""

    def __init__(
        self,
        inner: CrudService[IdT, CreateT, UpdateT, FilterT, UserT],
        validator: CrudValidator[IdT, CreateT, UpdateT, UserT],
    ):
        self.inner = inner
        self.validator = validator

    async def create(self, model: CreateT, user: UserT | None) -> NonOk | IdT:
        errors = await self.validator.validate_create_model(model, user)
        if errors:
            return InvalidRequest(errors=frozenset(errors))
        return await self.inner.create(model, user)

    async def update(self, model: UpdateT, user: UserT | None) -> NonOk | IdT:
        errors = await self.validator.validate_updated_model(model, user)
        if errors:
            return InvalidRequest(errors=frozenset(errors))
        return await self.inner.update(model, user)

    async def delete(self, entity_id: IdT, user: UserT | None) -> NonOk | bool:
        errors = await self.validator.can_be_deleted(entity_id, user)
        if errors:
            return InvalidRequest(errors=frozenset(errors))
        return await self.inner.delete(entity_id, user)

    async def get_edit_model(self, entity_id: IdT, user: UserT | None) -> ApiCallResponse:
        return await self.inner.get_edit_model(entity_id, user)

    async def get_preview_model(self, entity_id: IdT, user: UserT | None) -> ApiCallResponse:
        return await self.inner.get_preview_model(entity_id, user)

    async def get_read_model(self, entity_id: IdT, user: UserT | None) -> ApiCallResponse:
        return await self.inner.get_read_model(entity_id, user)

    async def fetch_preview_models(self, filter: FilterT, user: UserT | None) -> ApiCallResponse:
        return await self.inner.fetch_preview_models(filter, user)


class Secured(CrudService[IdT, CreateT, UpdateT, FilterT, UserT]):
    """Checks the access policy before every operation; a denied check returns Forbidden."""

    def __init__(
        self,
        inner: CrudService[IdT, CreateT, UpdateT, FilterT, UserT],
        policy: CrudAccessPolicy[IdT, CreateT, UpdateT, FilterT, UserT],
    ):
        self.inner = inner
        self.policy = policy

    async def create(self, model: CreateT, user: UserT | None) -> NonOk | IdT:
        if not await self.policy.allowed_to_create(model, user):
            return Forbidden()
        return await self.inner.create(model, user)

    async def update(self, model: UpdateT, user: UserT | None) -> NonOk | IdT:
        if not await self.policy.allowed_to_update(model, user):
            return Forbidden()
        return await self.inner.update(model, user)

    async def delete(self, entity_id: IdT, user: UserT | None) -> NonOk | bool:
        if not await self.policy.allowed_to_delete(entity_id, user):
            return Forbidden()
        return await self.inner.delete(entity_id, user)

    async def get_edit_model(self, entity_id: IdT, user: UserT | None) -> ApiCallResponse:
        if not await self.policy.allowed_to_edit(entity_id, user):
            return Forbidden()
        return await self.inner.get_edit_model(entity_id, user)

    async def get_preview_model(self, entity_id: IdT, user: UserT | None) -> ApiCallResponse:
        if not await self.policy.allowed_get_preview_model(entity_id, user):
            return Forbidden()
        return await self.inner.get_preview_model(entity_id, user)

    async def get_read_model(self, entity_id: IdT, user: UserT | None) -> ApiCallResponse:
        if not await self.policy.allowed_get_read_model(entity_id, user):
            return Forbidden()
        return await self.inner.get_read_model(entity_id, user)

    async def fetch_preview_models(self, filter: FilterT, user: UserT | None) -> ApiCallResponse:
        if not await self.policy.allowed_fetch_preview_models(filter, user):
            return Forbidden()
        return await self.inner.fetch_preview_models(filter, user)


class CrudRepository(ABC, Generic[EntityT, IdT]):
    """Async persistence for one entity kind."""

    @abstractmethod
    async def create(self, entity: EntityT) -> IdT:
        ...

    @abstractmethod
    async def delete(self, id: IdT) -> bool:
        ...

    @abstractmethod
    async def update(self, id: IdT, entity: EntityT) -> bool:
        ...

    @abstractmethod
    async def fetch(self, id: IdT) -> EntityT | None:
        ...
