"""Watson Assistant v1 service clients."""

from __future__ import annotations

from typing import cast

from ..call_options import CallOptions
from ..client import AsyncWatsonClient, WatsonClient, _expect
from .models import EntityCollection, Value, ValueCollection, Workspace, WorkspaceCollection
from .options import (
    CreateValueOptions,
    DeleteValueOptions,
    GetValueOptions,
    GetWorkspaceOptions,
    ListEntitiesOptions,
    ListValuesOptions,
    ListWorkspacesOptions,
    UpdateValueOptions,
)


class AssistantV1(WatsonClient):
    """Synchronous client for the workspace-based v1 API."""

    def list_workspaces(
        self,
        options: ListWorkspacesOptions | None = None,
        *,
        call_options: CallOptions | None = None,
    ) -> WorkspaceCollection:
        options = options or ListWorkspacesOptions()
        _expect(options, ListWorkspacesOptions)
        return cast(WorkspaceCollection, self.invoke(options, WorkspaceCollection, call_options=call_options))

    def get_workspace(self, options: GetWorkspaceOptions, *, call_options: CallOptions | None = None) -> Workspace:
        _expect(options, GetWorkspaceOptions)
        return cast(Workspace, self.invoke(options, Workspace, call_options=call_options))

    def list_entities(self, options: ListEntitiesOptions, *, call_options: CallOptions | None = None) -> EntityCollection:
        _expect(options, ListEntitiesOptions)
        return cast(EntityCollection, self.invoke(options, EntityCollection, call_options=call_options))

    def list_values(self, options: ListValuesOptions, *, call_options: CallOptions | None = None) -> ValueCollection:
        _expect(options, ListValuesOptions)
        return cast(ValueCollection, self.invoke(options, ValueCollection, call_options=call_options))

    def create_value(self, options: CreateValueOptions, *, call_options: CallOptions | None = None) -> Value:
        _expect(options, CreateValueOptions)
        return cast(Value, self.invoke(options, Value, call_options=call_options))

    def get_value(self, options: GetValueOptions, *, call_options: CallOptions | None = None) -> Value:
        _expect(options, GetValueOptions)
        return cast(Value, self.invoke(options, Value, call_options=call_options))

    def update_value(self, options: UpdateValueOptions, *, call_options: CallOptions | None = None) -> Value:
        _expect(options, UpdateValueOptions)
        return cast(Value, self.invoke(options, Value, call_options=call_options))

    def delete_value(self, options: DeleteValueOptions, *, call_options: CallOptions | None = None) -> None:
        _expect(options, DeleteValueOptions)
        self.invoke(options, call_options=call_options)


class AsyncAssistantV1(AsyncWatsonClient):
    """Asynchronous client for the workspace-based v1 API."""

    async def list_workspaces(
        self,
        options: ListWorkspacesOptions | None = None,
        *,
        call_options: CallOptions | None = None,
    ) -> WorkspaceCollection:
        options = options or ListWorkspacesOptions()
        _expect(options, ListWorkspacesOptions)
        return cast(WorkspaceCollection, await self.invoke(options, WorkspaceCollection, call_options=call_options))

    async def get_workspace(self, options: GetWorkspaceOptions, *, call_options: CallOptions | None = None) -> Workspace:
        _expect(options, GetWorkspaceOptions)
        return cast(Workspace, await self.invoke(options, Workspace, call_options=call_options))

    async def list_entities(
        self,
        options: ListEntitiesOptions,
        *,
        call_options: CallOptions | None = None,
    ) -> EntityCollection:
        _expect(options, ListEntitiesOptions)
        return cast(EntityCollection, await self.invoke(options, EntityCollection, call_options=call_options))

    async def list_values(self, options: ListValuesOptions, *, call_options: CallOptions | None = None) -> ValueCollection:
        _expect(options, ListValuesOptions)
        return cast(ValueCollection, await self.invoke(options, ValueCollection, call_options=call_options))

    async def create_value(self, options: CreateValueOptions, *, call_options: CallOptions | None = None) -> Value:
        _expect(options, CreateValueOptions)
        return cast(Value, await self.invoke(options, Value, call_options=call_options))

    async def get_value(self, options: GetValueOptions, *, call_options: CallOptions | None = None) -> Value:
        _expect(options, GetValueOptions)
        return cast(Value, await self.invoke(options, Value, call_options=call_options))

    async def update_value(self, options: UpdateValueOptions, *, call_options: CallOptions | None = None) -> Value:
        _expect(options, UpdateValueOptions)
        return cast(Value, await self.invoke(options, Value, call_options=call_options))

    async def delete_value(self, options: DeleteValueOptions, *, call_options: CallOptions | None = None) -> None:
        _expect(options, DeleteValueOptions)
        await self.invoke(options, call_options=call_options)
