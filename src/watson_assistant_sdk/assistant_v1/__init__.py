"""Watson Assistant v1: workspaces, entities and entity values."""

from .models import (
    Entity,
    EntityCollection,
    Pagination,
    Value,
    ValueCollection,
    Workspace,
    WorkspaceCollection,
)
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
from .service import AssistantV1, AsyncAssistantV1

__all__ = [
    "AssistantV1",
    "AsyncAssistantV1",
    "CreateValueOptions",
    "DeleteValueOptions",
    "Entity",
    "EntityCollection",
    "GetValueOptions",
    "GetWorkspaceOptions",
    "ListEntitiesOptions",
    "ListValuesOptions",
    "ListWorkspacesOptions",
    "Pagination",
    "UpdateValueOptions",
    "Value",
    "ValueCollection",
    "Workspace",
    "WorkspaceCollection",
]
