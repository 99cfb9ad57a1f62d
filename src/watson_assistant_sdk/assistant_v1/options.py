"""Options for the Watson Assistant v1 workspace, entity and value endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from ..options import Options, body_param, path_param, query_param


@dataclass(frozen=True)
class ListWorkspacesOptions(Options):
    method = "GET"
    path = "/v1/workspaces"

    page_limit: int | None = query_param()
    include_count: bool | None = query_param()
    sort: str | None = query_param()
    cursor: str | None = query_param()
    include_audit: bool | None = query_param()


@dataclass(frozen=True)
class GetWorkspaceOptions(Options):
    method = "GET"
    path = "/v1/workspaces/{workspace_id}"

    workspace_id: str = path_param()
    export: bool | None = query_param()
    include_audit: bool | None = query_param()


@dataclass(frozen=True)
class ListEntitiesOptions(Options):
    method = "GET"
    path = "/v1/workspaces/{workspace_id}/entities"

    workspace_id: str = path_param()
    export: bool | None = query_param()
    page_limit: int | None = query_param()
    include_count: bool | None = query_param()
    sort: str | None = query_param()
    cursor: str | None = query_param()
    include_audit: bool | None = query_param()


@dataclass(frozen=True)
class ListValuesOptions(Options):
    """The list values options.

    ``export`` includes subelements (synonyms, patterns) in the returned data.
    ``sort`` names the attribute to sort by; prefix it with ``-`` to reverse.
    ``cursor`` is the token identifying the page of results to retrieve.
    ``include_audit`` adds the ``created`` and ``updated`` timestamps.
    """

    method = "GET"
    path = "/v1/workspaces/{workspace_id}/entities/{entity}/values"

    workspace_id: str = path_param()
    entity: str = path_param()
    export: bool | None = query_param()
    page_limit: int | None = query_param()
    include_count: bool | None = query_param()
    sort: str | None = query_param()
    cursor: str | None = query_param()
    include_audit: bool | None = query_param()


@dataclass(frozen=True)
class CreateValueOptions(Options):
    method = "POST"
    path = "/v1/workspaces/{workspace_id}/entities/{entity}/values"

    workspace_id: str = path_param()
    entity: str = path_param()
    value: str = body_param(required=True)
    metadata: Mapping[str, Any] | None = body_param()
    synonyms: Sequence[str] | None = body_param()
    patterns: Sequence[str] | None = body_param()
    value_type: str | None = body_param(wire_name="type")


@dataclass(frozen=True)
class GetValueOptions(Options):
    method = "GET"
    path = "/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}"

    workspace_id: str = path_param()
    entity: str = path_param()
    value: str = path_param()
    export: bool | None = query_param()
    include_audit: bool | None = query_param()


@dataclass(frozen=True)
class UpdateValueOptions(Options):
    """Fields left unset keep their current value on the service."""

    method = "POST"
    path = "/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}"

    workspace_id: str = path_param()
    entity: str = path_param()
    value: str = path_param()
    new_value: str | None = body_param(wire_name="value")
    new_metadata: Mapping[str, Any] | None = body_param(wire_name="metadata")
    new_type: str | None = body_param(wire_name="type")
    new_synonyms: Sequence[str] | None = body_param(wire_name="synonyms")
    new_patterns: Sequence[str] | None = body_param(wire_name="patterns")


@dataclass(frozen=True)
class DeleteValueOptions(Options):
    method = "DELETE"
    path = "/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}"

    workspace_id: str = path_param()
    entity: str = path_param()
    value: str = path_param()
