"""Response models for the Watson Assistant v1 API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from ..models import AssistantModel


class Pagination(AssistantModel):
    refresh_url: str | None = None
    next_url: str | None = None
    total: int | None = None
    matched: int | None = None
    refresh_cursor: str | None = None
    next_cursor: str | None = None


class Value(AssistantModel):
    value: str
    metadata: dict[str, Any] | None = None
    value_type: str | None = Field(default=None, alias="type")
    synonyms: list[str] = Field(default_factory=list)
    patterns: list[str] = Field(default_factory=list)
    created: datetime | None = None
    updated: datetime | None = None


class ValueCollection(AssistantModel):
    values: list[Value] = Field(default_factory=list)
    pagination: Pagination | None = None


class Entity(AssistantModel):
    entity: str
    description: str | None = None
    metadata: dict[str, Any] | None = None
    fuzzy_match: bool | None = None
    created: datetime | None = None
    updated: datetime | None = None
    values: list[Value] = Field(default_factory=list)


class EntityCollection(AssistantModel):
    entities: list[Entity] = Field(default_factory=list)
    pagination: Pagination | None = None


class Workspace(AssistantModel):
    name: str
    workspace_id: str
    language: str | None = None
    description: str | None = None
    metadata: dict[str, Any] | None = None
    learning_opt_out: bool | None = None
    status: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    entities: list[Entity] = Field(default_factory=list)


class WorkspaceCollection(AssistantModel):
    workspaces: list[Workspace] = Field(default_factory=list)
    pagination: Pagination | None = None
