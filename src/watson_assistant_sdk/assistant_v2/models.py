"""Request fragments and response models for the Watson Assistant v2 API."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ..models import AssistantModel, InputModel


class MessageInputOptions(InputModel):
    debug: bool | None = None
    restart: bool | None = None
    alternate_intents: bool | None = None
    return_context: bool | None = None


class MessageInput(InputModel):
    message_type: str | None = "text"
    text: str | None = None
    options: MessageInputOptions | None = None
    suggestion_id: str | None = None


class MessageContext(InputModel):
    global_: dict[str, Any] | None = Field(default=None, alias="global")
    skills: dict[str, Any] | None = None


class SessionResponse(AssistantModel):
    session_id: str


class RuntimeIntent(AssistantModel):
    intent: str
    confidence: float | None = None


class RuntimeEntity(AssistantModel):
    entity: str
    location: list[int] = Field(default_factory=list)
    value: str | None = None
    confidence: float | None = None
    metadata: dict[str, Any] | None = None


class DialogNodeOutputOption(AssistantModel):
    label: str
    value: dict[str, Any] | None = None


class RuntimeResponseGeneric(AssistantModel):
    response_type: str
    text: str | None = None
    time: int | None = None
    typing: bool | None = None
    source: str | None = None
    title: str | None = None
    description: str | None = None
    preference: str | None = None
    options: list[DialogNodeOutputOption] = Field(default_factory=list)
    message_to_human_agent: str | None = None


class MessageOutput(AssistantModel):
    generic: list[RuntimeResponseGeneric] = Field(default_factory=list)
    intents: list[RuntimeIntent] = Field(default_factory=list)
    entities: list[RuntimeEntity] = Field(default_factory=list)
    actions: list[dict[str, Any]] = Field(default_factory=list)
    debug: dict[str, Any] | None = None
    user_defined: dict[str, Any] | None = None


class MessageResponse(AssistantModel):
    output: MessageOutput
    context: dict[str, Any] | None = None
