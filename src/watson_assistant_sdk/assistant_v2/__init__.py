"""Watson Assistant v2: sessions and messages."""

from .models import (
    MessageContext,
    MessageInput,
    MessageInputOptions,
    MessageOutput,
    MessageResponse,
    RuntimeEntity,
    RuntimeIntent,
    RuntimeResponseGeneric,
    SessionResponse,
)
from .options import CreateSessionOptions, DeleteSessionOptions, MessageOptions
from .service import AssistantV2, AsyncAssistantV2

__all__ = [
    "AssistantV2",
    "AsyncAssistantV2",
    "CreateSessionOptions",
    "DeleteSessionOptions",
    "MessageContext",
    "MessageInput",
    "MessageInputOptions",
    "MessageOptions",
    "MessageOutput",
    "MessageResponse",
    "RuntimeEntity",
    "RuntimeIntent",
    "RuntimeResponseGeneric",
    "SessionResponse",
]
