"""Options for the Watson Assistant v2 session and message endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from ..options import Options, body_param, path_param
from .models import MessageContext, MessageInput


@dataclass(frozen=True)
class CreateSessionOptions(Options):
    method = "POST"
    path = "/v2/assistants/{assistant_id}/sessions"

    assistant_id: str = path_param()


@dataclass(frozen=True)
class DeleteSessionOptions(Options):
    method = "DELETE"
    path = "/v2/assistants/{assistant_id}/sessions/{session_id}"

    assistant_id: str = path_param()
    session_id: str = path_param()


@dataclass(frozen=True)
class MessageOptions(Options):
    """Send user input to an assistant within an existing session."""

    method = "POST"
    path = "/v2/assistants/{assistant_id}/sessions/{session_id}/message"

    assistant_id: str = path_param()
    session_id: str = path_param()
    input: MessageInput | None = body_param()
    context: MessageContext | None = body_param()
