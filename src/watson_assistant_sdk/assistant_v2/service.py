"""Watson Assistant v2 service clients."""

from __future__ import annotations

from typing import cast

from ..call_options import CallOptions
from ..client import AsyncWatsonClient, WatsonClient, _expect
from .models import MessageResponse, SessionResponse
from .options import CreateSessionOptions, DeleteSessionOptions, MessageOptions


class AssistantV2(WatsonClient):
    """Synchronous client for the session-based v2 API."""

    def create_session(self, options: CreateSessionOptions, *, call_options: CallOptions | None = None) -> SessionResponse:
        _expect(options, CreateSessionOptions)
        return cast(SessionResponse, self.invoke(options, SessionResponse, call_options=call_options))

    def delete_session(self, options: DeleteSessionOptions, *, call_options: CallOptions | None = None) -> None:
        _expect(options, DeleteSessionOptions)
        self.invoke(options, call_options=call_options)

    def message(self, options: MessageOptions, *, call_options: CallOptions | None = None) -> MessageResponse:
        _expect(options, MessageOptions)
        return cast(MessageResponse, self.invoke(options, MessageResponse, call_options=call_options))


class AsyncAssistantV2(AsyncWatsonClient):
    """Asynchronous client for the session-based v2 API."""

    async def create_session(
        self,
        options: CreateSessionOptions,
        *,
        call_options: CallOptions | None = None,
    ) -> SessionResponse:
        _expect(options, CreateSessionOptions)
        return cast(SessionResponse, await self.invoke(options, SessionResponse, call_options=call_options))

    async def delete_session(self, options: DeleteSessionOptions, *, call_options: CallOptions | None = None) -> None:
        _expect(options, DeleteSessionOptions)
        await self.invoke(options, call_options=call_options)

    async def message(self, options: MessageOptions, *, call_options: CallOptions | None = None) -> MessageResponse:
        _expect(options, MessageOptions)
        return cast(MessageResponse, await self.invoke(options, MessageResponse, call_options=call_options))
