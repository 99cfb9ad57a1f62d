"""SDK-specific exceptions."""

from __future__ import annotations

from typing import Mapping


class AssistantError(Exception):
    """Base exception for all Watson Assistant SDK failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_code: str | None = None,
        body: object = None,
        headers: Mapping[str, str] | None = None,
        request_id: str | None = None,
        retry_after: float | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.body = body
        self.headers = dict(headers) if headers is not None else {}
        self.request_id = request_id
        self.retry_after = retry_after
        self.cause = cause

    def __str__(self) -> str:  # pragma: no cover - simple formatting
        if self.status_code is None:
            return str(self.args[0])
        parts = [f"{self.status_code}"]
        if self.error_code:
            parts.append(self.error_code)
        return " ".join(parts) + f": {self.args[0]}"


class AssistantValidationError(AssistantError, ValueError):
    """Raised when an options object is built with a missing or empty required field."""

    def __init__(self, message: str, *, field: str | None = None, **kwargs: object) -> None:
        super().__init__(message, **kwargs)  # type: ignore[arg-type]
        self.field = field


class AssistantHTTPError(AssistantError):
    """Raised for HTTP non-success responses."""


class AssistantAuthError(AssistantHTTPError):
    """Raised for authentication and authorization failures."""


class AssistantNotFoundError(AssistantHTTPError):
    """Raised for HTTP 404 responses."""


class AssistantRateLimitError(AssistantHTTPError):
    """Raised for HTTP 429 responses."""


class AssistantNetworkError(AssistantError):
    """Raised for transport-level failures like DNS and TCP errors."""


class AssistantTimeoutError(AssistantError):
    """Raised when a request exceeds configured timeout."""
