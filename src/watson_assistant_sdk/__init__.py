"""Python client for the IBM Watson Assistant service."""

import logging

from .assistant_v1 import AssistantV1, AsyncAssistantV1
from .assistant_v2 import AssistantV2, AsyncAssistantV2
from .call_options import CallOptions
from .client import AsyncWatsonClient, WatsonClient
from .exceptions import (
    AssistantAuthError,
    AssistantError,
    AssistantHTTPError,
    AssistantNetworkError,
    AssistantNotFoundError,
    AssistantRateLimitError,
    AssistantTimeoutError,
    AssistantValidationError,
)
from .options import Options, OptionsBuilder

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AssistantAuthError",
    "AssistantError",
    "AssistantHTTPError",
    "AssistantNetworkError",
    "AssistantNotFoundError",
    "AssistantRateLimitError",
    "AssistantTimeoutError",
    "AssistantV1",
    "AssistantV2",
    "AssistantValidationError",
    "AsyncAssistantV1",
    "AsyncAssistantV2",
    "AsyncWatsonClient",
    "CallOptions",
    "Options",
    "OptionsBuilder",
    "WatsonClient",
]
