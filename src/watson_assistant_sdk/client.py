"""Synchronous and asynchronous transports that execute built options objects."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

import httpx
from pydantic import BaseModel

from .call_options import CallOptions
from .exceptions import (
    AssistantAuthError,
    AssistantHTTPError,
    AssistantNetworkError,
    AssistantNotFoundError,
    AssistantRateLimitError,
    AssistantTimeoutError,
    AssistantValidationError,
)
from .options import Options
from .security import parse_retry_after, sanitize_headers, validate_base_url


logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

SDK_USER_AGENT = "watson-assistant-python-sdk/0.1.0"


def _coerce_query_params(query: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if query is None:
        return None
    normalized: dict[str, Any] = {}
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, bool):
            normalized[key] = "true" if value else "false"
            continue
        if isinstance(value, (list, tuple)):
            normalized[key] = ",".join(str(v) for v in value)
            continue
        if isinstance(value, datetime):
            normalized[key] = value.isoformat()
            continue
        normalized[key] = value
    return normalized


def _normalize_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    if not headers:
        return {}
    clean: dict[str, str] = {}
    for key, value in headers.items():
        clean[str(key)] = str(value)
    return clean


def _error_message(payload: Mapping[str, Any]) -> str | None:
    """Pull a message out of Watson's ``error`` / ``errors`` payloads, whatever their shape."""
    error = payload.get("error")
    if isinstance(error, str) and error:
        return error
    if isinstance(error, Mapping) and isinstance(error.get("message"), str):
        return error["message"]
    errors = payload.get("errors")
    if isinstance(errors, list) and errors:
        first = errors[0]
        if isinstance(first, str):
            return first
        if isinstance(first, Mapping) and isinstance(first.get("message"), str):
            return first["message"]
    return None


def _expect(options: Any, options_cls: type[Options]) -> None:
    if options is None:
        raise AssistantValidationError(f"{options_cls.__name__} cannot be None", field="options")
    if not isinstance(options, options_cls):
        raise TypeError(f"expected {options_cls.__name__}, got {type(options).__name__}")


class _BaseWatsonClient:
    default_base_url = "https://gateway.watsonplatform.net/assistant/api"
    default_timeout = 30.0
    url_env_var = "WATSON_ASSISTANT_URL"
    username_env_var = "WATSON_ASSISTANT_USERNAME"
    password_env_var = "WATSON_ASSISTANT_PASSWORD"

    def __init__(
        self,
        version: str,
        *,
        base_url: str | None = None,
        username: str | None = None,
        password: str | None = None,
        timeout: float = default_timeout,
        headers: Mapping[str, str] | None = None,
        follow_redirects: bool = True,
        allow_http: bool = False,
    ) -> None:
        if not version:
            raise AssistantValidationError("version cannot be empty", field="version")
        self.version = version
        self.allow_http = allow_http
        self.base_url = (base_url or os.getenv(self.url_env_var) or self.default_base_url).rstrip("/")
        validate_base_url(self.base_url, allow_http=allow_http)
        self.username = username or os.getenv(self.username_env_var)
        password = password or os.getenv(self.password_env_var)
        self._auth = httpx.BasicAuth(self.username, password) if self.username and password else None
        self.timeout = timeout
        self._base_headers = {
            "Accept": "application/json",
            "User-Agent": SDK_USER_AGENT,
        }
        self._default_headers = dict(self._base_headers)
        if headers:
            self._default_headers.update(_normalize_headers(headers))

        self._client_kwargs = {
            "timeout": timeout,
            "follow_redirects": follow_redirects,
            "trust_env": False,
        }

    def set_service_url(self, base_url: str) -> None:
        base_url = base_url.rstrip("/")
        validate_base_url(base_url, allow_http=self.allow_http)
        self.base_url = base_url

    def set_default_headers(self, headers: Mapping[str, str] | None) -> None:
        """Replace the extra headers sent with every call."""
        self._default_headers = dict(self._base_headers)
        self._default_headers.update(_normalize_headers(headers))

    def _headers(self, call_options: CallOptions) -> dict[str, str]:
        merged = dict(self._default_headers)
        if call_options.headers:
            merged.update(_normalize_headers(call_options.headers))
        return merged

    def _build_request_timeout(self, call_options: CallOptions) -> float:
        timeout = call_options.timeout if call_options.timeout is not None else self.timeout
        if timeout <= 0:
            raise AssistantValidationError("timeout must be greater than 0", field="timeout")
        return float(timeout)

    def _request_parts(self, options: Options, call_options: CallOptions | None) -> dict[str, Any]:
        if not isinstance(options, Options):
            raise TypeError(f"expected an Options instance, got {type(options).__name__}")
        call_options = call_options or CallOptions()
        query = {"version": self.version}
        query.update(options.query_params())
        body = options.body()
        parts: dict[str, Any] = {
            "method": options.method,
            "url": self.base_url + options.resolve_path(),
            "params": _coerce_query_params(query),
            "headers": self._headers(call_options),
            "timeout": self._build_request_timeout(call_options),
        }
        if body or options.has_body():
            parts["json"] = body
        if self._auth is not None:
            parts["auth"] = self._auth
        logger.debug(
            "watson request %s %s params=%s headers=%s",
            parts["method"],
            parts["url"],
            parts["params"],
            sanitize_headers(parts["headers"]),
        )
        return parts

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.status_code < 400:
            return
        raw_body = None
        parsed_body = None
        content_type = response.headers.get("content-type", "")
        try:
            raw_body = response.text
            if "application/json" in content_type.lower():
                parsed_body = response.json()
        except (ValueError, httpx.ResponseNotRead):
            raw_body = None

        message = str(parsed_body or raw_body or "request failed")
        error_code = None
        if isinstance(parsed_body, Mapping):
            message = _error_message(parsed_body) or message
            code = parsed_body.get("code")
            if isinstance(code, (int, str)) and not isinstance(code, bool):
                error_code = str(code)

        kwargs = {
            "status_code": response.status_code,
            "error_code": error_code,
            "body": parsed_body or raw_body,
            "headers": MappingProxyType(dict(response.headers)),
            "request_id": response.headers.get("x-global-transaction-id"),
            "retry_after": parse_retry_after(response.headers.get("Retry-After")),
        }
        logger.warning(
            "watson request failed status=%s request_id=%s message=%s",
            response.status_code,
            kwargs["request_id"],
            message,
        )
        if response.status_code in {401, 403}:
            raise AssistantAuthError(message, **kwargs)
        if response.status_code == 404:
            raise AssistantNotFoundError(message, **kwargs)
        if response.status_code == 429:
            raise AssistantRateLimitError(message, **kwargs)
        raise AssistantHTTPError(message, **kwargs)

    @staticmethod
    def _parse_response(response: httpx.Response) -> Any:
        if response.status_code == 204:
            return None
        if not response.content:
            return None
        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type.lower():
            return response.text
        return response.json()

    @staticmethod
    def _decode(payload: Any, response_model: type[M] | None) -> Any:
        if response_model is None or payload is None:
            return payload
        return response_model.model_validate(payload)


class WatsonClient(_BaseWatsonClient):
    """Synchronous client."""

    def __init__(
        self,
        version: str,
        *,
        base_url: str | None = None,
        username: str | None = None,
        password: str | None = None,
        timeout: float = _BaseWatsonClient.default_timeout,
        headers: Mapping[str, str] | None = None,
        follow_redirects: bool = True,
        httpx_client: httpx.Client | None = None,
        allow_http: bool = False,
    ) -> None:
        super().__init__(
            version,
            base_url=base_url,
            username=username,
            password=password,
            timeout=timeout,
            headers=headers,
            follow_redirects=follow_redirects,
            allow_http=allow_http,
        )
        self._httpx = httpx_client or httpx.Client(**self._client_kwargs)

    def __enter__(self) -> "WatsonClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._httpx.close()

    def invoke(
        self,
        options: Options,
        response_model: type[M] | None = None,
        *,
        call_options: CallOptions | None = None,
    ) -> Any:
        """Send the call described by ``options`` and decode the response."""
        parts = self._request_parts(options, call_options)
        try:
            response = self._httpx.request(**parts)
        except httpx.TimeoutException as exc:
            raise AssistantTimeoutError("Request timed out", cause=exc) from exc
        except httpx.NetworkError as exc:
            raise AssistantNetworkError("Network error", cause=exc) from exc

        self._raise_for_status(response)
        return self._decode(self._parse_response(response), response_model)


class AsyncWatsonClient(_BaseWatsonClient):
    """Asynchronous client."""

    def __init__(
        self,
        version: str,
        *,
        base_url: str | None = None,
        username: str | None = None,
        password: str | None = None,
        timeout: float = _BaseWatsonClient.default_timeout,
        headers: Mapping[str, str] | None = None,
        follow_redirects: bool = True,
        httpx_client: httpx.AsyncClient | None = None,
        allow_http: bool = False,
    ) -> None:
        super().__init__(
            version,
            base_url=base_url,
            username=username,
            password=password,
            timeout=timeout,
            headers=headers,
            follow_redirects=follow_redirects,
            allow_http=allow_http,
        )
        self._httpx = httpx_client or httpx.AsyncClient(**self._client_kwargs)

    async def __aenter__(self) -> "AsyncWatsonClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._httpx.aclose()

    async def invoke(
        self,
        options: Options,
        response_model: type[M] | None = None,
        *,
        call_options: CallOptions | None = None,
    ) -> Any:
        parts = self._request_parts(options, call_options)
        try:
            response = await self._httpx.request(**parts)
        except httpx.TimeoutException as exc:
            raise AssistantTimeoutError("Request timed out", cause=exc) from exc
        except httpx.NetworkError as exc:
            raise AssistantNetworkError("Network error", cause=exc) from exc

        self._raise_for_status(response)
        return self._decode(self._parse_response(response), response_model)
