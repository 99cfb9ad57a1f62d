"""Fixtures for tests that talk to a live Watson Assistant instance.

Credentials come from the environment. Tests are skipped when the username is
missing or still the placeholder value.
"""

from __future__ import annotations

import os
from datetime import datetime, timedelta
from typing import Callable, Iterator

import pytest

from watson_assistant_sdk import AssistantV1, AssistantV2

PLACEHOLDER = "<username>"

# Clock skew allowed between this machine and the service.
TOLERANCE = timedelta(seconds=2)

DEFAULT_HEADERS = {"X-Watson-Learning-Opt-Out": "1", "X-Watson-Test": "1"}


def fuzzy_before(left: datetime, right: datetime) -> bool:
    """True if ``left`` is before ``right`` within the tolerance."""
    return left - right < TOLERANCE


def fuzzy_after(left: datetime, right: datetime) -> bool:
    """True if ``left`` is after ``right`` within the tolerance."""
    return right - left < TOLERANCE


def _credentials(prefix: str) -> tuple[str, str | None, str | None]:
    username = os.getenv(f"{prefix}_USERNAME")
    if not username or username == PLACEHOLDER:
        pytest.skip(f"{prefix}_USERNAME is not configured with valid credentials")
    return username, os.getenv(f"{prefix}_PASSWORD"), os.getenv(f"{prefix}_URL")


@pytest.fixture(name="fuzzy_before")
def fuzzy_before_fixture() -> Callable[[datetime, datetime], bool]:
    return fuzzy_before


@pytest.fixture(name="fuzzy_after")
def fuzzy_after_fixture() -> Callable[[datetime, datetime], bool]:
    return fuzzy_after


@pytest.fixture
def assistant_id() -> str:
    value = os.getenv("ASSISTANT_V2_ASSISTANT_ID")
    if not value:
        pytest.skip("ASSISTANT_V2_ASSISTANT_ID is not configured")
    return value


@pytest.fixture
def workspace_id() -> str:
    value = os.getenv("ASSISTANT_V1_WORKSPACE_ID")
    if not value:
        pytest.skip("ASSISTANT_V1_WORKSPACE_ID is not configured")
    return value


@pytest.fixture
def assistant_v2() -> Iterator[AssistantV2]:
    username, password, url = _credentials("ASSISTANT_V2")
    service = AssistantV2("2018-07-10", base_url=url, username=username, password=password)
    service.set_default_headers(DEFAULT_HEADERS)
    with service:
        yield service


@pytest.fixture
def assistant_v1() -> Iterator[AssistantV1]:
    username, password, url = _credentials("ASSISTANT_V1")
    service = AssistantV1("2018-07-10", base_url=url, username=username, password=password)
    service.set_default_headers(DEFAULT_HEADERS)
    with service:
        yield service
