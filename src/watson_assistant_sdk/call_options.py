"""Per-call overrides passed alongside an options object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class CallOptions:
    headers: Mapping[str, str] | None = None
    timeout: float | None = None
