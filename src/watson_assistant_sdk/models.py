"""Base models shared by every Watson Assistant API version."""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict


class AssistantModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class InputModel(AssistantModel):
    """Request payload fragment. Frozen so that options holding it stay immutable."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    def __hash__(self) -> int:
        # skills and global are dicts, so hash the canonical JSON instead of the field tuple
        return hash((type(self), json.dumps(self.model_dump(mode="json"), sort_keys=True)))
