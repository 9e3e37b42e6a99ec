"""Shared pydantic base for response records.

Every record decoded from a chat-completion response is immutable and
compares by value. Python attribute names may differ from wire keys; wire
keys are declared as field aliases and both spellings are accepted on input.
Unknown keys sent by newer API versions are ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ResponseModel(BaseModel):
    """Frozen base model for decoded response records."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


__all__ = ["ResponseModel"]
