"""
Top-level chat completion result and its choices.

Wire keys that differ from the Python attribute names are declared as
aliases (``object`` -> ``object_type``, ``created`` -> ``created_at``). Both
spellings are accepted on input; encoding with ``by_alias=True`` restores the
wire keys.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import Field, StrictFloat, StrictInt

from ._base import ResponseModel
from .logprobs import ChoiceLogprobs
from .message_params import MessageParam
from .usage import CompletionUsage


class FinishReason(str, Enum):
    """Why the model stopped generating tokens.

    ``stop``: natural stop point or a provided stop sequence. ``length``: the
    request's token limit was reached. ``tool_calls``: the model called a
    tool. ``content_filter``: content was omitted by a content filter.
    ``function_call`` is the deprecated predecessor of ``tool_calls``.
    """

    STOP = "stop"
    LENGTH = "length"
    TOOL_CALLS = "tool_calls"
    CONTENT_FILTER = "content_filter"
    FUNCTION_CALL = "function_call"


class Choice(ResponseModel):
    """One candidate completion.

    Attributes:
        index: Position of the choice in the list of choices.
        logprobs: Log probability information, when requested.
        message: The generated message, decoded by its ``role``.
        finish_reason: Raw finish reason string, or ``None`` while the API
            has not reported one. See :class:`FinishReason`.
    """

    index: StrictInt = Field(ge=0)
    logprobs: Optional[ChoiceLogprobs] = None
    message: MessageParam
    finish_reason: Optional[str] = None

    @property
    def finish(self) -> Optional[FinishReason]:
        """``finish_reason`` as a :class:`FinishReason`, or ``None`` if unset or unknown."""
        if self.finish_reason is None:
            return None
        try:
            return FinishReason(self.finish_reason)
        except ValueError:
            return None


class ChatCompletionResult(ResponseModel):
    """A decoded chat completion response.

    Attributes:
        id: Unique identifier of the chat completion.
        object_type: The object type (``chat.completion``); wire key ``object``.
        created_at: Unix timestamp in seconds; wire key ``created``.
        model: The model used for the completion.
        choices: Candidate completions; more than one when ``n > 1``.
        usage: Token usage statistics, when reported.
        system_fingerprint: Backend configuration fingerprint. Together with
            the request ``seed`` it tells when backend changes may affect
            determinism.
    """

    id: str
    object_type: str = Field(alias="object")
    created_at: StrictFloat = Field(alias="created")
    model: str
    choices: List[Choice]
    usage: Optional[CompletionUsage] = None
    system_fingerprint: Optional[str] = None

    @property
    def created_datetime(self) -> datetime:
        """``created_at`` as a timezone-aware UTC datetime."""
        return datetime.fromtimestamp(self.created_at, tz=timezone.utc)

    @property
    def first_message(self) -> Optional[MessageParam]:
        """Message of the first choice, or ``None`` when there are no choices."""
        return self.choices[0].message if self.choices else None


__all__ = ["FinishReason", "Choice", "ChatCompletionResult"]
