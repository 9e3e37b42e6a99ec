"""Token usage statistics attached to a chat completion."""

from __future__ import annotations

from typing import Dict

from pydantic import StrictInt

from ._base import ResponseModel


class CompletionUsage(ResponseModel):
    """Usage statistics for the completion request.

    Attributes:
        completion_tokens: Number of tokens in the generated completion.
        prompt_tokens: Number of tokens in the prompt.
        total_tokens: Total number of tokens used (prompt + completion). The
            API guarantees the sum; it is not re-checked on decode.
    """

    completion_tokens: StrictInt
    prompt_tokens: StrictInt
    total_tokens: StrictInt

    def as_tokens(self) -> Dict[str, int]:
        """Return the compact ``{"prompt", "completion", "total"}`` mapping used in logs."""
        return {
            "prompt": self.prompt_tokens,
            "completion": self.completion_tokens,
            "total": self.total_tokens,
        }


__all__ = ["CompletionUsage"]
