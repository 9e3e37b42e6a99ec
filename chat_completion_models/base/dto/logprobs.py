"""Log-probability detail records for a choice."""

from __future__ import annotations

from typing import List, Optional

from pydantic import StrictFloat, StrictInt

from ._base import ResponseModel


class TopLogprob(ResponseModel):
    """One of the most likely tokens at a position.

    Attributes:
        token: The token.
        bytes: UTF-8 byte values of the token, or ``None`` when the token has
            no byte representation.
        logprob: Log probability of this token.
    """

    token: str
    bytes: Optional[List[StrictInt]] = None
    logprob: StrictFloat


class TokenLogprob(ResponseModel):
    """Log probability information for one generated token.

    Attributes:
        token: The token.
        bytes: UTF-8 byte values of the token, or ``None``. Characters split
            over several tokens must have their bytes combined before decoding.
        logprob: Log probability of this token.
        top_logprobs: Most likely tokens at this position; may hold fewer
            entries than were requested.
    """

    token: str
    bytes: Optional[List[StrictInt]] = None
    logprob: StrictFloat
    top_logprobs: List[TopLogprob]

    def decoded_bytes(self) -> Optional[bytes]:
        """Return ``bytes`` as a ``bytes`` object, or ``None`` when absent."""
        if self.bytes is None:
            return None
        return bytes(self.bytes)


class ChoiceLogprobs(ResponseModel):
    """Log probability information for a choice."""

    content: Optional[List[TokenLogprob]] = None

    def joined_bytes(self) -> bytes:
        """Concatenate the byte values of every content token.

        Tokens without a byte representation contribute nothing.
        """
        out = bytearray()
        for tok in self.content or ():
            if tok.bytes is not None:
                out.extend(tok.bytes)
        return bytes(out)


__all__ = ["TopLogprob", "TokenLogprob", "ChoiceLogprobs"]
