"""
Normalized decoding error codes (taxonomy).

Defines the `DecodingErrorCode` enumeration used by the response decoders.
Values are lowercase snake_case and are considered a stable public contract for
logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class DecodingErrorCode(str, Enum):
    """Enumerated decoding failure categories."""

    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"


__all__ = ["DecodingErrorCode"]
