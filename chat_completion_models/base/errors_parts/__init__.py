"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `chat_completion_models.base.errors` for the stable surface.
"""

from .error_code import DecodingErrorCode
from .decoding_failure import DecodingFailure
from .classification import (
    classify_error_type,
    classify_validation_error,
    failure_from_validation_error,
)

__all__ = [
    "DecodingErrorCode",
    "DecodingFailure",
    "classify_error_type",
    "classify_validation_error",
    "failure_from_validation_error",
]
