"""Decoding error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``chat_completion_models.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import DecodingErrorCode
from .errors_parts.decoding_failure import DecodingFailure
from .errors_parts.classification import (
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
