"""
Error classification helpers mapping pydantic validation errors to
normalized `DecodingErrorCode` values.
"""
from __future__ import annotations

from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from .decoding_failure import DecodingFailure
from .error_code import DecodingErrorCode


# pydantic error types meaning "a required key was absent"
_MISSING_TYPES: FrozenSet[str] = frozenset({"missing", "union_tag_not_found"})


def classify_error_type(error_type: str) -> DecodingErrorCode:
    """Map a single pydantic error ``type`` string to a code."""
    if error_type in _MISSING_TYPES:
        return DecodingErrorCode.MISSING_FIELD
    return DecodingErrorCode.TYPE_MISMATCH


def classify_validation_error(exc: ValidationError) -> DecodingErrorCode:
    """Classify a ``ValidationError`` by its first reported error."""
    errors = exc.errors()
    if not errors:  # pragma: no cover - pydantic always reports one
        return DecodingErrorCode.TYPE_MISMATCH
    return classify_error_type(errors[0]["type"])


def _first_message(error: Mapping[str, Any]) -> str:
    msg = str(error.get("msg", "validation failed"))
    # Tagged-union errors put the offending tag in ctx; keep it in the message.
    ctx = error.get("ctx") or {}
    tag = ctx.get("tag")
    if error.get("type") == "union_tag_invalid" and tag is not None and str(tag) not in msg:
        msg = f"{msg} (got {tag!r})"
    return msg


def _coding_path(error: Mapping[str, Any]) -> Tuple[Union[str, int], ...]:
    path = tuple(error.get("loc", ()))
    # A missing discriminator is reported on the enclosing object; point at the key.
    if error.get("type") == "union_tag_not_found":
        key = str((error.get("ctx") or {}).get("discriminator", "")).strip("'\"")
        if key:
            path += (key,)
    return path


def failure_from_validation_error(exc: ValidationError, *, target: Optional[str] = None) -> DecodingFailure:
    """Build a :class:`DecodingFailure` from a pydantic ``ValidationError``.

    The first reported error decides ``code``, ``message`` and
    ``coding_path``; the complete error list is kept on ``errors``.
    """
    errors = exc.errors(include_url=False)
    first: Dict[str, Any] = dict(errors[0]) if errors else {}
    return DecodingFailure(
        code=classify_validation_error(exc),
        message=_first_message(first),
        coding_path=_coding_path(first),
        target=target or exc.title,
        errors=[dict(e) for e in errors],
        raw=exc,
    )


__all__ = [
    "classify_error_type",
    "classify_validation_error",
    "failure_from_validation_error",
]
