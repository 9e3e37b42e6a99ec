"""
Structured decoding failure exception type.

Wraps pydantic validation errors with a normalized `DecodingErrorCode` and the
location of the first offending field so callers at the transport boundary can
surface a compact, consistent error.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .error_code import DecodingErrorCode


CodingPath = Tuple[Union[str, int], ...]


@dataclass
class DecodingFailure(Exception):
    """Represents a failed decode of a chat-completion payload.

    Attributes:
        code: Normalized :class:`DecodingErrorCode` for the first failure.
        message: Human-readable error message suitable for logging.
        coding_path: Location of the first failure, e.g.
            ``("choices", 0, "message", "role")``.
        target: Name of the model that was being decoded.
        errors: Underlying pydantic error records (``ValidationError.errors()``).
        raw: Optional original exception for diagnostics.
    """

    code: DecodingErrorCode
    message: str
    coding_path: CodingPath = ()
    target: Optional[str] = None
    errors: List[Dict[str, Any]] = field(default_factory=list)
    raw: Optional[Exception] = None

    @property
    def path_str(self) -> str:
        """Dotted form of ``coding_path`` (``"-"`` for the document root)."""
        return ".".join(str(p) for p in self.coding_path) or "-"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining target, path, code, and message."""
        return f"{self.target or '-'}:{self.path_str} {self.code.value}: {self.message}"


__all__ = ["DecodingFailure", "CodingPath"]
