"""chat_completion_models.config.env
==================================

Environment variable mapping and parsing helpers for decode configuration.

Failure Modes
-------------
- Unset variables produce no override.
- Values that are not recognizable booleans are ignored (the lower-precedence
  value stays in effect) rather than raising.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

from .defaults import LOG_EVENTS_ENV, STRICT_FINISH_REASON_ENV

# Config field -> environment variable name
ENV_FIELD_MAP: Dict[str, str] = {
    "strict_finish_reason": STRICT_FINISH_REASON_ENV,
    "log_events": LOG_EVENTS_ENV,
}

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Parse a boolean-ish string; return ``None`` when unrecognized.

    Parameters
    ----------
    value: Optional[str]
        Raw value such as ``"1"``, ``"true"``, ``"off"`` (case-insensitive).
    """
    if value is None:
        return None
    v = value.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    return None


def env_overrides(environ: Optional[Mapping[str, Optional[str]]] = None) -> Dict[str, Any]:
    """Return config overrides read from ``environ`` (default ``os.environ``)."""
    source = os.environ if environ is None else environ
    out: Dict[str, Any] = {}
    for field, env_name in ENV_FIELD_MAP.items():
        parsed = parse_bool(source.get(env_name))
        if parsed is not None:
            out[field] = parsed
    return out


__all__ = ["ENV_FIELD_MAP", "parse_bool", "env_overrides"]
