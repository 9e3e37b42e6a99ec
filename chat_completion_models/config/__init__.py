"""Decode configuration layer.

Merge order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Optional external config file (JSON or YAML) named by
       ``CHAT_MODELS_CONFIG_FILE`` (read once per distinct env value)
    3. Environment variables (``CHAT_MODELS_STRICT_FINISH_REASON``,
       ``CHAT_MODELS_LOG_EVENTS``)
    4. In-code overrides passed to :func:`get_decode_config`

External config file example::

    decoding:
      strict_finish_reason: true
      log_events: false

Public API
----------
* get_decode_config(overrides: dict | None = None) -> DecodeConfig
* reload_decode_config() -> None
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .defaults import CONFIG_FILE_ENV, DEFAULT_LOG_EVENTS, DEFAULT_STRICT_FINISH_REASON
from .env import ENV_FIELD_MAP, env_overrides, parse_bool

logger = logging.getLogger(__name__)

# Top-level section of the external config file holding decode settings.
CONFIG_SECTION = "decoding"


@dataclass(frozen=True)
class DecodeConfig:
    """Resolved decode settings.

    Attributes:
        strict_finish_reason: Fail decoding when ``finish_reason`` is not one
            of the documented literals.
        log_events: Emit ``decode.end`` / ``decode.error`` log events.
    """

    strict_finish_reason: bool = DEFAULT_STRICT_FINISH_REASON
    log_events: bool = DEFAULT_LOG_EVENTS


_FIELD_NAMES = frozenset(f.name for f in fields(DecodeConfig))


def _load_external_config(path: Optional[str]) -> Dict[str, Any]:
    """Read the ``decoding`` section of the external config file, if any.

    JSON is tried first, then YAML. A missing file yields an empty mapping;
    a path that is not a regular file, an unreadable file or unparsable
    content also yields one, with a warning.
    """
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.exists():
        logger.debug("config file %s not found; ignoring", p)
        return {}
    if not p.is_file():
        logger.warning("config file %s is not a regular file; ignoring", p)
        return {}
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("config file %s could not be read: %s", p, exc)
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            logger.warning("config file %s is neither JSON nor YAML: %s", p, exc)
            return {}
    section = data.get(CONFIG_SECTION) if isinstance(data, dict) else None
    return dict(section) if isinstance(section, dict) else {}


def _coerce(values: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for k, v in values.items():
        if k not in _FIELD_NAMES or v is None:
            continue
        if isinstance(v, str):
            v = parse_bool(v)
            if v is None:
                continue
        out[k] = bool(v)
    return out


@lru_cache(maxsize=32)
def _resolve(config_file: Optional[str], env_values: Tuple[Tuple[str, Optional[str]], ...]) -> DecodeConfig:
    cfg: Dict[str, Any] = {}
    cfg |= _coerce(_load_external_config(config_file))
    cfg |= env_overrides(dict(env_values))
    return DecodeConfig(**cfg)


def get_decode_config(overrides: Optional[Dict[str, Any]] = None) -> DecodeConfig:
    """Return the merged :class:`DecodeConfig`.

    The file and environment layers are resolved once per distinct set of
    environment values; call :func:`reload_decode_config` after editing the
    config file in place. Unknown keys in any source are ignored.
    """
    env_values = tuple((name, os.getenv(name)) for name in ENV_FIELD_MAP.values())
    cfg = _resolve(os.getenv(CONFIG_FILE_ENV), env_values)
    if overrides:
        cfg = replace(cfg, **_coerce(overrides))
    return cfg


def reload_decode_config() -> None:
    """Drop cached configuration so the next lookup re-reads file and env."""
    _resolve.cache_clear()


__all__ = [
    "DecodeConfig",
    "get_decode_config",
    "reload_decode_config",
    "CONFIG_SECTION",
]
