"""chat_completion_models.config.defaults
=======================================

Central place for small, stable default values used by the decoders. These
can be overridden via environment variables, an external config file, or
in-code overrides (see ``chat_completion_models.config``).

Only plain constants live here; no I/O and no package imports.
"""

from __future__ import annotations

# ---- Decoding ----

# Reject finish_reason values outside the documented literals.
DEFAULT_STRICT_FINISH_REASON = False

# Emit decode.end / decode.error structured log events.
DEFAULT_LOG_EVENTS = True

# Documented finish_reason literals, in API documentation order.
KNOWN_FINISH_REASONS = ("stop", "length", "tool_calls", "content_filter", "function_call")

# ---- Environment ----

CONFIG_FILE_ENV = "CHAT_MODELS_CONFIG_FILE"
STRICT_FINISH_REASON_ENV = "CHAT_MODELS_STRICT_FINISH_REASON"
LOG_EVENTS_ENV = "CHAT_MODELS_LOG_EVENTS"
