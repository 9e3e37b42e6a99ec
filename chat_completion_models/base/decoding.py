"""Decode and encode entry points for chat completion responses.

Purpose
-------
- Turn a response body (JSON bytes/text or an already-parsed mapping) into a
  :class:`ChatCompletionResult` tree.
- Translate pydantic ``ValidationError`` into :class:`DecodingFailure` with a
  normalized code and the path of the first offending field.
- Emit normalized ``decode.end`` / ``decode.error`` log events.

Failure semantics
-----------------
Decoding is all-or-nothing: a failure anywhere in the tree aborts the whole
decode and is raised to the caller. Nothing is retried or defaulted here.

Concurrency
-----------
Pure functions over their input; the module-level ``TypeAdapter`` instances
hold no per-call state and may be shared between threads.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Callable, Dict, Mapping, Optional, TypeVar, Union

from pydantic import BeforeValidator, TypeAdapter, ValidationError

from ..config import DecodeConfig, get_decode_config
from ..config.defaults import KNOWN_FINISH_REASONS
from .dto.chat_result import ChatCompletionResult
from .dto.message_params import MessageParam, UserMessageContent, content_by_trial
from .errors import DecodingErrorCode, DecodingFailure, failure_from_validation_error
from .log_support import LogContext
from .logging import get_logger, normalized_log_event


Payload = Union[bytes, bytearray, str, Mapping[str, Any]]

T = TypeVar("T")

_RESULT: TypeAdapter[ChatCompletionResult] = TypeAdapter(ChatCompletionResult)
_MESSAGE: TypeAdapter[MessageParam] = TypeAdapter(MessageParam)
_USER_CONTENT: TypeAdapter[UserMessageContent] = TypeAdapter(
    Annotated[UserMessageContent, BeforeValidator(content_by_trial)]
)


def _logger() -> logging.Logger:
    return get_logger("chat_models.decoding")


def _validate(adapter: TypeAdapter[T], payload: Any, target: str) -> T:
    """Validate ``payload`` with ``adapter``; JSON text is parsed first.

    Raises:
        DecodingFailure: On any validation error, including malformed JSON.
    """
    try:
        if isinstance(payload, (bytes, bytearray, str)):
            return adapter.validate_json(payload)
        return adapter.validate_python(payload)
    except ValidationError as exc:
        raise failure_from_validation_error(exc, target=target) from exc


def _check_finish_reasons(result: ChatCompletionResult) -> None:
    for pos, choice in enumerate(result.choices):
        reason = choice.finish_reason
        if reason is not None and reason not in KNOWN_FINISH_REASONS:
            raise DecodingFailure(
                code=DecodingErrorCode.TYPE_MISMATCH,
                message=f"unknown finish_reason {reason!r}; expected one of {', '.join(KNOWN_FINISH_REASONS)}",
                coding_path=("choices", pos, "finish_reason"),
                target=ChatCompletionResult.__name__,
            )


def _log_failure(failure: DecodingFailure, ctx: LogContext) -> None:
    normalized_log_event(
        _logger(),
        "decode.error",
        ctx,
        phase="error",
        error_code=failure.code.value,
        emitted=False,
        level=logging.WARNING,
        path=failure.path_str,
        message=failure.message,
    )


def _decode_logged(
    fn: Callable[[], T],
    ctx: LogContext,
    config: DecodeConfig,
) -> T:
    try:
        return fn()
    except DecodingFailure as failure:
        if config.log_events:
            _log_failure(failure, ctx)
        raise


def decode_chat_result(payload: Payload, *, config: Optional[DecodeConfig] = None) -> ChatCompletionResult:
    """Decode a chat completion response body.

    Parameters
    ----------
    payload:
        The 200-status response body as ``bytes``/``str`` JSON text, or an
        already-parsed mapping.
    config:
        Decode settings; defaults to :func:`get_decode_config`.

    Returns
    -------
    ChatCompletionResult
        The fully populated result tree.

    Raises
    ------
    DecodingFailure
        ``missing_field`` when a required key is absent (including a
        message without ``role``), ``type_mismatch`` when a value has the
        wrong shape, an unknown ``role`` is seen, user content is neither a
        string nor a vision list, or (strict mode) ``finish_reason`` is not
        a documented value.
    """
    cfg = config or get_decode_config()
    ctx = LogContext(target=ChatCompletionResult.__name__)

    def _run() -> ChatCompletionResult:
        result = _validate(_RESULT, payload, ChatCompletionResult.__name__)
        if cfg.strict_finish_reason:
            _check_finish_reasons(result)
        return result

    result = _decode_logged(_run, ctx, cfg)
    if cfg.log_events:
        normalized_log_event(
            _logger(),
            "decode.end",
            LogContext(model=result.model, response_id=result.id, target=ctx.target),
            phase="finalize",
            emitted=True,
            tokens=result.usage.as_tokens() if result.usage else None,
            choices=len(result.choices),
            finish_reasons=[c.finish_reason for c in result.choices],
        )
    return result


def decode_message(payload: Payload, *, config: Optional[DecodeConfig] = None) -> MessageParam:
    """Decode one chat message, selecting the variant by its ``role`` key.

    Raises
    ------
    DecodingFailure
        ``missing_field`` when ``role`` or a field required by the selected
        variant is absent; ``type_mismatch`` for an unknown role or a
        mistyped field.
    """
    cfg = config or get_decode_config()
    return _decode_logged(
        lambda: _validate(_MESSAGE, payload, "MessageParam"),
        LogContext(target="MessageParam"),
        cfg,
    )


def decode_user_content(value: Any, *, config: Optional[DecodeConfig] = None) -> UserMessageContent:
    """Decode a user-message ``content`` value: a string, else a vision list.

    ``value`` is an already-parsed value (``str``, ``list`` ...), not JSON text:
    a ``str`` always decodes as plain text.

    Raises
    ------
    DecodingFailure
        ``type_mismatch`` when neither shape matches; the message reports both
        attempts.
    """
    cfg = config or get_decode_config()

    def _run() -> UserMessageContent:
        try:
            return _USER_CONTENT.validate_python(value)
        except ValidationError as exc:
            raise failure_from_validation_error(exc, target="UserMessageContent") from exc

    return _decode_logged(_run, LogContext(target="UserMessageContent"), cfg)


def encode_chat_result(result: ChatCompletionResult, *, exclude_none: bool = False) -> Dict[str, Any]:
    """Encode ``result`` to a JSON-compatible dict using the wire keys.

    Decoding the returned mapping yields a value equal to ``result``.
    """
    return result.model_dump(mode="json", by_alias=True, exclude_none=exclude_none)


def dumps_chat_result(result: ChatCompletionResult, *, indent: Optional[int] = None) -> str:
    """Encode ``result`` to JSON text using the wire keys."""
    return result.model_dump_json(by_alias=True, indent=indent)


__all__ = [
    "Payload",
    "decode_chat_result",
    "decode_message",
    "decode_user_content",
    "encode_chat_result",
    "dumps_chat_result",
]
