"""Pytest configuration and shared payload fixtures for the decoder tests.

Payloads mirror the documented chat completion response shape with snake_case
wire keys. Each fixture returns a fresh ``dict`` so tests may mutate it.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Iterator

import pytest

from chat_completion_models.base.logging import LOG_LEVEL_ENV, configure_logger
from chat_completion_models.config import reload_decode_config
from chat_completion_models.config.defaults import (
    CONFIG_FILE_ENV,
    LOG_EVENTS_ENV,
    STRICT_FINISH_REASON_ENV,
)


_FULL_RESPONSE: Dict[str, Any] = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "created": 1677652288,
    "model": "gpt-4o-mini",
    "system_fingerprint": "fp_44709d6fcb",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Hello there, how may I assist you today?"},
            "logprobs": {
                "content": [
                    {
                        "token": "Hello",
                        "bytes": [72, 101, 108, 108, 111],
                        "logprob": -0.31725305,
                        "top_logprobs": [
                            {"token": "Hello", "bytes": [72, 101, 108, 108, 111], "logprob": -0.31725305},
                            {"token": "Hi", "bytes": [72, 105], "logprob": -1.3190403},
                        ],
                    },
                    {
                        "token": "é",
                        "bytes": None,
                        "logprob": -2.5,
                        "top_logprobs": [],
                    },
                ]
            },
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 9, "completion_tokens": 12, "total_tokens": 21},
}


@pytest.fixture(autouse=True)
def clean_decode_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from decode settings present in the developer's environment."""

    for name in (CONFIG_FILE_ENV, STRICT_FINISH_REASON_ENV, LOG_EVENTS_ENV, LOG_LEVEL_ENV):
        monkeypatch.delenv(name, raising=False)
    reload_decode_config()
    yield
    reload_decode_config()


@pytest.fixture(autouse=True)
def reset_logger_level() -> Iterator[None]:
    """Restore the shared logger to INFO with no file handler after each test."""

    yield
    configure_logger(level=logging.INFO, file_path=None)


@pytest.fixture()
def response_payload() -> Dict[str, Any]:
    """A complete response with logprobs, usage and a fingerprint."""

    return copy.deepcopy(_FULL_RESPONSE)


@pytest.fixture()
def minimal_payload() -> Dict[str, Any]:
    """A response carrying only the required keys."""

    return {
        "id": "chatcmpl-min",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4o-mini",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": "ok"}}],
    }


@pytest.fixture()
def tool_call_payload() -> Dict[str, Any]:
    """A response whose assistant message requests a tool call."""

    return {
        "id": "chatcmpl-tool",
        "object": "chat.completion",
        "created": 1700000001,
        "model": "gpt-4o",
        "choices": [
            {
                "index": 0,
                "message": {
                    "role": "assistant",
                    "content": None,
                    "tool_calls": [
                        {
                            "id": "call_abc",
                            "type": "function",
                            "function": {"name": "get_weather", "arguments": "{\"city\": \"Paris\"}"},
                        }
                    ],
                },
                "finish_reason": "tool_calls",
            }
        ],
        "usage": {"prompt_tokens": 20, "completion_tokens": 5, "total_tokens": 25},
    }
