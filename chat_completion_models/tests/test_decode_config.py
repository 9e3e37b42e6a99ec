"""Tests for decode configuration merging and strict finish reasons."""

from __future__ import annotations

import json
import logging

import pytest

from chat_completion_models import (
    DecodeConfig,
    DecodingErrorCode,
    DecodingFailure,
    decode_chat_result,
    get_decode_config,
    reload_decode_config,
)
from chat_completion_models.config.defaults import (
    CONFIG_FILE_ENV,
    KNOWN_FINISH_REASONS,
    LOG_EVENTS_ENV,
    STRICT_FINISH_REASON_ENV,
)
from chat_completion_models.config.env import parse_bool


def test_defaults():
    cfg = get_decode_config()
    assert cfg == DecodeConfig(strict_finish_reason=False, log_events=True)


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("TRUE", True), (" yes ", True), ("off", False), ("0", False), ("maybe", None), (None, None)],
)
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv(STRICT_FINISH_REASON_ENV, "true")
    monkeypatch.setenv(LOG_EVENTS_ENV, "0")
    cfg = get_decode_config()
    assert cfg.strict_finish_reason is True
    assert cfg.log_events is False


def test_unrecognized_env_value_is_ignored(monkeypatch):
    monkeypatch.setenv(STRICT_FINISH_REASON_ENV, "sometimes")
    assert get_decode_config().strict_finish_reason is False


def test_json_config_file(monkeypatch, tmp_path):
    path = tmp_path / "decode.json"
    path.write_text(json.dumps({"decoding": {"strict_finish_reason": True, "unknown": 1}}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    assert get_decode_config().strict_finish_reason is True


def test_yaml_config_file_loses_to_env(monkeypatch, tmp_path):
    path = tmp_path / "decode.yaml"
    path.write_text("decoding:\n  strict_finish_reason: true\n  log_events: false\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    monkeypatch.setenv(STRICT_FINISH_REASON_ENV, "no")
    cfg = get_decode_config()
    assert cfg.strict_finish_reason is False
    assert cfg.log_events is False


def test_missing_config_file_is_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv(CONFIG_FILE_ENV, str(tmp_path / "absent.yaml"))
    assert get_decode_config() == DecodeConfig()


def test_directory_config_path_is_ignored(monkeypatch, tmp_path, minimal_payload, caplog):
    monkeypatch.setenv(CONFIG_FILE_ENV, str(tmp_path))
    with caplog.at_level(logging.WARNING, logger="chat_completion_models.config"):
        assert get_decode_config() == DecodeConfig()
    assert "not a regular file" in caplog.text
    assert decode_chat_result(minimal_payload).id == minimal_payload["id"]


def test_undecodable_config_file_is_ignored(monkeypatch, tmp_path):
    path = tmp_path / "decode.yaml"
    path.write_bytes(b"\xff\xfe\x00decoding")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    assert get_decode_config() == DecodeConfig()


def test_config_file_is_cached_until_reload(monkeypatch, tmp_path):
    path = tmp_path / "decode.json"
    path.write_text(json.dumps({"decoding": {"log_events": False}}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    assert get_decode_config().log_events is False

    path.write_text(json.dumps({"decoding": {"log_events": True}}), encoding="utf-8")
    assert get_decode_config().log_events is False

    reload_decode_config()
    assert get_decode_config().log_events is True


def test_env_change_is_seen_without_reload(monkeypatch):
    assert get_decode_config().strict_finish_reason is False
    monkeypatch.setenv(STRICT_FINISH_REASON_ENV, "1")
    assert get_decode_config().strict_finish_reason is True


def test_overrides_win(monkeypatch):
    monkeypatch.setenv(STRICT_FINISH_REASON_ENV, "1")
    cfg = get_decode_config({"strict_finish_reason": False, "log_events": None})
    assert cfg.strict_finish_reason is False
    assert cfg.log_events is True


def test_strict_finish_reason_rejects_unknown(minimal_payload):
    minimal_payload["choices"][0]["finish_reason"] = "paused"
    with pytest.raises(DecodingFailure) as exc_info:
        decode_chat_result(minimal_payload, config=DecodeConfig(strict_finish_reason=True))
    failure = exc_info.value
    assert failure.code is DecodingErrorCode.TYPE_MISMATCH
    assert failure.coding_path == ("choices", 0, "finish_reason")


@pytest.mark.parametrize("reason", list(KNOWN_FINISH_REASONS) + [None])
def test_strict_finish_reason_accepts_documented_values(minimal_payload, reason):
    minimal_payload["choices"][0]["finish_reason"] = reason
    result = decode_chat_result(minimal_payload, config=DecodeConfig(strict_finish_reason=True))
    assert result.choices[0].finish_reason == reason


def test_strict_mode_from_env(monkeypatch, minimal_payload):
    monkeypatch.setenv(STRICT_FINISH_REASON_ENV, "on")
    minimal_payload["choices"][0]["finish_reason"] = "paused"
    with pytest.raises(DecodingFailure):
        decode_chat_result(minimal_payload)
