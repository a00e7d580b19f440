"""Environment-backed settings helpers."""

from __future__ import annotations

import pytest
import pytz

from config import Settings, env_bool, env_int


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on ", "y", "t"])
def test_env_bool_truthy(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("FLAG", raw)
    assert env_bool("FLAG") is True


@pytest.mark.parametrize("raw", ["0", "false", "no", "off", ""])
def test_env_bool_falsy(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("FLAG", raw)
    assert env_bool("FLAG", True) is False


def test_env_bool_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FLAG", raising=False)
    assert env_bool("FLAG", True) is True


def test_env_int(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LIMIT", "500")
    assert env_int("LIMIT", 1) == 500
    monkeypatch.setenv("LIMIT", "lots")
    assert env_int("LIMIT", 1) == 1
    monkeypatch.delenv("LIMIT")
    assert env_int("LIMIT", 7) == 7


def test_defaults() -> None:
    assert Settings.FORMAT_LOCALE == "zh_CN"
    assert Settings.SERVER_TZ is pytz.UTC
    assert Settings.MAX_OUTPUT_LENGTH == 10_000
    assert Settings.LOG_LEVEL == "INFO"
    assert Settings.LOG_FILE is None


@pytest.mark.parametrize("raw", ["--5", "²", "5.5", "  "])
def test_env_int_malformed_uses_default(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("LIMIT", raw)
    assert env_int("LIMIT", 42) == 42


def test_env_int_minimum(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LIMIT", "-5")
    assert env_int("LIMIT", 10_000) == -5
    assert env_int("LIMIT", 10_000, minimum=0) == 10_000
    monkeypatch.setenv("LIMIT", "0")
    assert env_int("LIMIT", 10_000, minimum=0) == 0
