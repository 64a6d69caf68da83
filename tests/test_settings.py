"""Tests for termstring.settings."""

from __future__ import annotations

import logging

import pytest

from termstring.settings import PAD_CHAR_ENV, STRICT_ENV, Settings, load_settings


class TestLoadSettings:
    def test_defaults(self) -> None:
        assert load_settings({}) == Settings(strict=False, pad_char=" ")

    @pytest.mark.parametrize("value", ["1", "true", "Yes", " ON "])
    def test_strict_truthy(self, value: str) -> None:
        assert load_settings({STRICT_ENV: value}).strict is True

    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_strict_falsy(self, value: str) -> None:
        assert load_settings({STRICT_ENV: value}).strict is False

    def test_pad_char(self) -> None:
        assert load_settings({PAD_CHAR_ENV: "."}).pad_char == "."

    def test_invalid_pad_char_is_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="termstring.settings"):
            settings = load_settings({PAD_CHAR_ENV: "ab"})
        assert settings.pad_char == " "
        assert PAD_CHAR_ENV in caplog.text

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(STRICT_ENV, "1")
        monkeypatch.setenv(PAD_CHAR_ENV, "_")
        assert load_settings() == Settings(strict=True, pad_char="_")
