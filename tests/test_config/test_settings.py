"""Tests for environment settings."""

import pytest

from cmd_runner.config import Settings
from cmd_runner.services.state import get_settings, reset_state, set_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove CMD_RUNNER_* variables and cached settings."""
    for key in ("CMD_RUNNER_LOG_LEVEL", "CMD_RUNNER_LOG_COLORS", "CMD_RUNNER_KILL_ON_CANCEL"):
        monkeypatch.delenv(key, raising=False)
    reset_state()


def test_defaults() -> None:
    """Unset variables give the defaults."""
    settings = Settings.from_env()

    assert settings.log_level == "INFO"
    assert settings.log_colors is True
    assert settings.kill_on_cancel is True


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Variables override defaults."""
    monkeypatch.setenv("CMD_RUNNER_LOG_LEVEL", "debug")
    monkeypatch.setenv("CMD_RUNNER_LOG_COLORS", "false")
    monkeypatch.setenv("CMD_RUNNER_KILL_ON_CANCEL", "no")

    settings = Settings.from_env()

    assert settings.log_level == "DEBUG"
    assert settings.log_colors is False
    assert settings.kill_on_cancel is False


def test_invalid_values_fall_back(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Unrecognized values log a warning and use the default."""
    monkeypatch.setenv("CMD_RUNNER_LOG_LEVEL", "chatty")
    monkeypatch.setenv("CMD_RUNNER_KILL_ON_CANCEL", "maybe")

    with caplog.at_level("WARNING", logger="cmd_runner.config.settings"):
        settings = Settings.from_env()

    assert settings.log_level == "INFO"
    assert settings.kill_on_cancel is True
    assert "CMD_RUNNER_LOG_LEVEL" in caplog.text
    assert "CMD_RUNNER_KILL_ON_CANCEL" in caplog.text


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    """The environment is read once until reset_state()."""
    first = get_settings()
    monkeypatch.setenv("CMD_RUNNER_KILL_ON_CANCEL", "false")

    assert get_settings() is first

    reset_state()
    assert get_settings().kill_on_cancel is False


def test_set_settings() -> None:
    """Injected settings are returned as-is."""
    custom = Settings(log_level="ERROR")
    set_settings(custom)

    assert get_settings() is custom
