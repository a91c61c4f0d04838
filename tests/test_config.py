"""Tests for configuration adapter."""

import pytest

from ev_station_monitor.adapters.config import AppConfig


def test_config_loads_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    for name in ("PORT", "STATION_URL", "POLL_INTERVAL_MINUTES", "VAPID_PUBLIC_KEY"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig.for_testing()

    assert config.host == "0.0.0.0"
    assert config.port == 3000
    assert config.station_url == "https://charge.virtaglobal.com/stations/6224"
    assert config.station_api_timeout_seconds == 15
    assert config.poll_interval_minutes == 10
    assert config.poll_interval_seconds == 600
    assert config.push_enabled is False
    assert config.log_requests is False


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("STATION_URL", "https://example.com/stations/1")
    monkeypatch.setenv("POLL_INTERVAL_MINUTES", "0.5")
    monkeypatch.setenv("EVSM_LOG_REQUESTS", "true")

    config = AppConfig.for_testing()

    assert config.port == 8080
    assert config.station_url == "https://example.com/stations/1"
    assert config.poll_interval_seconds == 30
    assert config.log_requests is True


def test_config_push_enabled_only_with_both_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given VAPID keys, when loading config, then push is enabled only if both are set."""
    monkeypatch.setenv("VAPID_PUBLIC_KEY", "public")
    monkeypatch.delenv("VAPID_PRIVATE_KEY", raising=False)
    assert AppConfig.for_testing().push_enabled is False

    monkeypatch.setenv("VAPID_PRIVATE_KEY", "private")
    assert AppConfig.for_testing().push_enabled is True


def test_config_blank_keys_are_unset() -> None:
    """Given whitespace-only VAPID keys, when loading config, then they count as unset."""
    config = AppConfig.for_testing(vapid_public_key="  ", vapid_private_key="")

    assert config.vapid_public_key is None
    assert config.vapid_private_key is None
    assert config.push_enabled is False


@pytest.mark.parametrize("minutes", ["0", "-5"])
def test_config_validates_poll_interval(monkeypatch: pytest.MonkeyPatch, minutes: str) -> None:
    """Given a non-positive poll interval, when loading config, then validation fails."""
    monkeypatch.setenv("POLL_INTERVAL_MINUTES", minutes)

    with pytest.raises(ValueError, match="poll_interval_minutes must be greater than zero"):
        AppConfig.for_testing()


def test_config_validates_log_level() -> None:
    """Given an unknown log level, when loading config, then validation fails."""
    with pytest.raises(ValueError, match="log_level must be one of"):
        AppConfig.for_testing(log_level="chatty")


def test_config_normalizes_log_level() -> None:
    """Given a lowercase log level, when loading config, then it is uppercased."""
    assert AppConfig.for_testing(log_level="debug").log_level == "DEBUG"
