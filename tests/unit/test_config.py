"""Unit tests for settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from mhcodec import Multihash, build, to_text
from mhcodec.config import Settings, configure_logging, get_settings


def test_defaults() -> None:
    """Default base is base16, default level INFO."""
    settings = Settings()
    assert settings.default_base == "base16"
    assert settings.log_level == "INFO"


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """MHCODEC_* variables override defaults."""
    monkeypatch.setenv("MHCODEC_DEFAULT_BASE", "base58btc")
    monkeypatch.setenv("MHCODEC_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.default_base == "base58btc"
    assert settings.log_level == "DEBUG"


def test_unknown_base_rejected() -> None:
    """Only multibase names are accepted."""
    with pytest.raises(ValidationError, match="Unknown multibase"):
        Settings(default_base="base99")


def test_unknown_level_rejected() -> None:
    """Log level must be a logging level name."""
    with pytest.raises(ValidationError, match="Unknown log level"):
        Settings(log_level="chatty")


def test_get_settings_cached() -> None:
    """get_settings returns the same instance until the cache is cleared."""
    assert get_settings() is get_settings()


def test_default_base_drives_to_text(monkeypatch: pytest.MonkeyPatch) -> None:
    """to_text without a base follows the configured default."""
    monkeypatch.setenv("MHCODEC_DEFAULT_BASE", "base58btc")
    get_settings.cache_clear()
    mh = build("sha1", b"multihash")
    assert to_text(mh) == "z5dsgvJGnvAfiR3K6HCBc4hcokSfmjj"
    assert to_text(Multihash.null(), "base16") == "f0000"


def test_configure_logging_sets_level() -> None:
    """configure_logging applies the level to the mhcodec logger."""
    logger = configure_logging(Settings(log_level="WARNING"))
    assert logger is logging.getLogger("mhcodec")
    assert logger.level == logging.WARNING
    assert logger.handlers
    handlers = list(logger.handlers)
    configure_logging(Settings(log_level="DEBUG"))
    assert logger.handlers == handlers
    assert logger.level == logging.DEBUG
