"""Tests for configuration defaults, env overrides and logging setup."""

from __future__ import annotations

import logging

from paymentslip.core.config import AppSettings, EncodingConfig
from paymentslip.core.logging_config import configure_logging


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.log_level == "INFO"
    assert settings.encoding.fill_zeros is True


def test_encoding_config_defaults():
    config = EncodingConfig()
    assert config.block_size == 5
    assert config.align_from_right is True
    assert config.default_variant == "vesr"


def test_encoding_config_env_override(monkeypatch):
    monkeypatch.setenv("PAYMENTSLIP_ENCODING_FILL_ZEROS", "false")
    monkeypatch.setenv("PAYMENTSLIP_ENCODING_DEFAULT_VARIANT", "besr")
    config = EncodingConfig()
    assert config.fill_zeros is False
    assert config.default_variant == "besr"


def test_configure_logging_sets_package_level():
    logger = logging.getLogger("paymentslip")
    try:
        configure_logging(AppSettings(log_level="debug"))
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(logging.NOTSET)
