"""Logging setup for applications embedding the payment slip core."""

from __future__ import annotations

import logging

from paymentslip.core.config import AppSettings

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure root handlers and the ``paymentslip`` logger level."""
    if settings is None:
        settings = AppSettings()

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("paymentslip").setLevel(level)
