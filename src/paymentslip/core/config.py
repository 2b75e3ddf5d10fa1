"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class EncodingConfig(BaseSettings):
    """Code-line encoding defaults."""

    model_config = {"env_prefix": "PAYMENTSLIP_ENCODING_"}

    fill_zeros: bool = True
    block_size: int = 5
    align_from_right: bool = True
    default_variant: Literal["vesr", "besr", "esr_plus"] = "vesr"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "PAYMENTSLIP_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    encoding: EncodingConfig = EncodingConfig()
