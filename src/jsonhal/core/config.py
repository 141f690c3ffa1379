from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Tuple

from dotenv import load_dotenv

from .hooks import DecodeHook, timestamp_hook

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class DecoderConfig:
    strict: bool = False  # pydantic strict mode: no lax coercion (e.g. "1" -> 1)
    hooks: Tuple[DecodeHook, ...] = field(default=(timestamp_hook,))


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    decoder: DecoderConfig = field(default_factory=DecoderConfig)


def load_env_config(*, use_dotenv: bool = True) -> Settings:
    """Load jsonhal settings from environment variables (optional .env)."""
    if use_dotenv:
        load_dotenv()
    log_level = os.getenv("JSONHAL_LOG_LEVEL", "").strip().upper() or "WARNING"
    strict = os.getenv("JSONHAL_DECODE_STRICT", "").strip().lower() in TRUTHY
    return Settings(log_level=log_level, decoder=DecoderConfig(strict=strict))


__all__ = ["DecoderConfig", "Settings", "load_env_config"]
