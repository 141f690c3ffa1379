"""jsonhal package exports."""

from .core import (
    DecodeError,
    DecodeHook,
    DecoderConfig,
    EmbeddedDecoder,
    InvalidShapeError,
    JsonHalError,
    NotFoundError,
    Settings,
    load_env_config,
    setup_logging,
    timestamp_hook,
)
from .models import Embedded, EmbedGetter, Embedder, EmbedSetter, Hal, Link
from .utils.time_parser import TimestampParseError, parse_timestamp

__all__ = [
    # Envelope
    "Hal",
    "Link",
    "Embedded",
    "EmbedSetter",
    "EmbedGetter",
    "Embedder",
    # Exceptions
    "JsonHalError",
    "NotFoundError",
    "InvalidShapeError",
    "DecodeError",
    "TimestampParseError",
    # Decoding
    "EmbeddedDecoder",
    "DecoderConfig",
    "DecodeHook",
    "timestamp_hook",
    "parse_timestamp",
    # Config / logging
    "Settings",
    "load_env_config",
    "setup_logging",
]
