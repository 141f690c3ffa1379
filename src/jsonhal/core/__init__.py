"""Core surface for jsonhal (independent of the envelope models)."""

from .config import DecoderConfig, Settings, load_env_config
from .decoding import EmbeddedDecoder
from .errors import DecodeError, InvalidShapeError, JsonHalError, NotFoundError
from .hooks import DecodeHook, apply_hooks, timestamp_hook
from .logging import LogfmtFormatter, setup_logging
from .observability import log_event

__all__ = [
    # Errors
    "JsonHalError",
    "NotFoundError",
    "InvalidShapeError",
    "DecodeError",
    # Decoding
    "EmbeddedDecoder",
    "DecodeHook",
    "apply_hooks",
    "timestamp_hook",
    # Config helpers
    "DecoderConfig",
    "Settings",
    "load_env_config",
    # Logging
    "LogfmtFormatter",
    "setup_logging",
    "log_event",
]
