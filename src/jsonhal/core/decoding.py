from __future__ import annotations

import logging
from typing import Any, Dict, Optional, get_origin

from pydantic import PydanticUserError, TypeAdapter, ValidationError

from .config import DecoderConfig
from .errors import DecodeError
from .hooks import apply_hooks
from .observability import log_event


def _is_type_like(target: Any) -> bool:
    return isinstance(target, type) or get_origin(target) is not None


class EmbeddedDecoder:
    """
    Structural decoder for embedded values.
    - Populates any pydantic-compatible target type from dicts, lists and
      attribute-bearing objects (no JSON byte round trip)
    - Runs the configured decode hooks before validation
    - Keeps one TypeAdapter per target type for reuse
    """

    def __init__(
        self,
        config: Optional[DecoderConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config if config is not None else DecoderConfig()
        self.log = logger or logging.getLogger("jsonhal.decoder")
        self._adapters: Dict[Any, TypeAdapter] = {}

    def adapter_for(self, target: Any) -> TypeAdapter:
        try:
            return self._adapters[target]
        except KeyError:
            pass
        except TypeError:
            # unhashable annotation, not cached
            return TypeAdapter(target)
        adapter = TypeAdapter(target)
        self._adapters[target] = adapter
        log_event("embedded_adapter_built", self.log, target=repr(target))
        return adapter

    def decode(self, name: str, value: Any, target: Any) -> Any:
        """
        Decode `value` (stored under `name`) into an instance of `target`.
        Raises DecodeError for non-type targets, unsupported target types,
        hook failures and validation failures.
        """
        if not _is_type_like(target):
            raise DecodeError(
                name=name,
                target=target,
                message="target must be a type, not an instance",
            )

        try:
            adapter = self.adapter_for(target)
        except (PydanticUserError, TypeError, NameError) as exc:
            # NameError: annotations that cannot be resolved
            raise DecodeError(name=name, target=target, cause=exc) from exc

        try:
            data = apply_hooks(target, value, self.config.hooks)
        except (ValueError, NameError) as exc:
            raise DecodeError(name=name, target=target, cause=exc) from exc

        try:
            return adapter.validate_python(
                data, strict=self.config.strict or None, from_attributes=True
            )
        except (ValidationError, PydanticUserError) as exc:
            raise DecodeError(name=name, target=target, cause=exc) from exc


__all__ = ["EmbeddedDecoder"]
