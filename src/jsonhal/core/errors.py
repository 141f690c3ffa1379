from __future__ import annotations

from typing import Any, Optional


class JsonHalError(Exception):
    """Base error for envelope failures."""


class NotFoundError(JsonHalError, LookupError):
    """A link or embedded resource with the requested name does not exist."""

    def __init__(self, kind: str, name: str):
        super().__init__(f'{kind} "{name}" not found')
        self.kind = kind
        self.name = name


class InvalidShapeError(JsonHalError, TypeError):
    def __init__(self, name: str):
        super().__init__("Embedded object is not a slice or a map")
        self.name = name


class DecodeError(JsonHalError):
    """
    An embedded value could not populate the requested target.
    The structural mismatch is kept on `cause` (and chained as __cause__).
    """

    def __init__(
        self,
        *,
        name: str,
        target: Any,
        cause: Optional[BaseException] = None,
        message: Optional[str] = None,
    ):
        detail = message or (str(cause) if cause is not None else "decode failed")
        super().__init__(f'Embedded "{name}" cannot be decoded into {_describe(target)}: {detail}')
        self.name = name
        self.target = target
        self.cause = cause


def _describe(target: Any) -> str:
    return getattr(target, "__qualname__", None) or repr(target)


__all__ = [
    "JsonHalError",
    "NotFoundError",
    "InvalidShapeError",
    "DecodeError",
]
