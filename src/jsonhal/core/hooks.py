from __future__ import annotations

import collections.abc
import dataclasses
import types
import typing
from collections.abc import Mapping
from datetime import datetime
from typing import (
    Annotated,
    Any,
    Callable,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
    get_args,
    get_origin,
)

from pydantic import BaseModel

from ..utils.time_parser import parse_timestamp

# (target annotation, data) -> data
DecodeHook = Callable[[Any, Any], Any]

# get_origin() reports the collections.abc class for typing aliases
_SEQUENCE_ORIGINS = {
    list,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
}
_MAPPING_ORIGINS = {dict, collections.abc.Mapping, collections.abc.MutableMapping}
_UNION_ORIGINS = {Union, types.UnionType}


def timestamp_hook(target: Any, data: Any) -> Any:
    """Convert RFC 3339 text into a datetime when the target expects one."""
    if target is datetime and isinstance(data, str):
        return parse_timestamp(data)
    return data


def apply_hooks(target: Any, data: Any, hooks: Sequence[DecodeHook]) -> Any:
    """
    Run every hook against `data`, then descend into the target's shape.

    Descends through Annotated, Optional/unions with a single non-None member,
    lists/tuples/sets, dicts, pydantic models and dataclasses. Anything else
    is returned as the hooks left it.
    """
    for hook in hooks:
        data = hook(target, data)
    if not hooks:
        return data
    return _descend(target, data, hooks)


def _descend(target: Any, data: Any, hooks: Sequence[DecodeHook]) -> Any:
    origin = get_origin(target)
    args = get_args(target)

    if origin is Annotated:
        return apply_hooks(args[0], data, hooks)

    if origin in _UNION_ORIGINS:
        members = [a for a in args if a is not type(None)]
        if data is None or len(members) != 1:
            return data
        return apply_hooks(members[0], data, hooks)

    if origin is tuple and isinstance(data, (list, tuple)):
        if len(args) == 2 and args[1] is Ellipsis:
            items = [apply_hooks(args[0], v, hooks) for v in data]
        elif args and len(args) == len(data):
            items = [apply_hooks(t, v, hooks) for t, v in zip(args, data)]
        else:
            return data
        return tuple(items) if isinstance(data, tuple) else items

    if origin in _SEQUENCE_ORIGINS and isinstance(data, (list, tuple)):
        item_type = args[0] if args else Any
        items = [apply_hooks(item_type, v, hooks) for v in data]
        return tuple(items) if isinstance(data, tuple) else items

    if origin in _MAPPING_ORIGINS and isinstance(data, Mapping):
        value_type = args[1] if len(args) == 2 else Any
        return {k: apply_hooks(value_type, v, hooks) for k, v in data.items()}

    if origin is not None or data is None:
        return data

    fields = _target_fields(target)
    if fields is None:
        return data

    if not isinstance(data, Mapping):
        if isinstance(data, target):
            return data
        # attribute-bearing source, e.g. another HAL model
        read: dict = {}
        for name, keys, _ in fields:
            aliases = [k for k in keys if isinstance(k, str)]
            for attr in (name, *aliases):
                if hasattr(data, attr):
                    read[aliases[0] if aliases else name] = getattr(data, attr)
                    break
        if not read:
            return data
        data = read

    out = dict(data)
    for name, keys, annotation in fields:
        for key in (*keys, name):
            if isinstance(key, str) and key in out:
                out[key] = apply_hooks(annotation, out[key], hooks)
                break
    return out


def _target_fields(target: Any) -> Optional[List[Tuple[str, Tuple[Any, ...], Any]]]:
    """(field name, alternate input keys, annotation) for models and dataclasses."""
    if not isinstance(target, type):
        return None

    if issubclass(target, BaseModel):
        return [
            (name, (info.validation_alias, info.alias), info.annotation)
            for name, info in target.model_fields.items()
        ]

    if dataclasses.is_dataclass(target):
        hints = typing.get_type_hints(target)
        return [(f.name, (), hints.get(f.name, Any)) for f in dataclasses.fields(target)]

    return None


__all__ = ["DecodeHook", "apply_hooks", "timestamp_hook"]
