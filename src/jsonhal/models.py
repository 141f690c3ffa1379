from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Dict, Optional, Protocol, Type, TypeVar, runtime_checkable

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    field_serializer,
    field_validator,
    model_serializer,
)

from .core.config import DecoderConfig
from .core.decoding import EmbeddedDecoder
from .core.errors import DecodeError, InvalidShapeError, NotFoundError
from .core.observability import log_event

T = TypeVar("T")

# A single resource, a sequence of resources or a mapping of resources.
Embedded = Any

log = logging.getLogger("jsonhal.models")


class Link(BaseModel):
    href: str
    title: str = ""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("title", mode="before")
    @classmethod
    def _null_title(cls, value: Any) -> Any:
        return "" if value is None else value

    @model_serializer(mode="wrap")
    def _omit_empty_title(self, handler) -> Dict[str, Any]:
        data = handler(self)
        if not self.title:
            data.pop("title", None)
        return data


@runtime_checkable
class EmbedSetter(Protocol):
    def set_embedded(self, name: str, embedded: Embedded) -> None: ...


@runtime_checkable
class EmbedGetter(Protocol):
    def get_embedded(self, name: str) -> Embedded: ...


@runtime_checkable
class Embedder(EmbedSetter, EmbedGetter, Protocol):
    pass


class Hal(BaseModel):
    """
    HAL envelope for composition: subclass it and add the resource fields.

        class HelloWorld(Hal):
            id: int
            name: str

    `links` and `embedded` serialize as `_links` / `_embedded` next to the
    host's own fields, sorted by name, and are left out entirely while empty.
    Documents produced this way validate back into the host model.
    """

    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")
    embedded: Dict[str, Any] = Field(default_factory=dict, alias="_embedded")

    decoder_config: ClassVar[DecoderConfig] = DecoderConfig()
    _decoder: Optional[EmbeddedDecoder] = PrivateAttr(default=None)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # --- Links ---

    def set_link(self, name: str, href: str, title: str = "") -> None:
        """Set a link (self, next, etc), replacing any link of the same name."""
        self.links[name] = Link(href=href, title=title)

    def delete_link(self, name: str) -> None:
        self.links.pop(name, None)

    def get_link(self, name: str) -> Link:
        try:
            return self.links[name]
        except KeyError:
            raise NotFoundError("Link", name) from None

    # --- Embedded resources ---

    def set_embedded(self, name: str, embedded: Embedded) -> None:
        """Store a resource, a sequence or a mapping of resources under name."""
        self.embedded[name] = embedded

    def delete_embedded(self, name: str) -> None:
        self.embedded.pop(name, None)

    def get_embedded(self, name: str) -> Embedded:
        try:
            return self.embedded[name]
        except KeyError:
            raise NotFoundError("Embedded", name) from None

    def count_embedded(self, name: str) -> int:
        value = self.get_embedded(name)
        if isinstance(value, Mapping):
            return len(value)
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            return len(value)
        raise InvalidShapeError(name)

    def decode_embedded(self, name: str, target: Type[T]) -> T:
        """
        Decode the embedded value stored under name into an instance of target.

        target is a type: a pydantic model, a dataclass, List[Model], etc.
        Raises NotFoundError if nothing is stored under name and DecodeError
        if the stored shape cannot populate target.
        """
        value = self.get_embedded(name)
        decoder = self._embedded_decoder()
        try:
            return decoder.decode(name, value, target)
        except DecodeError as exc:
            log_event(
                "embedded_decode_failed",
                log,
                relation=name,
                target=repr(target),
                error=str(exc.cause or exc),
            )
            raise

    def _embedded_decoder(self) -> EmbeddedDecoder:
        if self._decoder is None:
            config = type(self).decoder_config
            self._decoder = EmbeddedDecoder(config)
            log_event("embedded_decoder_created", log, strict=config.strict)
        return self._decoder

    # --- Serialization ---

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)

    @field_serializer("links", "embedded", mode="wrap")
    def _sorted_by_name(self, value: Dict[str, Any], handler) -> Dict[str, Any]:
        data = handler(value)
        out = {}
        for key in sorted(data):
            item = data[key]
            # mappings of resources are ordered by name as well
            if isinstance(value.get(key), Mapping) and isinstance(item, dict):
                item = {k: item[k] for k in sorted(item)}
            out[key] = item
        return out

    @model_serializer(mode="wrap")
    def _omit_empty_envelope(self, handler) -> Dict[str, Any]:
        data = handler(self)
        if not self.links:
            data.pop("_links", None)
            data.pop("links", None)
        if not self.embedded:
            data.pop("_embedded", None)
            data.pop("embedded", None)
        return data


__all__ = [
    "Link",
    "Hal",
    "Embedded",
    "EmbedSetter",
    "EmbedGetter",
    "Embedder",
]
