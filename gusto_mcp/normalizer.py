"""
Entity Normalizer

Table-driven translation between Gusto's wire schema (snake_case JSON) and
the adapter's domain schema (camelCase). Each entity is described once, as
an EntityMapping listing the wire fields it supports, and two generic
functions apply any mapping in either direction.

The two directions are deliberately asymmetric:

- from_wire is tolerant. Missing or null fields are simply absent from the
  result, unknown wire fields are dropped, and a nested value with an
  unexpected shape is carried through untouched. It never raises on
  upstream data, so new upstream fields cannot break reads.
- to_wire is strict about nulls. A field that is absent or None in the
  domain object is omitted from the wire body, never sent as null, so a
  partial update cannot clear data it did not mention.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

_CAMEL_BOUNDARY = re.compile(r"_([a-z0-9])")


def snake_to_camel(name: str) -> str:
    """Deterministic wire-to-domain field name: ``street_1`` -> ``street1``."""
    return _CAMEL_BOUNDARY.sub(lambda m: m.group(1).upper(), name)


class Entity(dict):
    """
    Immutable domain object.

    A plain dict for serialization purposes, but every mutating method
    raises TypeError. Each read produces a fresh Entity graph.
    """

    __slots__ = ()

    def _readonly(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError(f"{type(self).__name__} is immutable")

    __setitem__ = _readonly
    __delitem__ = _readonly
    clear = _readonly
    pop = _readonly
    popitem = _readonly
    setdefault = _readonly
    update = _readonly

    def __ior__(self, other: Any) -> Entity:
        raise TypeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> dict[str, Any]:
        return dict(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> Entity:
        return self


@dataclass(frozen=True)
class WireField:
    """One supported wire field, optionally normalized with a nested mapping."""

    wire: str
    nested: EntityMapping | None = None

    @property
    def domain(self) -> str:
        return snake_to_camel(self.wire)


@dataclass(frozen=True)
class EntityMapping:
    """Declarative description of one entity's supported wire fields."""

    name: str
    fields: tuple[WireField, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, name: str, *fields: str | WireField) -> EntityMapping:
        """Build a mapping; bare strings are wire names with no nested mapping."""
        return cls(
            name=name,
            fields=tuple(f if isinstance(f, WireField) else WireField(f) for f in fields),
        )

    @property
    def wire_names(self) -> tuple[str, ...]:
        return tuple(f.wire for f in self.fields)

    @property
    def domain_names(self) -> tuple[str, ...]:
        return tuple(f.domain for f in self.fields)


def nested(wire: str, mapping: EntityMapping) -> WireField:
    return WireField(wire, mapping)


# -----------------------------------------------------------------------------
# Wire -> Domain
# -----------------------------------------------------------------------------


def _value_from_wire(value: Any, mapping: EntityMapping | None) -> Any:
    if mapping is None:
        return value
    if isinstance(value, Mapping):
        return from_wire(mapping, value)
    if isinstance(value, list):
        return [
            from_wire(mapping, item) if isinstance(item, Mapping) else item
            for item in value
        ]
    return value


def from_wire(mapping: EntityMapping, raw: Mapping[str, Any] | None) -> Entity:
    """Normalize one wire object into a domain Entity."""
    if not isinstance(raw, Mapping):
        return Entity()

    result: dict[str, Any] = {}
    for f in mapping.fields:
        value = raw.get(f.wire)
        if value is None:
            continue
        result[f.domain] = _value_from_wire(value, f.nested)
    return Entity(result)


def from_wire_many(
    mapping: EntityMapping, raw_items: Iterable[Mapping[str, Any]] | None
) -> list[Entity]:
    """Normalize a wire array. Non-object elements are skipped."""
    if not raw_items or isinstance(raw_items, (str, bytes, Mapping)):
        return []
    return [from_wire(mapping, item) for item in raw_items if isinstance(item, Mapping)]


# -----------------------------------------------------------------------------
# Domain -> Wire
# -----------------------------------------------------------------------------


def _value_to_wire(value: Any, mapping: EntityMapping | None) -> Any:
    if mapping is None:
        return value
    if isinstance(value, Mapping):
        return to_wire(mapping, value)
    if isinstance(value, list):
        return [to_wire(mapping, item) if isinstance(item, Mapping) else item for item in value]
    return value


def to_wire(mapping: EntityMapping, domain: Mapping[str, Any]) -> dict[str, Any]:
    """
    Serialize a domain object for a request body.

    Fields that are absent or None are omitted, never emitted as null.
    Domain keys the mapping does not support are ignored.
    """
    body: dict[str, Any] = {}
    for f in mapping.fields:
        value = domain.get(f.domain)
        if value is None:
            continue
        body[f.wire] = _value_to_wire(value, f.nested)
    return body
