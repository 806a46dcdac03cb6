"""Decoded telemetry for a single poll cycle.

Values arriving from the datalink have no fixed type, so each one is wrapped
in a small variant: ``Number`` for JSON numbers, ``Flag`` for JSON booleans
and ``Raw`` for anything else the service happens to return (the vehicle
name is a string, for instance). Renderers ask for the variant they can draw
and get ``None`` both when the key is missing and when it has another shape.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Union


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Flag:
    value: bool


@dataclass(frozen=True)
class Raw:
    value: Any


Value = Union[Number, Flag, Raw]


def wrap(raw: Any) -> Value:
    """Classify one decoded JSON value."""
    # bool first: it is a subclass of int
    if isinstance(raw, bool):
        return Flag(raw)
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return Raw(raw)
        # NaN and the infinities cannot be drawn on any instrument
        if math.isfinite(value):
            return Number(value)
    return Raw(raw)


class Snapshot:
    """Read-only mapping of field key to :data:`Value`."""

    def __init__(self, values: Mapping[str, Value] | None = None) -> None:
        self._values: Mapping[str, Value] = MappingProxyType(dict(values or {}))

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> Snapshot:
        return cls({str(k): wrap(v) for k, v in payload.items()})

    def get(self, key: str) -> Value | None:
        return self._values.get(key)

    def number(self, key: str) -> float | None:
        v = self._values.get(key)
        if isinstance(v, Number):
            return v.value
        return None

    def flag(self, key: str) -> bool | None:
        v = self._values.get(key)
        if isinstance(v, Flag):
            return v.value
        return None

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Snapshot({dict(self._values)!r})"
