"""Value types for sigil-json."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from decimal import Decimal
from typing import Union


@dataclass(frozen=True, slots=True)
class VString:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class VNumber:
    value: int | Decimal

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(frozen=True, slots=True)
class VArray:
    items: tuple["Value", ...]

    def __init__(self, items=()) -> None:
        object.__setattr__(self, "items", tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


@dataclass(frozen=True, slots=True)
class VObject:
    """Object as an ordered list of (key, value) pairs.

    Duplicate keys are kept in ``entries``; lookups resolve them last-wins.
    """

    entries: tuple[tuple[str, "Value"], ...]

    def __init__(self, entries=()) -> None:
        object.__setattr__(self, "entries", tuple((k, v) for k, v in entries))

    def keys(self) -> list[str]:
        return [k for k, _ in self.entries]

    def get(self, key: str, default: "Value | None" = None) -> "Value | None":
        for k, v in reversed(self.entries):
            if k == key:
                return v
        return default

    def __len__(self) -> int:
        return len(self.entries)


Value = Union[VString, VNumber, VBool, VArray, VObject]


def base64_blob(raw: bytes) -> VObject:
    """Wrap bytes that are not valid text as ``{"base64": "..."}``."""
    return VObject([("base64", VString(base64.b64encode(raw).decode("ascii")))])
