"""Render decoded values as JSON."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from .values import Value, VArray, VBool, VNumber, VObject, VString


def to_python(value: Value) -> Any:
    """Convert a Value tree to plain JSON-ready Python objects.

    Decimals become floats; duplicate object keys resolve last-wins.
    """
    if isinstance(value, VString):
        return value.value
    if isinstance(value, VBool):
        return value.value
    if isinstance(value, VNumber):
        if isinstance(value.value, Decimal):
            return float(value.value)
        return value.value
    if isinstance(value, VArray):
        return [to_python(v) for v in value.items]
    if isinstance(value, VObject):
        return {k: to_python(v) for k, v in value.entries}
    raise TypeError(f"not a sigil-json value: {value!r}")


def dumps(value: Value, indent: int | None = 2) -> str:
    return json.dumps(to_python(value), indent=indent, ensure_ascii=False)
