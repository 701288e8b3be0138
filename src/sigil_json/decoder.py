"""Value builder: interprets blocks by sigil and recurses into containers."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import BinaryIO, Iterator

from .errors import (
    EncodingError,
    NestingError,
    StructuralError,
    UnknownSigilError,
    ValueFormatError,
    annotate,
)
from .lexer import NEWLINE, Block, Cursor, take_block
from .values import Value, VArray, VBool, VNumber, VObject, VString, base64_blob

DEFAULT_MAX_DEPTH = 200

_NUMBER_RE = re.compile(rb"-?(0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?")

# ';' well-known value, '^' timestamp with nanos, '~' empty string
_TEXT_SIGILS = frozenset((b";", b"^", b"~"))


def _require_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        start = max(exc.start - 20, 0)
        window = data[start:start + 60].decode("utf-8", errors="replace")
        raise EncodingError(f"bad string: {window!r}...") from None


def _parse_number(data: bytes) -> VNumber:
    text = _require_text(data)
    m = _NUMBER_RE.fullmatch(data)
    if m is None:
        raise ValueFormatError(f"invalid number: {text[:60]!r}")
    if m.group(2) or m.group(3):
        number = Decimal(text)
        # rendered as a JSON float, which has no token for infinity
        if not math.isfinite(float(number)):
            raise ValueFormatError(f"number out of range: {text[:60]!r}")
        return VNumber(number)
    try:
        return VNumber(int(text))
    except ValueError:
        raise ValueFormatError(
            f"number out of range: {len(text)} digits, {text[:60]!r}..."
        ) from None


def _parse_bool(data: bytes) -> VBool:
    text = _require_text(data)
    if text == "true":
        return VBool(True)
    if text == "false":
        return VBool(False)
    raise ValueFormatError(f"invalid boolean: {text!r}")


def _pair_entries(parts: list[Value]) -> list[tuple[str, Value]]:
    if len(parts) % 2:
        raise StructuralError(f"odd number of parts in an object: {len(parts)}")
    entries = []
    for key, value in zip(parts[::2], parts[1::2]):
        if not isinstance(key, VString):
            raise StructuralError(f"invalid non-string key: {key!r}")
        entries.append((key.value, value))
    return entries


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------

class Decoder:
    """Decodes the sigil wire format into :mod:`sigil_json.values`.

    Container depth maps to Python call depth, so nesting beyond
    *max_depth* is refused before recursing.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth

    # -- Public entry points --------------------------------------------

    def decode(self, data: bytes) -> list[Value]:
        """Decode a whole buffer as a sequence of blocks."""
        return list(self._iter_range(Cursor(data), depth=0, sentinel=None))

    def iter_values(self, source: bytes | BinaryIO) -> Iterator[Value]:
        """Lazily yield top-level values from newline-separated documents."""
        cursor = Cursor(source)
        doc = 0
        while not cursor.at_end():
            with annotate(f"reading document {doc}"):
                yield from self._iter_range(cursor, depth=0, sentinel=NEWLINE)
            cursor.read_while(lambda b: b == NEWLINE)
            doc += 1

    def decode_one_or_many(self, source: bytes | BinaryIO) -> Value | list[Value]:
        values = list(self.iter_values(source))
        if len(values) == 1:
            return values[0]
        return values

    # -- Recursion ------------------------------------------------------

    def _iter_range(
        self, cursor: Cursor, depth: int, sentinel: bytes | None
    ) -> Iterator[Value]:
        count = 0
        while True:
            with annotate(f"reading block after {count} items"):
                block = take_block(cursor, sentinel)
            if block is None:
                return
            with annotate(f"reading block {count}"):
                value = self._interpret(block, depth)
            yield value
            count += 1

    def _decode_container(self, block: Block, depth: int) -> list[Value]:
        if depth >= self.max_depth:
            raise NestingError(f"nesting deeper than {self.max_depth} levels")
        return list(self._iter_range(Cursor(block.data), depth + 1, sentinel=None))

    def _interpret(self, block: Block, depth: int) -> Value:
        sigil, data = block.sigil, block.data

        if sigil == b"]":
            with annotate("destructuring array"):
                return VArray(self._decode_container(block, depth))

        if sigil == b"}":
            with annotate("destructuring object"):
                parts = self._decode_container(block, depth)
                return VObject(_pair_entries(parts))

        if sigil == b",":
            try:
                return VString(data.decode("utf-8"))
            except UnicodeDecodeError:
                return base64_blob(data)

        if sigil in _TEXT_SIGILS:
            with annotate(f"reading string type {sigil.decode('ascii')!r}"):
                return VString(_require_text(data))

        if sigil == b"#":
            with annotate("reading number"):
                return _parse_number(data)

        if sigil == b"!":
            with annotate("reading boolean"):
                return _parse_bool(data)

        raise UnknownSigilError(sigil, data)


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------

_default = Decoder()


def decode(data: bytes) -> list[Value]:
    return _default.decode(data)


def iter_values(source: bytes | BinaryIO) -> Iterator[Value]:
    return _default.iter_values(source)


def decode_one_or_many(source: bytes | BinaryIO) -> Value | list[Value]:
    return _default.decode_one_or_many(source)
