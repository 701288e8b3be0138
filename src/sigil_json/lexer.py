"""Block lexer: extracts ``<length>:<payload><sigil>`` frames from a byte cursor."""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass
from typing import BinaryIO, Callable

from .errors import FramingError, ShortReadError

NEWLINE = b"\n"

_SNIPPET_LEN = 50
_READ_CHUNK = 64 * 1024
_MAX_LENGTH_DIGITS = len(str(sys.maxsize))


@dataclass(frozen=True, slots=True)
class Block:
    sigil: bytes
    data: bytes


# ---------------------------------------------------------------------------
# Cursor
# ---------------------------------------------------------------------------

class Cursor:
    """Peekable byte cursor over a buffer or a binary stream.

    Streams are pulled lazily, so a caller can decode the first document of
    a pipe before the rest of it has arrived.
    """

    def __init__(self, source: bytes | bytearray | memoryview | BinaryIO) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self._stream = source
        self._pending = b""
        self.offset = 0

    def peek(self) -> bytes:
        """Next byte without consuming it, ``b""`` at end of input."""
        if not self._pending:
            self._pending = self._stream.read(1) or b""
        return self._pending

    def at_end(self) -> bool:
        return self.peek() == b""

    def read(self, n: int) -> bytes:
        """Consume up to *n* bytes; fewer only when the input runs out."""
        parts = []
        if n > 0 and self._pending:
            parts.append(self._pending)
            n -= 1
            self._pending = b""
        while n > 0:
            chunk = self._stream.read(min(n, _READ_CHUNK))
            if not chunk:
                break
            parts.append(chunk)
            n -= len(chunk)
        data = b"".join(parts)
        self.offset += len(data)
        return data

    def read_while(self, pred: Callable[[bytes], bool]) -> bytes:
        out = bytearray()
        while True:
            b = self.peek()
            if not b or not pred(b):
                return bytes(out)
            out += self.read(1)


def _is_digit(b: bytes) -> bool:
    return b"0" <= b <= b"9"


def _snippet(cursor: Cursor) -> str:
    return cursor.read(_SNIPPET_LEN).decode("utf-8", errors="replace")


# ---------------------------------------------------------------------------
# take_block
# ---------------------------------------------------------------------------

def take_block(cursor: Cursor, sentinel: bytes | None = NEWLINE) -> Block | None:
    """Read one framed block from *cursor*.

    Returns ``None`` when the input is exhausted or the next byte is
    *sentinel*; nothing is consumed in that case.
    """
    nxt = cursor.peek()
    if not nxt or (sentinel is not None and nxt == sentinel):
        return None

    digits = cursor.read_while(_is_digit)
    if not digits:
        raise FramingError(f"reading length near {_snippet(cursor)!r}")
    if len(digits) > _MAX_LENGTH_DIGITS or int(digits) > sys.maxsize:
        raise FramingError(
            f"length out of range: {digits[:_SNIPPET_LEN].decode('ascii')!r}"
            f" ({len(digits)} digits)"
        )
    length = int(digits)

    colon = cursor.read(1)
    if not colon:
        raise FramingError("eof in colon after length")
    if colon != b":":
        raise FramingError("missing colon after length")

    data = cursor.read(length)
    if len(data) != length:
        raise ShortReadError(wanted=length, got=len(data))

    sigil = cursor.read(1)
    if not sigil:
        raise FramingError(f"no trailing type after block of len: {length}")

    return Block(sigil=sigil, data=data)
