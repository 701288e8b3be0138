"""Error taxonomy for sigil-json decoding."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator


class SigilJSONError(Exception):
    """Base class for all decode failures.

    Errors collect context annotations while they propagate outwards, so
    ``str(err)`` reads as a causal chain, outermost step first::

        reading block 0: destructuring object: reading block 1: short read, wanted: 10, got: 5
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.context: list[str] = []

    def add_context(self, message: str) -> None:
        self.context.append(message)

    def chain(self) -> list[str]:
        return [*reversed(self.context), self.message]

    def __str__(self) -> str:
        return ": ".join(self.chain())


class FramingError(SigilJSONError):
    pass


class ShortReadError(SigilJSONError):
    def __init__(self, wanted: int, got: int) -> None:
        super().__init__(f"short read, wanted: {wanted}, got: {got}")
        self.wanted = wanted
        self.got = got


class EncodingError(SigilJSONError):
    pass


class StructuralError(SigilJSONError):
    pass


class ValueFormatError(SigilJSONError):
    pass


class UnknownSigilError(SigilJSONError):
    def __init__(self, sigil: bytes, data: bytes) -> None:
        super().__init__(
            f"unimplemented: {sigil.decode('latin-1')} "
            f"({data.decode('utf-8', errors='replace')!r})"
        )
        self.sigil = sigil
        self.data = data


class NestingError(SigilJSONError):
    pass


@contextmanager
def annotate(message: str) -> Iterator[None]:
    """Add *message* to any SigilJSONError raised inside the block."""
    try:
        yield
    except SigilJSONError as exc:
        exc.add_context(message)
        raise
    except OSError as exc:
        err = FramingError(f"i/o error: {exc}")
        err.add_context(message)
        raise err from exc
