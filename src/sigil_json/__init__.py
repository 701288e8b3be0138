"""sigil-json — decoder for length-prefixed, sigil-tagged data."""

from .decoder import Decoder, decode, decode_one_or_many, iter_values
from .errors import (
    EncodingError,
    FramingError,
    NestingError,
    ShortReadError,
    SigilJSONError,
    StructuralError,
    UnknownSigilError,
    ValueFormatError,
)
from .lexer import Block, Cursor, take_block
from .render import dumps, to_python
from .values import Value, VArray, VBool, VNumber, VObject, VString, base64_blob

__all__ = [
    "Decoder",
    "decode",
    "decode_one_or_many",
    "iter_values",
    "Block",
    "Cursor",
    "take_block",
    "dumps",
    "to_python",
    "Value",
    "VArray",
    "VBool",
    "VNumber",
    "VObject",
    "VString",
    "base64_blob",
    "SigilJSONError",
    "FramingError",
    "ShortReadError",
    "EncodingError",
    "StructuralError",
    "ValueFormatError",
    "UnknownSigilError",
    "NestingError",
]
