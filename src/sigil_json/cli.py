"""Command-line front end: decode sigil-framed input and print JSON.

Usage::

    sigil-json [paths...] [--max-depth N] [--indent N | --compact] [-v]
    python -m sigil_json < dump.bin

With no paths (or ``-``) standard input is read.  Each top-level value is
written as one JSON document followed by a newline.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import IO, BinaryIO

from .decoder import DEFAULT_MAX_DEPTH, Decoder
from .errors import SigilJSONError
from .render import dumps

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="sigil-json",
        description="Decode length-prefixed, sigil-tagged data into JSON.",
    )
    ap.add_argument("paths", nargs="*", help="Input files (default: stdin, '-' also means stdin)")
    ap.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum container nesting (default: {DEFAULT_MAX_DEPTH})",
    )
    fmt = ap.add_mutually_exclusive_group()
    fmt.add_argument("--indent", type=int, default=2, help="JSON indent width (default: 2)")
    fmt.add_argument("--compact", action="store_true", help="Emit one-line JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return ap


def convert(source: BinaryIO, dest: IO[str], decoder: Decoder, indent: int | None) -> int:
    """Write every value in *source* to *dest*; returns the number written."""
    count = 0
    for value in decoder.iter_values(source):
        dest.write(dumps(value, indent=indent))
        dest.write("\n")
        dest.flush()
        count += 1
        logger.debug("wrote value %d", count)
    return count


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.max_depth < 1:
        logger.error("--max-depth must be at least 1")
        return 2
    decoder = Decoder(max_depth=args.max_depth)
    indent = None if args.compact else args.indent
    paths = args.paths or ["-"]

    for name in paths:
        label = "<stdin>" if name == "-" else name
        try:
            if name == "-":
                total = convert(sys.stdin.buffer, sys.stdout, decoder, indent)
            else:
                with Path(name).open("rb") as fh:
                    total = convert(fh, sys.stdout, decoder, indent)
        except SigilJSONError as exc:
            logger.error("%s: %s", label, exc)
            return 1
        except OSError as exc:
            logger.error("cannot read %s: %s", label, exc)
            return 2
        logger.debug("%s: %d value(s)", label, total)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
