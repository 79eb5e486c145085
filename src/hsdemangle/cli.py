from __future__ import annotations

import argparse
import logging
import sys
from typing import List, TextIO

from hsdemangle.decoder import demangle
from hsdemangle.error import DemangleError
from hsdemangle.symbol import demangle_symbol

LOG = logging.getLogger(__name__)

PROMPT = "> "
DECODE_ERROR_MESSAGE = "Demangler error!"
READ_ERROR_MESSAGE = "failed to read input"


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="hsdemangle",
        description="Demangle Z-encoded GHC symbol names read from stdin, one per line",
    )
    parser.add_argument(
        "symbols",
        nargs="*",
        help="Symbols to demangle instead of reading standard input",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON document with the symbol components per line",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    symbols: List[str] = args.symbols
    if symbols:
        for symbol in symbols:
            emit(symbol + "\n", args.json, sys.stdout)
        return

    demangle_stream(sys.stdin, sys.stdout, args.json)


def demangle_stream(stream: TextIO, out: TextIO, as_json: bool = False) -> None:
    interactive = stream.isatty()
    while True:
        if interactive:
            out.write(PROMPT)
            out.flush()
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            LOG.debug("read from %r failed", stream, exc_info=True)
            print(f"{READ_ERROR_MESSAGE}: {e}", file=sys.stderr)
            sys.exit(1)
        if not line:
            LOG.debug("end of input")
            return
        emit(line, as_json, out)


def emit(line: str, as_json: bool, out: TextIO) -> None:
    try:
        if as_json:
            out.write(demangle_symbol(line.rstrip("\r\n")).model_dump_json() + "\n")
        else:
            out.write(demangle(line))
    except DemangleError as e:
        LOG.debug("could not demangle %r: %s", line, e)
        print(DECODE_ERROR_MESSAGE, file=out)
        out.flush()
        sys.exit(1)


if __name__ == "__main__":
    main()
