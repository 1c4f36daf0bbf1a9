"""
Command line front end for multibasekit.

Usage:
    multibase encode base58_btc --text "hello"      # -> zCn8eVZg
    printf 'hello' | multibase encode base32_lower
    multibase decode zCn8eVZg                       # hex of the decoded bytes
    multibase decode zCn8eVZg --raw                 # raw decoded bytes
    multibase codec zCn8eVZg                        # -> base58_btc
    multibase encodings --family base64

Exits 0 on success and 1 on any multibase error (message on stderr).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .dispatch import Dispatcher, default_dispatcher
from .exceptions import MultibaseError

logger = logging.getLogger(__name__)


def _emit(data: bytes) -> None:
    out = sys.stdout.buffer
    out.write(data + b"\n")
    out.flush()


def _read_stdin() -> bytes:
    return sys.stdin.buffer.read()


def _strip_line_end(data: bytes) -> bytes:
    """Drop one trailing line terminator, as left by `echo` or a text editor."""
    if data.endswith(b"\r\n"):
        return data[:-2]
    if data.endswith(b"\n"):
        return data[:-1]
    return data


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multibase",
        description="Encode and decode self-describing (multibase) strings.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="Encode bytes with the given encoding id.")
    enc.add_argument("encoding", help="Encoding id, e.g. 'base58_btc'.")
    source = enc.add_mutually_exclusive_group()
    source.add_argument("--hex", dest="hex_data", help="Input given as hex instead of stdin.")
    source.add_argument("--text", help="Input given as UTF-8 text instead of stdin.")

    dec = sub.add_parser("decode", help="Decode a multibase string (argument or stdin).")
    dec.add_argument("string", nargs="?", help="Multibase string; read from stdin when omitted.")
    dec.add_argument("--raw", action="store_true", help="Write raw bytes instead of hex.")
    dec.add_argument(
        "--no-strip",
        action="store_true",
        help="Keep a trailing newline read from stdin as part of the string.",
    )

    cod = sub.add_parser("codec", help="Print the encoding id named by the prefix.")
    cod.add_argument("string", help="Multibase string.")

    lst = sub.add_parser("encodings", help="List encoding ids.")
    lst.add_argument("--family", help="Only ids in this encoding family.")
    lst.add_argument("--families", action="store_true", help="List family ids instead.")
    return parser


def _run(args: argparse.Namespace, dispatcher: Dispatcher) -> None:
    if args.command == "encode":
        if args.hex_data is not None:
            data = bytes.fromhex(args.hex_data)
        elif args.text is not None:
            data = args.text.encode("utf-8")
        else:
            data = _read_stdin()
        _emit(dispatcher.encode(data, args.encoding))

    elif args.command == "decode":
        if args.string is not None:
            string = args.string
        else:
            string = _read_stdin()
            if not args.no_strip:
                string = _strip_line_end(string)
        data = dispatcher.decode(string)
        _emit(data if args.raw else data.hex().encode("ascii"))

    elif args.command == "codec":
        _emit(dispatcher.codec(args.string).encode("ascii"))

    elif args.command == "encodings":
        if args.families:
            names = sorted(dispatcher.encoding_families())
        elif args.family:
            names = list(dispatcher.encodings_for(args.family))
        else:
            names = list(dispatcher.encodings())
        _emit("\n".join(names).encode("ascii"))


def main(argv: Sequence[str] | None = None, *, dispatcher: Dispatcher | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        _run(args, dispatcher or default_dispatcher)
    except MultibaseError as err:
        logger.debug("multibase command failed", exc_info=True)
        print(f"error: {err}", file=sys.stderr)
        return 1
    except ValueError as err:
        # bad --hex input
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
