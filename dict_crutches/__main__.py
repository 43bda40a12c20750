"""Interface for ``python -m dict_crutches``."""

from __future__ import annotations

import json
import sys
from argparse import ArgumentParser
from pathlib import Path
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from argparse import Namespace
    from collections.abc import Sequence

from ._version import version
from .access import fetch_path_strict, get_path
from .exceptions import KeyNotFoundError


__all__ = ["main"]


def _load(file: str | None) -> Any:
    if file is None:
        return json.load(sys.stdin)
    with Path(file).open(encoding="utf-8") as handle:
        return json.load(handle)


def _get(options: Namespace) -> int:
    document = _load(options.file)
    if options.strict:
        try:
            value = fetch_path_strict(document, options.path, sep=options.sep)
        except KeyNotFoundError as error:
            print(f"key not found: {error.key}", file=sys.stderr)
            return 1
    else:
        value = get_path(document, options.path, sep=options.sep)
    print(json.dumps(value))
    return 0


def main(args: Sequence[str] | None = None) -> int:
    """Argument parser for the CLI."""
    parser = ArgumentParser(prog="dict_crutches")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    commands = parser.add_subparsers(dest="command")

    get_parser = commands.add_parser("get", help="print the JSON value at a key path")
    _ = get_parser.add_argument("path", help="delimited key path, e.g. counts.followed_by")
    _ = get_parser.add_argument("file", nargs="?", default=None, help="JSON document (default: stdin)")
    _ = get_parser.add_argument("--sep", default=".", help="path separator (default: %(default)s)")
    _ = get_parser.add_argument("--strict", action="store_true", help="fail when the path does not resolve")
    get_parser.set_defaults(handler=_get)

    options = parser.parse_args(args)
    if options.command is None:
        parser.print_help()
        return 0
    return options.handler(options)


if __name__ == "__main__":
    sys.exit(main())
