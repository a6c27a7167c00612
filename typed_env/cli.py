# SPDX-License-Identifier: MIT
# Copyright (c) 2025 typed-env contributors

"""Command line tool for inspecting typed environment values.

Examples:
    typed-env show PORT:int32 DEBUG:bool=false --set PORT=8080
    typed-env get TIMEOUT --type float64 --default 2.5
    typed-env set GREETING hello --no-overwrite
"""

import argparse
import sys
from typing import Dict, List, Optional, Tuple

from .exceptions import EnvError, ParseError
from .scalar import ScalarKind, ScalarValue, format_scalar, parse_scalar
from .store import Declaration, EnvStore


def parse_declaration(text: str) -> Tuple[str, Declaration]:
    """Parse ``NAME:KIND`` or ``NAME:KIND=DEFAULT`` into a declaration.

    Raises:
        ValueError: If the text is malformed, the kind unknown, or the default
            does not parse as the kind
    """
    name, sep, rest = text.partition(":")
    if not sep or not name:
        raise ValueError(f"Invalid declaration {text!r}: expected NAME:KIND[=DEFAULT]")
    kind_name, has_default, default_text = rest.partition("=")
    kind = ScalarKind.from_name(kind_name)
    if not has_default:
        return name, kind
    try:
        return name, parse_scalar(default_text, kind)
    except ParseError as e:
        raise ValueError(f"Invalid default for {name}: {e}") from e


def _parse_assignment(text: str) -> Tuple[str, str]:
    name, sep, value = text.partition("=")
    if not sep:
        raise ValueError(f"Invalid assignment {text!r}: expected NAME=VALUE")
    return name, value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typed-env",
        description="Resolve typed values from environment variables",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    set_parser = subparsers.add_parser("set", help="Set an environment variable")
    set_parser.add_argument("name", help="Variable name")
    set_parser.add_argument("value", help="Raw value")
    set_parser.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Keep an existing value instead of replacing it",
    )

    show_parser = subparsers.add_parser("show", help="Resolve declarations and print them")
    show_parser.add_argument(
        "declarations",
        nargs="+",
        metavar="NAME:KIND[=DEFAULT]",
        help="Variable declaration, e.g. PORT:int32 or DEBUG:bool=false",
    )
    show_parser.add_argument(
        "--set",
        dest="assignments",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Set a variable before resolving (repeatable)",
    )

    get_parser = subparsers.add_parser("get", help="Resolve a single variable")
    get_parser.add_argument("name", help="Variable name")
    get_parser.add_argument("--type", dest="kind", default="text", help="Kind to parse as")
    get_parser.add_argument("--default", help="Fallback printed when the value is unset or invalid")

    return parser


def _run_set(store: EnvStore, args: argparse.Namespace) -> int:
    store.write(args.name, args.value, overwrite=not args.no_overwrite)
    print(f"{args.name} = {store.source.read_raw(args.name)}")
    return 0


def _run_show(store: EnvStore, args: argparse.Namespace) -> int:
    declarations: Dict[str, Declaration] = dict(parse_declaration(d) for d in args.declarations)
    for assignment in args.assignments:
        name, value = _parse_assignment(assignment)
        store.write(name, value)
    store.initialize(declarations)
    for name, display in store:
        print(f"{name} = {display}")
    return 0


def _run_get(store: EnvStore, args: argparse.Namespace) -> int:
    kind = ScalarKind.from_name(args.kind)
    deferred = store.resolve(args.name, kind)
    if args.default is not None:
        fallback = parse_scalar(args.default, kind)
        print(format_scalar(ScalarValue(kind, deferred.value_or(fallback.payload))))
        return 0
    print(format_scalar(ScalarValue(kind, deferred.get())))
    return 0


def main(argv: Optional[List[str]] = None, store: Optional[EnvStore] = None) -> int:
    """CLI entry point.

    Args:
        argv: Arguments (defaults to sys.argv[1:])
        store: Store to operate on (defaults to one over the process environment)

    Returns:
        Process exit code
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    store = store if store is not None else EnvStore()

    commands = {
        "set": _run_set,
        "show": _run_show,
        "get": _run_get,
    }

    try:
        return commands[args.command](store, args)
    except (EnvError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
