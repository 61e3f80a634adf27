# Copyright Rand Arete @ Ananke 2025
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================
"""Command-line entry point for typegen.

Usage:
    typegen TYPE [TYPE ...] [--top-level] [--structural] [--json]

Examples:
    typegen "Option<Vec<u32>>"
    typegen "Result<String, io::Error>" --top-level
    typegen "& 'a str" --raw
    typegen "HashMap<String, (u8, u8)>" --structural --json --kind struct --name Pairs
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import TranslationConfig
from .typedef import TypeDef
from .types.parser import TypeParseError, parse_type_expression
from .types.translator import TypeInput, translate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typegen",
        description="Translate Rust type signatures into TypeScript types",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("types", nargs="+", metavar="TYPE", help="Rust type expression")
    parser.add_argument(
        "--top-level",
        action="store_true",
        help="Treat each type as a whole return type (drop a top-level Result's error union)",
    )
    parser.add_argument(
        "--structural",
        action="store_true",
        help="Recognize wrappers from parsed generic arguments",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Translate the text as printed, without parsing it first",
    )
    parser.add_argument(
        "--primitive",
        action="append",
        default=[],
        metavar="RUST=TS",
        help="Extra scalar mapping, e.g. f64=number (repeatable)",
    )
    parser.add_argument("--json", action="store_true", help="Print TypeDef JSON records")
    parser.add_argument("--kind", default="type", help="TypeDef kind (default: type)")
    parser.add_argument("--name", help="TypeDef name (default: the input text)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _parse_primitives(pairs: List[str]) -> dict:
    primitives = {}
    for pair in pairs:
        rust, sep, ts = pair.partition("=")
        if not sep or not rust.strip() or not ts.strip():
            raise ValueError(f"Invalid --primitive '{pair}', expected RUST=TS")
        primitives[rust.strip()] = ts.strip()
    return primitives


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        primitives = _parse_primitives(args.primitive)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    config = TranslationConfig(
        extra_primitives=primitives,
        structural_generics=args.structural,
    )

    for text in args.types:
        expr: TypeInput = text
        if not args.raw:
            try:
                expr = parse_type_expression(text)
            except TypeParseError as e:
                print(f"error: {e}", file=sys.stderr)
                return 2

        if args.json:
            type_def = TypeDef.for_type(
                args.kind, args.name or text, expr, args.top_level, config
            )
            print(type_def.to_json())
        else:
            print(translate(expr, args.top_level, config))

        logger.debug(f"Translated {text!r}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
