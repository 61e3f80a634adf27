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
"""typegen: Rust type signatures to TypeScript type annotations.

typegen translates Rust type expressions, as printed by the Rust token
printer or parsed from source text, into the TypeScript types used for
generated client declarations.

Key Components:
    - types.expressions: Structured type expression nodes
    - types.parser: Rust type syntax parser
    - types.shapes: Wrapper shape recognizer (Vec, Option, Result, HashMap)
    - types.translator: The recursive translate() entry point
    - typedef: TypeDef records for the declaration emitter
    - config: TranslationConfig

Usage:
    >>> from typegen import translate
    >>> translate("Option < Vec < Result < u32, String > > >")
    'Array<Error | number> | null'
"""

__version__ = "0.1.0"

# Use lazy imports so ``python -m typegen`` and submodule tests stay light.


def __getattr__(name: str):
    """Lazy import of module attributes."""
    if name in ("translate", "translate_expr", "translate_str"):
        from .types.translator import translate, translate_expr, translate_str

        return locals()[name]

    if name in (
        "OtherExpr",
        "PathExpr",
        "ReferenceExpr",
        "TupleExpr",
        "UNIT",
        "to_token_string",
    ):
        from .types.expressions import (
            UNIT,
            OtherExpr,
            PathExpr,
            ReferenceExpr,
            TupleExpr,
            to_token_string,
        )

        return locals()[name]

    if name in ("RustTypeParser", "TypeParseError", "parse_type_expression"):
        from .types.parser import RustTypeParser, TypeParseError, parse_type_expression

        return locals()[name]

    if name in ("CompoundShape", "ShapeMatch", "recognize_shape"):
        from .types.shapes import CompoundShape, ShapeMatch, recognize_shape

        return locals()[name]

    if name in ("TranslationConfig", "DEFAULT_CONFIG"):
        from .config import DEFAULT_CONFIG, TranslationConfig

        return locals()[name]

    if name in ("TypeDef", "ToTypeDef"):
        from .typedef import ToTypeDef, TypeDef

        return locals()[name]

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "translate",
    "translate_expr",
    "translate_str",
    "OtherExpr",
    "PathExpr",
    "ReferenceExpr",
    "TupleExpr",
    "UNIT",
    "to_token_string",
    "RustTypeParser",
    "TypeParseError",
    "parse_type_expression",
    "CompoundShape",
    "ShapeMatch",
    "recognize_shape",
    "TranslationConfig",
    "DEFAULT_CONFIG",
    "TypeDef",
    "ToTypeDef",
]
