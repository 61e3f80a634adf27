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
"""Rust type expressions and their TypeScript translation.

Usage:
    >>> from typegen.types import parse_type_expression, translate
    >>>
    >>> # Printed text from the Rust token printer
    >>> translate("HashMap < String, Vec < u8 > >")
    'Record<string, Array<number>>'
    >>>
    >>> # Parsed expressions
    >>> translate(parse_type_expression("&'a (u8, bool)"))
    '[number, boolean]'
"""

from .expressions import (
    OtherExpr,
    PathExpr,
    ReferenceExpr,
    TupleExpr,
    TypeExpression,
    UNIT,
    to_token_string,
)
from .parser import RustTypeParser, TypeParseError, parse_type_expression
from .primitives import PRIMITIVE_TYPES, lookup_primitive
from .shapes import (
    SHAPE_PATTERNS,
    CompoundShape,
    ShapeMatch,
    recognize_shape,
    split_type_arguments,
)
from .translator import translate, translate_expr, translate_str

__all__ = [
    "OtherExpr",
    "PathExpr",
    "ReferenceExpr",
    "TupleExpr",
    "TypeExpression",
    "UNIT",
    "to_token_string",
    "RustTypeParser",
    "TypeParseError",
    "parse_type_expression",
    "PRIMITIVE_TYPES",
    "lookup_primitive",
    "SHAPE_PATTERNS",
    "CompoundShape",
    "ShapeMatch",
    "recognize_shape",
    "split_type_arguments",
    "translate",
    "translate_expr",
    "translate_str",
]
