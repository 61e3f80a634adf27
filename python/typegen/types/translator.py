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
"""Translation of Rust type expressions into TypeScript types.

translate() is the single recursive entry point. It accepts either a parsed
TypeExpression or printed type text, plus a flag saying whether this is the
outermost type of a return position.

Dispatch order:

1. &T, &mut T        -> translate(T), flag unchanged
2. (T1, ..., Tn)     -> [t1, ..., tn], unit -> undefined
3. Path              -> printed text, re-dispatched as text
   qualified paths and other shapes -> any
4. Text              -> scalar table, then wrapper shapes, else unchanged

Wrapper renderings:

    Vec < T >          Array<T>
    Option < T >       T | null
    Result < T, E >    Error | T   (just T when the flag is set)
    HashMap < K, V >   Record<K, V>

A Result in return position is surfaced through the caller's own error
channel (a rejected promise, a thrown exception), so the outermost call
site asks to drop the union. Nested positions always keep it.

Translation never raises: unknown names pass through unchanged and
unsupported shapes degrade to ``any``.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from ..config import DEFAULT_CONFIG, TranslationConfig
from .expressions import (
    PathExpr,
    ReferenceExpr,
    TupleExpr,
    TypeExpression,
    to_token_string,
)
from .primitives import TS_NULL, lookup_primitive
from .shapes import WRAPPER_SHAPES, CompoundShape, recognize_shape

logger = logging.getLogger(__name__)

TypeInput = Union[TypeExpression, str]


def translate(
    expr: TypeInput,
    omit_top_level_result: bool = False,
    config: Optional[TranslationConfig] = None,
) -> str:
    """Translate a Rust type into a TypeScript type annotation.

    Args:
        expr: A parsed TypeExpression or printed type text
        omit_top_level_result: True when ``expr`` is the whole return type
            of a signature; a top-level Result then renders as its success
            type alone
        config: Translation options (default: DEFAULT_CONFIG)

    Returns:
        TypeScript type text, e.g. "Array<Error | number> | null"

    Example:
        >>> translate("Option < Vec < Result < u32, String > > >")
        'Array<Error | number> | null'
        >>> translate("Result < u32, String >", omit_top_level_result=True)
        'number'
    """
    return _translate(expr, omit_top_level_result, config or DEFAULT_CONFIG)


def translate_str(
    text: str,
    omit_top_level_result: bool = False,
    config: Optional[TranslationConfig] = None,
) -> str:
    """Translate printed type text (textual dispatch only)."""
    return _translate_str(text, omit_top_level_result, config or DEFAULT_CONFIG)


def translate_expr(
    expr: TypeExpression,
    omit_top_level_result: bool = False,
    config: Optional[TranslationConfig] = None,
) -> str:
    """Translate a parsed TypeExpression."""
    return _translate_expr(expr, omit_top_level_result, config or DEFAULT_CONFIG)


def _translate(expr: TypeInput, omit: bool, config: TranslationConfig) -> str:
    if isinstance(expr, str):
        return _translate_str(expr, omit, config)
    return _translate_expr(expr, omit, config)


def _translate_expr(expr: TypeExpression, omit: bool, config: TranslationConfig) -> str:
    # Borrowing has no TypeScript counterpart.
    if isinstance(expr, ReferenceExpr):
        return _translate_expr(expr.referent, omit, config)

    if isinstance(expr, TupleExpr):
        if expr.is_unit:
            return _translate_str("()", omit, config)
        elems = ", ".join(_translate_expr(e, False, config) for e in expr.elements)
        return f"[{elems}]"

    if isinstance(expr, PathExpr) and expr.qself is None:
        if config.structural_generics and expr.generic_args:
            shape = WRAPPER_SHAPES.get(expr.name)
            if shape is not None and len(expr.generic_args) >= shape.arity:
                return _render_shape(
                    shape, expr.generic_args[0], expr.generic_args[1:], omit, config
                )
        return _translate_str(to_token_string(expr), omit, config)

    logger.debug(
        f"No TypeScript mapping for {type(expr).__name__} "
        f"{to_token_string(expr)!r}, using {config.any_type!r}"
    )
    return config.any_type


def _translate_str(text: str, omit: bool, config: TranslationConfig) -> str:
    primitive = lookup_primitive(text, config.extra_primitives)
    if primitive is not None:
        return primitive

    match = recognize_shape(text)
    if match is None:
        if "<" in text:
            logger.debug(f"Passing through unrecognized generic type {text!r}")
        return text

    return _render_shape(match.shape, match.inner, match.args[1:], omit, config)


def _render_shape(
    shape: CompoundShape,
    first: TypeInput,
    rest: Sequence[TypeInput],
    omit: bool,
    config: TranslationConfig,
) -> str:
    """Assemble the TypeScript type for a recognized wrapper.

    Type arguments are always translated with the top-level flag cleared.
    """
    inner = _translate(first, False, config)

    if shape is CompoundShape.SEQUENCE:
        return f"Array<{inner}>"

    if shape is CompoundShape.OPTIONAL:
        return f"{inner} | {TS_NULL}"

    if shape is CompoundShape.FALLIBLE:
        if omit:
            return inner
        return f"{config.error_type} | {inner}"

    value = _translate(rest[0], False, config)
    return f"Record<{inner}, {value}>"
