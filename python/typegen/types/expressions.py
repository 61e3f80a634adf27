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
"""Structured Rust type expressions.

A type expression is one of four node kinds, mirroring the shapes the
translator distinguishes:

- ReferenceExpr: &T, &mut T, &'a T
- TupleExpr: (), (T,), (T, U)
- PathExpr: u32, std::string::String, Vec<T>, <T as Trait>::Output
- OtherExpr: everything else ([T; N], [T], fn(T) -> R, dyn Trait, *const T, !)

Nodes are immutable and hashable. to_token_string() renders a node in the
canonical printed form the shape recognizer matches against, e.g.
``Vec < Option < & 'a str > >`` or ``HashMap < String, u32 >``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class ReferenceExpr:
    """Borrowed reference &T, &mut T or &'a T.

    Attributes:
        referent: The borrowed type
        is_mutable: Whether this is a &mut borrow
        lifetime: Lifetime name without the leading quote, if annotated
    """

    referent: "TypeExpression"
    is_mutable: bool = False
    lifetime: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TupleExpr:
    """Tuple type. The empty tuple is the unit type ()."""

    elements: Tuple["TypeExpression", ...] = ()

    @property
    def is_unit(self) -> bool:
        return not self.elements


@dataclass(frozen=True, slots=True)
class PathExpr:
    """Named path with optional generic arguments.

    Attributes:
        path: The path text, segments joined by ``::`` (e.g. "std::vec::Vec")
        generic_args: Type arguments of the last segment, lifetimes excluded
        qself: The qualifying self type for ``<T as Trait>::Name`` paths
    """

    path: str
    generic_args: Tuple["TypeExpression", ...] = ()
    qself: Optional[str] = None

    @property
    def name(self) -> str:
        """Last path segment (``Vec`` for ``std::vec::Vec``)."""
        return self.path.rsplit("::", 1)[-1]


@dataclass(frozen=True, slots=True)
class OtherExpr:
    """Any structural shape the translator does not decompose.

    Attributes:
        kind: Short tag for the shape ("array", "slice", "fn", "dyn", ...)
        text: Source text of the type
    """

    kind: str
    text: str


TypeExpression = Union[ReferenceExpr, TupleExpr, PathExpr, OtherExpr]

UNIT = TupleExpr(())


def to_token_string(expr: TypeExpression) -> str:
    """Render a type expression in canonical printed form.

    Generic brackets get a single space on each side and commas are
    followed by one space. References keep their lifetime and ``mut``.
    """
    if isinstance(expr, ReferenceExpr):
        parts = ["&"]
        if expr.lifetime:
            parts.append(f"'{expr.lifetime}")
        if expr.is_mutable:
            parts.append("mut")
        parts.append(to_token_string(expr.referent))
        return " ".join(parts)

    if isinstance(expr, TupleExpr):
        if expr.is_unit:
            return "()"
        elems = ", ".join(to_token_string(e) for e in expr.elements)
        if len(expr.elements) == 1:
            return f"({elems},)"
        return f"({elems})"

    if isinstance(expr, PathExpr):
        head = expr.path
        if expr.qself is not None:
            head = f"< {expr.qself} > :: {expr.path}"
        if expr.generic_args:
            args = ", ".join(to_token_string(a) for a in expr.generic_args)
            return f"{head} < {args} >"
        return head

    return expr.text
