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
"""Parser from Rust type syntax to structured type expressions.

Accepts both compact source spelling (``Vec<&'a str>``) and the spaced
form printed by the Rust token printer (``Vec < & 'a str >``).

Supports:
- References: &T, &mut T, &'a T, &'a mut T
- Tuples and unit: (), (T,), (T, U)
- Paths: u32, std::string::String, Vec<T>, HashMap<K, V>, Cow<'a, str>
- Qualified paths: <T as Trait>::Output
- Everything else is kept opaque: [T; N], [T], fn(T) -> R, dyn Trait,
  impl Trait, *const T, !, _
"""

from __future__ import annotations

import re
from typing import List, Tuple

from .expressions import (
    OtherExpr,
    PathExpr,
    ReferenceExpr,
    TupleExpr,
    TypeExpression,
    UNIT,
)
from .shapes import find_matching_bracket, split_top_level

_PATH_SEP = re.compile(r"\s*::\s*")
_PATH_CHARS = re.compile(r"^(::)?[A-Za-z_][A-Za-z0-9_]*(::[A-Za-z_][A-Za-z0-9_]*)*$")
_CONST_ARG = re.compile(r"^-?[0-9][0-9_]*([iu](8|16|32|64|128|size))?$")
# Associated type binding inside generic arguments: Item = u8
_BINDING = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*\s*=\s*\S")


class TypeParseError(Exception):
    """Error parsing a type annotation string."""

    def __init__(self, annotation: str, message: str):
        self.annotation = annotation
        self.message = message
        super().__init__(f"Failed to parse type '{annotation}': {message}")


class RustTypeParser:
    """Recursive-descent parser for Rust type expressions."""

    def parse(self, annotation: str) -> TypeExpression:
        """Parse a Rust type annotation string.

        Args:
            annotation: The type annotation string

        Returns:
            The parsed TypeExpression

        Raises:
            TypeParseError: If the text is empty or its brackets do not balance
        """
        annotation = annotation.strip()

        if not annotation:
            raise TypeParseError(annotation, "Empty annotation")

        return self._parse_type(annotation)

    def _parse_type(self, s: str) -> TypeExpression:
        s = s.strip()
        if not s:
            raise TypeParseError(s, "Expected a type")

        if s.startswith("&"):
            return self._parse_reference(s[1:])

        if s.startswith("*"):
            return OtherExpr("pointer", s)

        if s.startswith("["):
            self._require_closed(s, 0, "[", "]")
            return OtherExpr("array" if ";" in s else "slice", s)

        if s.startswith("("):
            return self._parse_tuple(s)

        if s.startswith("<"):
            return self._parse_qualified_path(s)

        if s == "!":
            return OtherExpr("never", s)

        if s == "_":
            return OtherExpr("infer", s)

        if re.match(r"^(unsafe|extern|fn)\b", s):
            return OtherExpr("fn", s)

        if s.startswith("dyn "):
            return OtherExpr("dyn", s)

        if s.startswith("impl "):
            return OtherExpr("impl", s)

        if re.match(r"^(Fn|FnMut|FnOnce)\s*\(", s):
            return OtherExpr("trait_object", s)

        return self._parse_path(s)

    def _parse_reference(self, rest: str) -> ReferenceExpr:
        """Parse the part after ``&``."""
        rest = rest.strip()
        lifetime = None
        is_mutable = False

        if rest.startswith("'"):
            m = re.match(r"^'([A-Za-z_][A-Za-z0-9_]*)\s*(.*)$", rest, re.DOTALL)
            if m is None or not m.group(2):
                raise TypeParseError(rest, "Expected type after lifetime")
            lifetime = m.group(1)
            rest = m.group(2)

        if re.match(r"^mut\b", rest):
            is_mutable = True
            rest = rest[3:].strip()

        return ReferenceExpr(
            referent=self._parse_type(rest),
            is_mutable=is_mutable,
            lifetime=lifetime,
        )

    def _parse_tuple(self, s: str) -> TypeExpression:
        """Parse (), (T,), (T, U) and the parenthesized type (T)."""
        paren_end = self._require_closed(s, 0, "(", ")")
        if paren_end != len(s) - 1:
            raise TypeParseError(s, "Unexpected text after ')'")

        content = s[1:paren_end].strip()
        if not content:
            return UNIT

        parts = split_top_level(content)
        elements = tuple(self._parse_type(p) for p in parts if p.strip())
        if len(elements) == 1 and not content.endswith(","):
            return OtherExpr("paren", s)
        return TupleExpr(elements)

    def _parse_qualified_path(self, s: str) -> PathExpr:
        """Parse ``<T as Trait>::Name``."""
        angle_end = self._require_closed(s, 0, "<", ">")
        qself = " ".join(s[1:angle_end].split())
        rest = s[angle_end + 1:].strip()
        if not rest.startswith("::"):
            raise TypeParseError(s, "Expected '::' after qualified self type")
        path = self._parse_path(rest[2:].strip())
        if not isinstance(path, PathExpr):
            raise TypeParseError(s, "Expected a path after '::'")
        return PathExpr(path=path.path, generic_args=path.generic_args, qself=qself)

    def _parse_path(self, s: str) -> TypeExpression:
        """Parse Name, a::b::Name, or Name<T, U>."""
        if "<" not in s:
            if _CONST_ARG.match(s):
                return OtherExpr("const", s)
            return PathExpr(path=self._normalize_path(s))

        angle_pos = s.index("<")
        name = self._normalize_path(s[:angle_pos])
        angle_end = self._require_closed(s, angle_pos, "<", ">")
        if s[angle_end + 1:].strip():
            # Associated item on a generic path (Vec<T>::Item): keep as one path.
            return PathExpr(path=" ".join(s.split()))

        args = self._parse_generic_args(s[angle_pos + 1:angle_end])
        return PathExpr(path=name, generic_args=args)

    def _parse_generic_args(self, s: str) -> Tuple[TypeExpression, ...]:
        args: List[TypeExpression] = []
        for arg in split_top_level(s):
            arg = arg.strip()
            if not arg or arg.startswith("'"):
                continue
            if _BINDING.match(arg):
                args.append(OtherExpr("binding", arg))
                continue
            args.append(self._parse_type(arg))
        return tuple(args)

    @staticmethod
    def _normalize_path(s: str) -> str:
        path = _PATH_SEP.sub("::", s.strip())
        if not _PATH_CHARS.match(path):
            raise TypeParseError(s, f"Cannot parse type: {s.strip()}")
        return path

    @staticmethod
    def _require_closed(s: str, start: int, open_b: str, close_b: str) -> int:
        end = find_matching_bracket(s, start, open_b, close_b)
        if end < 0:
            raise TypeParseError(s, f"Unmatched {open_b}")
        return end


_PARSER = RustTypeParser()


def parse_type_expression(annotation: str) -> TypeExpression:
    """Parse Rust type text into a TypeExpression.

    Example:
        >>> expr = parse_type_expression("&'a mut Vec<u8>")
        >>> expr.is_mutable, expr.lifetime, expr.referent.path
        (True, 'a', 'Vec')
    """
    return _PARSER.parse(annotation)
