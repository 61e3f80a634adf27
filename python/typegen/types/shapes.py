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
"""Recognizer for compound Rust wrapper types in printed form.

The recognizer matches a printed type expression against a fixed table of
wrapper shapes and extracts the type-argument substrings:

    Vec < T >          -> SEQUENCE, ("T",)
    Option < T >       -> OPTIONAL, ("T",)
    Result < T, E >    -> FALLIBLE, ("T",)      error type dropped
    HashMap < K, V >   -> MAP,      ("K", "V")  matched anywhere

Matching expects the canonical spacing produced by the Rust token printer
(a single space on each side of ``<`` and ``>``). Whitespace is not
normalized here; callers render text with to_token_string() first.

The pattern table is built once at import and never mutated, so it can be
read from any thread without locking.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

_OPENERS = "<(["
_CLOSERS = ">)]"


class CompoundShape(Enum):
    """Recognized wrapper shapes, valued by the Rust wrapper name."""

    SEQUENCE = "Vec"
    OPTIONAL = "Option"
    FALLIBLE = "Result"
    MAP = "HashMap"

    @property
    def wrapper(self) -> str:
        return self.value

    @property
    def arity(self) -> int:
        """Number of captured type arguments the shape renders."""
        return 2 if self is CompoundShape.MAP else 1


@dataclass(frozen=True, slots=True)
class ShapeMatch:
    """A recognized wrapper and its captured type-argument text.

    Attributes:
        shape: The wrapper shape
        args: Captured argument substrings, exactly ``shape.arity`` of them
    """

    shape: CompoundShape
    args: Tuple[str, ...]

    @property
    def inner(self) -> str:
        return self.args[0]


# Checked in declaration order; the first pattern that yields enough
# arguments wins.
SHAPE_PATTERNS: Mapping[CompoundShape, re.Pattern[str]] = MappingProxyType({
    CompoundShape.SEQUENCE: re.compile(r"^Vec < (.*) >\Z"),
    CompoundShape.OPTIONAL: re.compile(r"^Option < (.*) >"),
    CompoundShape.FALLIBLE: re.compile(r"^Result < (.*) >"),
    CompoundShape.MAP: re.compile(r"HashMap < (.*) >"),
})

WRAPPER_SHAPES: Mapping[str, CompoundShape] = MappingProxyType(
    {shape.wrapper: shape for shape in CompoundShape}
)


def _is_arrow(s: str, i: int) -> bool:
    return s[i] == ">" and i > 0 and s[i - 1] == "-"


def find_matching_bracket(s: str, start: int, open_b: str, close_b: str) -> int:
    """Find the index of the bracket closing the one at ``start``.

    The ``>`` of a ``->`` arrow is never treated as a closing bracket.

    Returns:
        Index of the matching bracket, or -1 if it is never closed
    """
    depth = 1
    for i in range(start + 1, len(s)):
        if s[i] == open_b:
            depth += 1
        elif s[i] == close_b and not _is_arrow(s, i):
            depth -= 1
            if depth == 0:
                return i
    return -1


def split_top_level(s: str) -> List[str]:
    """Split by comma, respecting nested brackets."""
    parts = []
    current = []
    depth = 0

    for i, c in enumerate(s):
        if c in _OPENERS:
            depth += 1
        elif c in _CLOSERS and not _is_arrow(s, i):
            depth -= 1
        elif c == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(c)

    if current:
        parts.append("".join(current))

    return parts


def _balanced_prefix(s: str) -> str:
    # A greedy capture can swallow closing brackets of an enclosing type;
    # cut at the first one that has no opener inside the capture.
    depth = 0
    for i, c in enumerate(s):
        if c in _OPENERS:
            depth += 1
        elif c in _CLOSERS and not _is_arrow(s, i):
            depth -= 1
            if depth < 0:
                return s[:i]
    return s


def split_type_arguments(s: str) -> List[str]:
    """Split captured generic-argument text into stripped arguments.

    Empty segments (a trailing comma, blank input) are dropped.

    Example:
        >>> split_type_arguments("String, Vec < (u8, u16) >")
        ['String', 'Vec < (u8, u16) >']
    """
    args = (part.strip() for part in split_top_level(_balanced_prefix(s)))
    return [arg for arg in args if arg]


def recognize_shape(text: str) -> Optional[ShapeMatch]:
    """Match printed type text against the wrapper shape table.

    Args:
        text: A type expression in canonical printed form

    Returns:
        The ShapeMatch for the first matching shape, or None
    """
    for shape, pattern in SHAPE_PATTERNS.items():
        m = pattern.search(text)
        if m is None:
            continue
        args = split_type_arguments(m.group(1))
        if len(args) < shape.arity:
            logger.debug(
                f"{shape.wrapper} pattern matched {text!r} but captured "
                f"{len(args)} argument(s), expected {shape.arity}"
            )
            continue
        return ShapeMatch(shape=shape, args=tuple(args[:shape.arity]))
    return None
