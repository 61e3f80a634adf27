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
"""Configuration for Rust to TypeScript type translation.

TranslationConfig controls the few renderings that vary between callers:

- extra_primitives: additional scalar spellings (e.g. f64 -> number)
- structural_generics: recognize wrappers from parsed generic arguments
  instead of the printed text
- error_type: the union member used for nested Result types
- any_type: rendering for shapes with no TypeScript mapping
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class TranslationConfig:
    """Options for translate().

    Attributes:
        extra_primitives: Exact-match scalar rows consulted after the
            built-in table (default: none)
        structural_generics: When True, a parsed PathExpr whose last segment
            is a recognized wrapper is decomposed from its generic arguments,
            so nested tuples and references translate structurally
            (default: False, the printed text is re-dispatched)
        error_type: TypeScript type joined with a nested Result's success
            type (default: "Error")
        any_type: Rendering for unsupported structural shapes such as fn
            pointers, trait objects and arrays (default: "any")

    Example:
        >>> from typegen import translate
        >>> config = TranslationConfig(extra_primitives={"f64": "number"})
        >>> translate("Vec < f64 >", config=config)
        'Array<number>'
    """

    extra_primitives: Mapping[str, str] = field(default_factory=dict)
    structural_generics: bool = False
    error_type: str = "Error"
    any_type: str = "any"

    def __post_init__(self) -> None:
        # Shared across threads, so freeze the mapping too.
        object.__setattr__(
            self, "extra_primitives", MappingProxyType(dict(self.extra_primitives))
        )

    def __hash__(self) -> int:
        return hash(
            (
                tuple(sorted(self.extra_primitives.items())),
                self.structural_generics,
                self.error_type,
                self.any_type,
            )
        )

    @classmethod
    def default(cls) -> "TranslationConfig":
        """Configuration matching the printed-text translation rules."""
        return DEFAULT_CONFIG

    @classmethod
    def structural(cls, **kwargs: Any) -> "TranslationConfig":
        """Create a config that recognizes wrappers from parsed generics.

        Args:
            **kwargs: Additional config overrides
        """
        return cls(structural_generics=True, **kwargs)

    def with_primitives(self, **primitives: str) -> "TranslationConfig":
        """Return a copy with additional scalar rows."""
        merged = dict(self.extra_primitives)
        merged.update(primitives)
        return replace(self, extra_primitives=merged)


DEFAULT_CONFIG = TranslationConfig()
