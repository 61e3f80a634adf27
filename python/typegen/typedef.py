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
"""Type definition records handed to the declaration emitter.

A TypeDef pairs a declaration kind and name with the TypeScript type text
produced by translate(). Extractors for structs, enums and functions
implement ToTypeDef.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Dict, Optional, Protocol, runtime_checkable

from .config import TranslationConfig
from .types.translator import TypeInput, translate


@dataclass(frozen=True, slots=True)
class TypeDef:
    """A named TypeScript type definition.

    Attributes:
        kind: Declaration kind, e.g. "struct", "enum", "fn"
        name: Declaration name
        definition: TypeScript type text (serialized as "def")
    """

    kind: str
    name: str
    definition: str

    @classmethod
    def for_type(
        cls,
        kind: str,
        name: str,
        expr: TypeInput,
        omit_top_level_result: bool = False,
        config: Optional[TranslationConfig] = None,
    ) -> "TypeDef":
        """Build a TypeDef whose definition is the translation of ``expr``."""
        return cls(
            kind=kind,
            name=name,
            definition=translate(expr, omit_top_level_result, config),
        )

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind, "name": self.name, "def": self.definition}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()


@runtime_checkable
class ToTypeDef(Protocol):
    """Anything that can describe itself as a TypeDef."""

    def to_type_def(self) -> TypeDef:
        ...
