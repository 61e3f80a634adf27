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
"""Unit tests for TypeDef records."""

import json

import pytest

from typegen.config import TranslationConfig
from typegen.typedef import ToTypeDef, TypeDef
from typegen.types.parser import parse_type_expression


class TestTypeDef:
    """Tests for TypeDef serialization."""

    def test_to_json(self):
        td = TypeDef(kind="struct", name="User", definition="{ id: number }")
        assert td.to_json() == '{"kind": "struct", "name": "User", "def": "{ id: number }"}'

    def test_str_is_json(self):
        td = TypeDef("fn", "load", "Promise<string>")
        assert str(td) == td.to_json()

    def test_escaping(self):
        """Quotes in a definition do not break the record."""
        td = TypeDef("enum", "Kind", '"a" | "b"')
        assert json.loads(td.to_json())["def"] == '"a" | "b"'

    def test_for_type_text(self):
        td = TypeDef.for_type("field", "tags", "Vec < String >")
        assert td == TypeDef("field", "tags", "Array<string>")

    def test_for_type_top_level(self):
        expr = parse_type_expression("Result<Vec<u8>, io::Error>")
        assert TypeDef.for_type("fn", "read", expr).definition == "Error | Array<number>"
        assert TypeDef.for_type("fn", "read", expr, True).definition == "Array<number>"

    def test_for_type_config(self):
        config = TranslationConfig(extra_primitives={"f64": "number"})
        assert TypeDef.for_type("field", "score", "f64", config=config).definition == "number"

    def test_frozen(self):
        td = TypeDef("struct", "User", "object")
        with pytest.raises(AttributeError):
            td.name = "Other"  # type: ignore[misc]


class TestToTypeDef:
    """Tests for the ToTypeDef protocol."""

    def test_runtime_checkable(self):
        class Field:
            def __init__(self, name, ty):
                self.name = name
                self.ty = ty

            def to_type_def(self) -> TypeDef:
                return TypeDef.for_type("field", self.name, self.ty)

        field = Field("id", "u32")
        assert isinstance(field, ToTypeDef)
        assert field.to_type_def().definition == "number"

    def test_non_conforming(self):
        assert not isinstance(object(), ToTypeDef)
