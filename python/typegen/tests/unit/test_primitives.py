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
"""Unit tests for the Rust scalar table."""

import pytest

from typegen.types.primitives import (
    PRIMITIVE_TYPES,
    TS_BIGINT,
    TS_NUMBER,
    TS_STRING,
    lookup_primitive,
)


class TestPrimitiveTable:
    """Tests for the built-in scalar rows."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("()", "undefined"),
            ("i8", "number"),
            ("i16", "number"),
            ("i32", "number"),
            ("u8", "number"),
            ("u16", "number"),
            ("u32", "number"),
            ("i64", "BigInt"),
            ("u64", "BigInt"),
            ("i128", "BigInt"),
            ("u128", "BigInt"),
            ("isize", "BigInt"),
            ("usize", "BigInt"),
            ("bool", "boolean"),
            ("String", "string"),
            ("str", "string"),
            ("char", "string"),
            ("Object", "object"),
        ],
    )
    def test_lookup(self, token, expected):
        assert lookup_primitive(token) == expected

    def test_table_is_read_only(self):
        """The shared table cannot be modified."""
        with pytest.raises(TypeError):
            PRIMITIVE_TYPES["f64"] = TS_NUMBER  # type: ignore[index]

    def test_case_sensitive(self):
        assert lookup_primitive("string") is None
        assert lookup_primitive("U32") is None
        assert lookup_primitive("object") is None

    def test_floats_are_not_scalars(self):
        """Floats are not in the table and fall through to the caller."""
        assert lookup_primitive("f32") is None
        assert lookup_primitive("f64") is None


class TestStrSuffix:
    """Tests for borrowed string slices."""

    @pytest.mark.parametrize("token", ["& str", "& 'a str", "& 'static str", "& mut str"])
    def test_borrowed_slices(self, token):
        assert lookup_primitive(token) == TS_STRING

    def test_suffix_needs_separating_space(self):
        assert lookup_primitive("&str") is None
        assert lookup_primitive("MyStr") is None


class TestExtraPrimitives:
    """Tests for caller-supplied scalar rows."""

    def test_extra_row(self):
        assert lookup_primitive("f64", {"f64": "number"}) == TS_NUMBER

    def test_builtin_wins(self):
        assert lookup_primitive("u64", {"u64": "number"}) == TS_BIGINT

    def test_empty_extra(self):
        assert lookup_primitive("Uuid", {}) is None
