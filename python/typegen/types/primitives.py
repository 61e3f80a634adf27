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
"""Rust scalar types and their TypeScript spellings."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

TS_UNDEFINED = "undefined"
TS_NUMBER = "number"
TS_BIGINT = "BigInt"
TS_BOOLEAN = "boolean"
TS_STRING = "string"
TS_OBJECT = "object"
TS_NULL = "null"

PRIMITIVE_TYPES: Mapping[str, str] = MappingProxyType({
    "()": TS_UNDEFINED,
    # Integers that fit in a double
    "i8": TS_NUMBER,
    "i16": TS_NUMBER,
    "i32": TS_NUMBER,
    "u8": TS_NUMBER,
    "u16": TS_NUMBER,
    "u32": TS_NUMBER,
    # 64-bit, 128-bit and pointer-sized integers
    "i64": TS_BIGINT,
    "u64": TS_BIGINT,
    "i128": TS_BIGINT,
    "u128": TS_BIGINT,
    "isize": TS_BIGINT,
    "usize": TS_BIGINT,
    "bool": TS_BOOLEAN,
    "String": TS_STRING,
    "str": TS_STRING,
    "char": TS_STRING,
    "Object": TS_OBJECT,
})

# Only a borrowed slice such as "& 'a str" or "& str" ends with " str".
STR_SUFFIX = " str"


def lookup_primitive(
    token: str, extra: Optional[Mapping[str, str]] = None
) -> Optional[str]:
    """Return the TypeScript type for a scalar token, or None.

    The built-in table wins over ``extra``; the ``str`` suffix rule is
    checked last.
    """
    if token in PRIMITIVE_TYPES:
        return PRIMITIVE_TYPES[token]
    if extra and token in extra:
        return extra[token]
    if token.endswith(STR_SUFFIX):
        return TS_STRING
    return None
