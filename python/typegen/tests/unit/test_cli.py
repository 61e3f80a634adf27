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
"""Tests for the typegen command line."""

import json

import pytest

from typegen.cli import build_parser, main


class TestCli:
    """Tests for main()."""

    def test_translate_source(self, capsys):
        assert main(["Option<Vec<u32>>"]) == 0
        assert capsys.readouterr().out == "Array<number> | null\n"

    def test_multiple_types(self, capsys):
        assert main(["u8", "&str", "(bool, u64)"]) == 0
        assert capsys.readouterr().out.splitlines() == ["number", "string", "[boolean, BigInt]"]

    def test_top_level(self, capsys):
        assert main(["Result<String, Error>", "--top-level"]) == 0
        assert capsys.readouterr().out.strip() == "string"

    def test_raw_text(self, capsys):
        assert main(["& 'a str", "--raw"]) == 0
        assert capsys.readouterr().out.strip() == "string"

    def test_structural(self, capsys):
        assert main(["Vec<(u8, u8)>", "--structural"]) == 0
        assert capsys.readouterr().out.strip() == "Array<[number, number]>"

    def test_primitive_override(self, capsys):
        assert main(["Vec<f64>", "--primitive", "f64=number"]) == 0
        assert capsys.readouterr().out.strip() == "Array<number>"

    def test_invalid_primitive(self, capsys):
        assert main(["u8", "--primitive", "f64"]) == 2
        assert "expected RUST=TS" in capsys.readouterr().err

    def test_json(self, capsys):
        assert main(["HashMap<String, u8>", "--json", "--kind", "struct", "--name", "Counts"]) == 0
        record = json.loads(capsys.readouterr().out)
        assert record == {"kind": "struct", "name": "Counts", "def": "Record<string, number>"}

    def test_json_default_name(self, capsys):
        assert main(["u8", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == {"kind": "type", "name": "u8", "def": "number"}

    def test_parse_error(self, capsys):
        assert main(["Vec<u8"]) == 2
        assert "error: Failed to parse type" in capsys.readouterr().err

    def test_requires_type(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
