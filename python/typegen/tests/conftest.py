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
"""Pytest configuration for typegen tests.

Puts the ``python`` source directory on sys.path so the tests run from a
plain checkout as well as from an installed package.
"""

import sys
from pathlib import Path

import pytest

python_dir = Path(__file__).parent.parent.parent
if str(python_dir) not in sys.path:
    sys.path.insert(0, str(python_dir))

from typegen.config import TranslationConfig  # noqa: E402


@pytest.fixture
def default_config() -> TranslationConfig:
    return TranslationConfig.default()


@pytest.fixture
def structural_config() -> TranslationConfig:
    return TranslationConfig.structural()
