# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
#
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

"""Shared fixtures for editprompt tests."""

import pytest

from editprompt.config import EditPromptConfig, get_default_editor, set_default_editor

TEST_CONTENTS = b"Hello!"


@pytest.fixture(autouse=True)
def restore_default_editor():
    """Undo any swap of the process-wide editor made by a test."""
    previous = get_default_editor()
    yield
    set_default_editor(previous)


@pytest.fixture
def target_file(tmp_path):
    path = tmp_path / "target.txt"
    path.write_bytes(TEST_CONTENTS)
    return path


@pytest.fixture
def scratch_dir(tmp_path):
    path = tmp_path / "scratch"
    path.mkdir()
    return path


@pytest.fixture
def config(scratch_dir):
    return EditPromptConfig(temp_dir=str(scratch_dir))
