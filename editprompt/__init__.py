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

"""Safe interactive file editing for command line tools.

Opens a file in the user's editor, validates the result and writes it back
only when it changed and passed validation, in the manner of ``visudo``.

Package Structure:
    prompt.py     - EditPrompt orchestrator and edit() entry point
    editor.py     - Editor backends (ShellEditor, CallableEditor)
    config.py     - $EDITOR resolution, default editor, session settings
    fileutil.py   - Temp file scope and commit writers
    errors.py     - Error categories and exception types

Usage:
    from editprompt import edit

    def check(data: bytes) -> None:
        yaml.safe_load(data)

    contents, changed, error = edit("config.yaml", check)
"""

from editprompt.config import (
    EDITOR_ENV_VAR,
    FALLBACK_EDITOR,
    EditPromptConfig,
    get_default_editor,
    parse_editor_command,
    resolve_default_editor,
    set_default_editor,
)
from editprompt.editor import CallableEditor, Editor, ShellEditor
from editprompt.errors import (
    CommitError,
    EditorError,
    EditPromptError,
    EditValidationError,
    ErrorCategory,
    PreconditionError,
    TempFileError,
)
from editprompt.prompt import EditPrompt, EditResult, EditTransaction, edit

__all__ = [
    # Orchestrator
    "EditPrompt",
    "EditResult",
    "EditTransaction",
    "edit",
    # Editors
    "Editor",
    "ShellEditor",
    "CallableEditor",
    # Configuration
    "EDITOR_ENV_VAR",
    "FALLBACK_EDITOR",
    "EditPromptConfig",
    "get_default_editor",
    "set_default_editor",
    "parse_editor_command",
    "resolve_default_editor",
    # Errors
    "ErrorCategory",
    "EditPromptError",
    "PreconditionError",
    "TempFileError",
    "EditorError",
    "EditValidationError",
    "CommitError",
]

__version__ = "0.1.0"
