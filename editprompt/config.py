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

"""Editor resolution and edit prompt settings.

The default editor comes from the ``EDITOR`` environment variable. Its value
is split on single spaces only: tabs are not separators, and runs of spaces
work only because empty tokens are dropped after the split.
"""

import logging
import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field

from editprompt.editor import Editor, ShellEditor

logger = logging.getLogger(__name__)

EDITOR_ENV_VAR = "EDITOR"
FALLBACK_EDITOR = "vi"


class EditPromptConfig(BaseModel):
    """Settings for an edit session."""

    temp_prefix: str = Field(default="edit-prompt-", description="Prefix of the scratch file name")
    keep_suffix: bool = Field(
        default=True, description="Give the scratch file the target's extension"
    )
    temp_dir: Optional[str] = Field(
        default=None, description="Directory for scratch files (default: system temp dir)"
    )
    atomic_commit: bool = Field(
        default=False, description="Commit via temp file and rename instead of in-place write"
    )


def parse_editor_command(value: Optional[str]) -> Optional[ShellEditor]:
    """Parse an ``EDITOR``-style string into a ``ShellEditor``.

    Args:
        value: Raw command line, e.g. ``"code --wait"``

    Returns:
        The editor, or None if the value holds no command
    """
    if not value:
        return None

    parts: List[str] = []
    for part in value.split(" "):
        part = part.strip()
        if part:
            parts.append(part)

    if not parts:
        return None
    return ShellEditor(command=parts[0], params=parts[1:])


def resolve_default_editor(environ: Optional[Mapping[str, str]] = None) -> ShellEditor:
    """Build the editor named by ``EDITOR``, falling back to ``vi``."""
    env = os.environ if environ is None else environ
    editor = parse_editor_command(env.get(EDITOR_ENV_VAR))
    if editor is None:
        logger.debug(f"${EDITOR_ENV_VAR} not usable, falling back to {FALLBACK_EDITOR}")
        return ShellEditor(command=FALLBACK_EDITOR, params=[])
    return editor


_default_editor: Editor = resolve_default_editor()


def get_default_editor() -> Editor:
    """Process-wide editor used when none is passed explicitly."""
    return _default_editor


def set_default_editor(editor: Editor) -> Editor:
    """Replace the process-wide editor.

    Returns:
        The editor that was previously installed
    """
    global _default_editor
    previous = _default_editor
    _default_editor = editor
    return previous
