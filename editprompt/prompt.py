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

"""visudo-style edit prompt.

Sequence of an edit session:
1. Copy the target file to a temporary location.
2. Open the copy in the editor and wait for it to exit.
3. If the bytes did not change, return without touching anything.
4. Otherwise validate the new bytes with the caller's rule.
5. If validation passes, overwrite the target keeping its permission bits.

The target file is written only when the content changed and validation
passed. The temporary copy is removed on every path.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, NamedTuple, Optional, Union

from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape

from editprompt.config import EditPromptConfig, get_default_editor
from editprompt.editor import Editor
from editprompt.errors import EditPromptError, EditValidationError, TempFileError
from editprompt.fileutil import (
    atomic_write_bytes,
    read_bytes,
    scoped_temp_file,
    stat_mode,
    write_bytes,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Accepts by returning None or True; rejects by raising, or by returning
# False, a message string or an exception instance.
Validator = Callable[[bytes], Any]


class EditResult(NamedTuple):
    """Outcome of an edit session, unpackable as ``contents, changed, error``."""

    contents: Optional[bytes] = None
    changed: bool = False
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> bytes:
        """Return the final contents or raise the session's error."""
        if self.error is not None:
            raise self.error
        return self.contents or b""

    @classmethod
    def failure(cls, error: BaseException) -> "EditResult":
        return cls(contents=None, changed=False, error=error)


class EditTransaction(BaseModel):
    """Record of a single edit session."""

    path: str = Field(description="Target file path")
    mode: int = Field(description="Permission bits captured before editing")
    original: bytes = Field(description="Content before editing")
    temp_path: Optional[str] = Field(default=None, description="Scratch copy handed to the editor")
    new_contents: Optional[bytes] = Field(default=None, description="Content after editing")
    changed: bool = Field(default=False, description="Whether the editor changed the bytes")
    rejected: bool = Field(default=False, description="Whether validation refused the change")
    committed: bool = Field(default=False, description="Whether the target was overwritten")
    timestamp: datetime = Field(default_factory=datetime.now, description="Session start")


def _run_editor(editor: Editor, path: Path) -> Optional[Exception]:
    try:
        editor.edit(path)
    except Exception as e:
        return e
    return None


def _run_validator(validate: Validator, data: bytes) -> Optional[BaseException]:
    try:
        outcome = validate(data)
    except Exception as e:
        return e

    if outcome is None or outcome is True:
        return None
    if isinstance(outcome, BaseException):
        return outcome
    if isinstance(outcome, str):
        return EditValidationError(outcome or "Validation failed")
    if outcome is False:
        return EditValidationError("Validation failed")
    return None


class EditPrompt:
    """Interactive edit-validate-commit for a single file.

    Example:
        prompt = EditPrompt(editor=ShellEditor("vim"))
        contents, changed, error = prompt.edit("/etc/app.yaml", check_yaml)
    """

    def __init__(
        self,
        editor: Optional[Editor] = None,
        config: Optional[EditPromptConfig] = None,
        console: Optional[Console] = None,
    ):
        """Initialize the prompt.

        Args:
            editor: Editor to open files with (default: process-wide default
                editor, looked up on each call)
            config: Session settings
            console: Rich console for status lines (default: silent)
        """
        self.editor = editor
        self.config = config or EditPromptConfig()
        self.console = console
        self.last_transaction: Optional[EditTransaction] = None

    def edit(self, path: PathLike, validate: Validator) -> EditResult:
        """Run one edit session on ``path``.

        Args:
            path: Existing file to edit
            validate: Rule applied to the new bytes, only if they changed.
                Returning None or True accepts. Raising rejects with that
                exception. Returning False, an exception instance or ANY
                string rejects: a returned string is the rejection message,
                so wrap decoders and parsers that return text (e.g.
                ``lambda d: d.decode()``) in a function returning None.
                Other return values accept.

        Returns:
            EditResult with the final contents and changed flag, or with
            ``error`` set and no contents if anything failed
        """
        target = Path(path)
        editor = self.editor if self.editor is not None else get_default_editor()
        self.last_transaction = None

        try:
            result = self._edit(target, validate, editor)
        except EditPromptError as e:
            result = EditResult.failure(e)

        self._report(target, result)
        return result

    def _edit(self, target: Path, validate: Validator, editor: Editor) -> EditResult:
        mode = stat_mode(target)
        original = read_bytes(target)

        txn = EditTransaction(path=str(target), mode=mode, original=original)
        self.last_transaction = txn

        suffix = target.suffix if self.config.keep_suffix else ""
        editor_error: Optional[Exception] = None
        try:
            with scoped_temp_file(
                original,
                prefix=self.config.temp_prefix,
                suffix=suffix,
                directory=self.config.temp_dir,
            ) as tmp_path:
                txn.temp_path = str(tmp_path)

                editor_error = _run_editor(editor, tmp_path)
                if editor_error is None:
                    new_contents = read_bytes(tmp_path, TempFileError)
        except TempFileError as e:
            if editor_error is None:
                raise
            logger.warning(f"Temp file cleanup failed after editor error: {e}")

        if editor_error is not None:
            logger.debug(f"Editor failed for {target}: {editor_error}")
            return EditResult.failure(editor_error)

        txn.new_contents = new_contents
        if new_contents == original:
            logger.debug(f"No changes to {target}")
            return EditResult(contents=new_contents, changed=False)

        txn.changed = True
        error = _run_validator(validate, new_contents)
        if error is not None:
            txn.rejected = True
            logger.warning(f"Rejected changes to {target}: {error}")
            return EditResult.failure(error)

        if self.config.atomic_commit:
            atomic_write_bytes(target, new_contents, mode)
        else:
            write_bytes(target, new_contents, mode)
        txn.committed = True

        logger.info(f"Saved {target} ({len(original)} -> {len(new_contents)} bytes)")
        return EditResult(contents=new_contents, changed=True)

    def _report(self, target: Path, result: EditResult) -> None:
        if self.console is None:
            return

        name = escape(str(target))
        if result.error is not None:
            label = "Changes rejected" if self._was_rejected() else "Edit failed"
            self.console.print(f"[bold red]✗ {label}:[/] {escape(str(result.error))}")
        elif result.changed:
            self.console.print(f"[bold green]✓ Saved:[/] {name}")
        else:
            self.console.print(f"[dim]No changes made to {name}[/]")

    def _was_rejected(self) -> bool:
        txn = self.last_transaction
        return txn is not None and txn.rejected


def edit(path: PathLike, validate: Validator, editor: Optional[Editor] = None) -> EditResult:
    """Edit ``path`` with the default settings. See ``EditPrompt.edit``."""
    return EditPrompt(editor=editor).edit(path, validate)
