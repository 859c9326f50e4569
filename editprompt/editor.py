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

"""Interactive editor backends.

An editor is anything that can be handed a file path and blocks until the
user is done with it. ``ShellEditor`` runs an external program attached to
the current terminal; ``CallableEditor`` wraps a plain function.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Union

from editprompt.errors import EditorError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class Editor(ABC):
    """Opens a file for interactive editing."""

    @abstractmethod
    def edit(self, path: PathLike) -> None:
        """Edit the file at ``path`` and return once the user is done.

        Raises:
            Exception: Any failure aborts the surrounding edit session.
        """


@dataclass
class ShellEditor(Editor):
    """External editor command, e.g. ``vim`` or ``code --wait``."""

    command: str
    params: List[str] = field(default_factory=list)

    def argv(self, path: PathLike) -> List[str]:
        """Argument vector for editing ``path``: command, params, then the path."""
        return [self.command, *self.params, str(path)]

    def edit(self, path: PathLike) -> None:
        cmd = self.argv(path)
        logger.debug(f"Launching editor: {' '.join(cmd)}")

        try:
            # stdio is inherited so the user drives the editor directly
            completed = subprocess.run(cmd, check=False)
        except OSError as e:
            raise EditorError(
                f"Failed to launch editor '{self.command}': {e}", path=path, cause=e
            ) from e

        if completed.returncode != 0:
            raise EditorError(
                f"Editor '{self.command}' exited with status {completed.returncode}",
                path=path,
                returncode=completed.returncode,
            )


class CallableEditor(Editor):
    """Adapts a function taking the file path into an ``Editor``."""

    def __init__(self, func: Callable[[Path], None]):
        self.func = func

    def edit(self, path: PathLike) -> None:
        self.func(Path(path))

    def __repr__(self) -> str:
        return f"CallableEditor({self.func!r})"
