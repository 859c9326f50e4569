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

"""Error types for the edit prompt.

Every failure of an edit session maps to one category:
- precondition: the target file is missing or unreadable
- temp_file: the scratch copy could not be created, read or removed
- editor: the external editor could not start or exited non-zero
- validation: the caller's rule rejected the new content
- commit: writing the new content back to the target failed
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ErrorCategory(str, Enum):
    """Categories of edit prompt failures."""

    PRECONDITION = "precondition"
    TEMP_FILE = "temp_file"
    EDITOR = "editor"
    VALIDATION = "validation"
    COMMIT = "commit"


class EditPromptError(Exception):
    """Base exception for all edit prompt errors."""

    category: ErrorCategory = ErrorCategory.PRECONDITION

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.path = str(path) if path is not None else None
        self.cause = cause

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "message": self.message,
            "path": self.path,
            "cause": repr(self.cause) if self.cause else None,
        }


class PreconditionError(EditPromptError):
    """Target file does not exist or cannot be inspected."""

    category = ErrorCategory.PRECONDITION


class TempFileError(EditPromptError):
    """Scratch file could not be created, populated, read or removed."""

    category = ErrorCategory.TEMP_FILE


class EditorError(EditPromptError):
    """External editor failed to launch or exited with a failure status."""

    category = ErrorCategory.EDITOR

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        cause: Optional[BaseException] = None,
        returncode: Optional[int] = None,
    ):
        super().__init__(message, path=path, cause=cause)
        self.returncode = returncode


class EditValidationError(EditPromptError):
    """Edited content was rejected by the caller's validation rule."""

    category = ErrorCategory.VALIDATION


class CommitError(EditPromptError):
    """Edited content could not be written back to the target file."""

    category = ErrorCategory.COMMIT
