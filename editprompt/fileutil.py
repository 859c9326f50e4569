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

"""File helpers used by the edit prompt.

All failures are raised as ``EditPromptError`` subclasses with the
underlying ``OSError`` chained.
"""

import contextlib
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Iterator, Optional, Type, Union

from editprompt.errors import CommitError, EditPromptError, PreconditionError, TempFileError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def stat_mode(path: PathLike) -> int:
    """Permission bits of an existing regular file.

    Raises:
        PreconditionError: If the file is missing, inaccessible or not a regular file
    """
    try:
        st = os.stat(path)
    except (OSError, ValueError) as e:
        # ValueError: path contains a NUL byte
        raise PreconditionError(f"Cannot access {path}: {e}", path=path, cause=e) from e

    if not stat.S_ISREG(st.st_mode):
        raise PreconditionError(f"Not a regular file: {path}", path=path)
    return stat.S_IMODE(st.st_mode)


def read_bytes(path: PathLike, error_cls: Type[EditPromptError] = PreconditionError) -> bytes:
    """Read a whole file, mapping ``OSError`` and ``ValueError`` to ``error_cls``."""
    try:
        return Path(path).read_bytes()
    except (OSError, ValueError) as e:
        raise error_cls(f"Cannot read {path}: {e}", path=path, cause=e) from e


def write_bytes(path: PathLike, data: bytes, mode: int) -> None:
    """Overwrite ``path`` in place and restore its permission bits.

    Not atomic: a failure mid-write can leave the file truncated.
    """
    try:
        with open(path, "wb") as f:
            f.write(data)
        os.chmod(path, mode)
    except OSError as e:
        raise CommitError(f"Cannot write {path}: {e}", path=path, cause=e) from e


def atomic_write_bytes(path: PathLike, data: bytes, mode: int) -> None:
    """Replace ``path`` with ``data`` via a sibling temp file and rename.

    On failure the original file is untouched and the sibling is removed.
    """
    target = Path(path)
    try:
        fd, tmp = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    except OSError as e:
        raise CommitError(f"Cannot write {path}: {e}", path=path, cause=e) from e

    try:
        with os.fdopen(fd, "wb") as f:
            fd = -1  # os.fdopen owns the fd now
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp, mode)
        os.replace(tmp, target)
    except OSError as e:
        if fd >= 0:
            os.close(fd)
        with contextlib.suppress(OSError):
            os.unlink(tmp)
        raise CommitError(f"Cannot write {path}: {e}", path=path, cause=e) from e


@contextlib.contextmanager
def scoped_temp_file(
    contents: bytes,
    prefix: str,
    suffix: str = "",
    directory: Optional[PathLike] = None,
) -> Iterator[Path]:
    """Create a temp file holding ``contents`` and delete it on exit.

    Yields:
        Path of the temp file

    Raises:
        TempFileError: If the file cannot be created or populated, or cannot
            be removed after the body completed normally. A removal failure
            after the body raised is only logged so the body's error wins.
    """
    try:
        fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=directory)
    except OSError as e:
        raise TempFileError(f"Cannot create temp file: {e}", cause=e) from e

    path = Path(name)
    completed = False
    try:
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(contents)
        except OSError as e:
            raise TempFileError(f"Cannot populate temp file {path}: {e}", path=path, cause=e) from e

        logger.debug(f"Created temp file {path} ({len(contents)} bytes)")
        yield path
        completed = True
    finally:
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug(f"Temp file {path} already removed")
        except OSError as e:
            if completed:
                raise TempFileError(
                    f"Cannot remove temp file {path}: {e}", path=path, cause=e
                ) from e
            logger.warning(f"Leaving temp file {path} behind: {e}")
