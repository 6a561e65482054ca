"""Filesystem backend over the host operating system.

This module provides the production implementation of the FileSystem
protocol. RealFileSystem wraps standard library operations and reports
failures as FileOpsError, keeping the operating system's error domain and
code so callers can normalize them.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
import stat
from pathlib import Path

from pathops.errors import ErrorKind, FileOpsError, translate_os_error

logger = logging.getLogger(__name__)

# Mode for created directories (before umask).
DEFAULT_DIR_MODE = 0o777

# Codes meaning "nothing there" for a stat query.
_ABSENT_CODES = frozenset({errno.ENOENT, errno.ENOTDIR, errno.ELOOP})


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library os, Path and shutil operations.
    Satisfies the FileSystem protocol structurally.

    Stat queries report a path that cannot be inspected as an error rather
    than as absent. ``copy_item`` and ``move_item`` never replace an
    existing destination: ``shutil.copy2`` and POSIX rename overwrite files
    silently.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists (dangling symlinks included)."""
        return self._stat(path, follow_symlinks=False) is not None

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        st = self._stat(path)
        return st is not None and stat.S_ISREG(st.st_mode)

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        st = self._stat(path)
        return st is not None and stat.S_ISDIR(st.st_mode)

    def copy_item(self, src: Path, dst: Path) -> None:
        """Copy a file or directory tree to a new path."""
        self._check_destination(dst)
        logger.debug("Copying %s to %s", src, dst)
        try:
            if self._is_real_dir(src):
                shutil.copytree(src, dst, symlinks=True)
            else:
                shutil.copy2(src, dst, follow_symlinks=False)
        except OSError as e:
            raise translate_os_error(e) from e

    def move_item(self, src: Path, dst: Path) -> None:
        """Move a file or directory tree to a new path."""
        self._check_destination(dst)
        logger.debug("Moving %s to %s", src, dst)
        try:
            shutil.move(str(src), str(dst))
        except OSError as e:
            raise translate_os_error(e) from e

    def remove_item(self, path: Path) -> None:
        """Remove a file, symlink or directory tree."""
        logger.debug("Removing %s", path)
        try:
            if self._is_real_dir(path):
                shutil.rmtree(path)
            else:
                path.unlink()
        except OSError as e:
            # rmtree names the entry that failed; keep it.
            raise translate_os_error(e, path if e.filename is None else None) from e

    def create_directory(self, path: Path, recursive: bool = False) -> None:
        """Create a directory."""
        try:
            path.mkdir(mode=DEFAULT_DIR_MODE, parents=recursive, exist_ok=False)
        except OSError as e:
            raise translate_os_error(e, path, missing=ErrorKind.PARENT_MISSING) from e

    def write_bytes(self, path: Path, data: bytes) -> None:
        """Write bytes to a file, truncating it if it exists."""
        try:
            path.write_bytes(data)
        except OSError as e:
            raise translate_os_error(e, path, missing=ErrorKind.PARENT_MISSING) from e

    def _stat(self, path: Path, follow_symlinks: bool = True) -> os.stat_result | None:
        """Stat a path, returning None if nothing is there."""
        try:
            return os.stat(path) if follow_symlinks else os.lstat(path)
        except OSError as e:
            if e.errno in _ABSENT_CODES:
                return None
            raise translate_os_error(e, path) from e

    def _is_real_dir(self, path: Path) -> bool:
        """Check for a directory that is not a symlink."""
        st = self._stat(path, follow_symlinks=False)
        return st is not None and stat.S_ISDIR(st.st_mode)

    def _check_destination(self, dst: Path) -> None:
        """Refuse a destination that already exists."""
        if self.is_dir(dst):
            raise FileOpsError.destination_is_directory(dst)
        if self.exists(dst):
            raise FileOpsError.already_exists(dst)
