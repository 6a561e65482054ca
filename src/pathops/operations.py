"""Idempotent file operations.

The policy throughout is to succeed without doing anything when the
desired end result already exists: deleting a missing path and creating
an existing directory are noops. Copying is the exception: the content of
an existing destination is never compared, so a copy onto an existing file
fails unless ``overwrite`` is set, even if the file is already identical.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

from pathops.errors import FileOpsError, is_already_exists_error
from pathops.filesystem import RealFileSystem
from pathops.protocols import FileSystem
from pathops.types import MakeDirectoryOptions

logger = logging.getLogger(__name__)


class FileOps:
    """File operations over an injected filesystem backend.

    Follows Separate Use from Creation: constructor requires the backend.
    Use factory method `create()` for production instantiation with defaults.

    Every operation except ``delete`` returns the resulting path so calls
    can be chained::

        ops.copy_into(src, ops.mkdir(home / ".local" / "bin", "p"))
    """

    def __init__(self, filesystem: FileSystem) -> None:
        """Initialize with the filesystem backend.

        Args:
            filesystem: Filesystem abstraction (required).
        """
        self.fs = filesystem

    @classmethod
    def create(cls, filesystem: FileSystem | None = None) -> FileOps:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional backend (RealFileSystem if not provided).

        Returns:
            Configured FileOps instance.
        """
        return cls(filesystem=filesystem or RealFileSystem())

    @classmethod
    def create_default(cls) -> FileOps:
        """Create file operations over the host filesystem.

        Returns:
            FileOps backed by RealFileSystem.
        """
        return cls.create()

    def copy_to(self, src: Path, to: Path, overwrite: bool = False) -> Path:
        """Copy a file or directory to an exact destination path.

        Args:
            src: File or directory to copy.
            to: Destination path.
            overwrite: If True and both ``src`` and ``to`` are files,
                replace ``to``. Ignored if either side is a directory.

        Returns:
            ``to``.

        Raises:
            FileOpsError: DESTINATION_IS_DIRECTORY if ``to`` is a directory;
                ALREADY_EXISTS if ``to`` exists and is not overwritten, even
                when its content is already identical to ``src``.
        """
        if overwrite and self.fs.is_file(to) and self.fs.is_file(src):
            logger.debug("Overwriting %s", to)
            self.fs.remove_item(to)
        self.fs.copy_item(src, to)
        return to

    def copy_into(self, src: Path, into: Path, overwrite: bool = False) -> Path:
        """Copy a file or directory into a directory, keeping its name.

        ``into`` is created, with intermediate directories, if missing.

        Args:
            src: File or directory to copy.
            into: Destination directory.
            overwrite: If True, replace a file of the same name in ``into``.

        Returns:
            Path of the new copy (``into / src.name``).

        Raises:
            FileOpsError: DESTINATION_IS_FILE if ``into`` is a file;
                ALREADY_EXISTS if the destination file exists and
                ``overwrite`` is False.
        """
        if not self.fs.exists(into):
            logger.debug("Creating destination directory %s", into)
            self.fs.create_directory(into, recursive=True)
        elif not self.fs.is_dir(into):
            raise FileOpsError.destination_is_file(into)

        rv = into / src.name
        if self.fs.is_file(rv):
            # Some backends overwrite silently; refuse here for all of them.
            if not overwrite:
                raise FileOpsError.already_exists(rv)
            logger.debug("Overwriting %s", rv)
            self.delete(rv)
        self.fs.copy_item(src, rv)
        return rv

    def move_to(self, src: Path, to: Path, overwrite: bool = False) -> Path:
        """Move a file or directory to an exact destination path.

        Args:
            src: File or directory to move.
            to: Destination path.
            overwrite: If True, replace ``to`` if it is a file.

        Returns:
            ``to``.

        Raises:
            FileOpsError: DESTINATION_IS_DIRECTORY if ``to`` is a directory;
                ALREADY_EXISTS if ``to`` exists and is not overwritten.
        """
        if overwrite and self.fs.is_file(to):
            logger.debug("Overwriting %s", to)
            self.fs.remove_item(to)
        self.fs.move_item(src, to)
        return to

    def move_into(self, src: Path, into: Path, overwrite: bool = False) -> Path:
        """Move a file or directory into a directory, keeping its name.

        ``into`` is created with ``mkdir(into, "p")`` if missing.

        Args:
            src: File or directory to move.
            into: Destination directory.
            overwrite: If True, replace a file of the same name in ``into``.

        Returns:
            Path of the moved item (``into / src.name``).

        Raises:
            FileOpsError: DESTINATION_IS_FILE if ``into`` exists and is not
                a directory.
        """
        if not self.fs.exists(into):
            logger.debug("Creating destination directory %s", into)
            self.mkdir(into, MakeDirectoryOptions.P)
        elif not self.fs.is_dir(into):
            raise FileOpsError.destination_is_file(into)

        rv = into / src.name
        if overwrite and self.fs.is_file(rv):
            logger.debug("Overwriting %s", rv)
            self.fs.remove_item(rv)
        self.fs.move_item(src, rv)
        return rv

    def delete(self, path: Path) -> None:
        """Delete a path, recursively if it is a directory.

        Noop if the path does not exist. Permission and lock failures
        propagate.

        Args:
            path: Path to delete.
        """
        if not self.fs.exists(path):
            logger.debug("Nothing to delete at %s", path)
            return
        self.fs.remove_item(path)

    def touch(self, path: Path) -> Path:
        """Create an empty file, truncating any existing file.

        Args:
            path: File to create.

        Returns:
            ``path``.
        """
        self.fs.write_bytes(path, b"")
        return path

    def mkdir(
        self, path: Path, options: MakeDirectoryOptions | str | None = None
    ) -> Path:
        """Create a directory.

        An existing directory is not an error, with or without ``"p"``.

        Args:
            path: Directory to create.
            options: ``MakeDirectoryOptions.P`` (or ``"p"``) to create
                intermediate directories.

        Returns:
            ``path``.

        Raises:
            FileOpsError: PARENT_MISSING without ``"p"`` when the parent is
                missing; the backend's error unchanged if something other
                than a directory already exists at ``path``.
            ValueError: If ``options`` is not a valid option.
        """
        recursive = options is not None and MakeDirectoryOptions(options) is MakeDirectoryOptions.P
        try:
            self.fs.create_directory(path, recursive=recursive)
        except (FileOpsError, OSError) as e:
            # A file at the path reports the same code; it is not our end state.
            if not (is_already_exists_error(e) and self.fs.is_dir(path)):
                raise
            logger.debug("Directory %s already exists", path)
        return path

    def rename(self, path: Path, new_name: str) -> Path:
        """Rename a file or directory within its parent directory.

        Args:
            path: Path to rename.
            new_name: New basename.

        Returns:
            The renamed path (``path.parent / new_name``).

        Raises:
            ValueError: If ``new_name`` is not a plain basename.
            FileOpsError: If the backend move fails, e.g. ALREADY_EXISTS.
        """
        if new_name in ("", ".", "..") or any(
            sep in new_name for sep in (os.sep, os.altsep) if sep
        ):
            raise ValueError(f"Invalid basename: {new_name!r}")
        newpath = path.parent / new_name
        self.fs.move_item(path, newpath)
        return newpath


@lru_cache(maxsize=1)
def default_fileops() -> FileOps:
    """Get the shared FileOps over the host filesystem."""
    return FileOps.create_default()


def copy_to(src: Path, to: Path, overwrite: bool = False) -> Path:
    """Copy ``src`` to ``to`` on the host filesystem. See FileOps.copy_to."""
    return default_fileops().copy_to(src, to, overwrite=overwrite)


def copy_into(src: Path, into: Path, overwrite: bool = False) -> Path:
    """Copy ``src`` into ``into`` on the host filesystem. See FileOps.copy_into."""
    return default_fileops().copy_into(src, into, overwrite=overwrite)


def move_to(src: Path, to: Path, overwrite: bool = False) -> Path:
    """Move ``src`` to ``to`` on the host filesystem. See FileOps.move_to."""
    return default_fileops().move_to(src, to, overwrite=overwrite)


def move_into(src: Path, into: Path, overwrite: bool = False) -> Path:
    """Move ``src`` into ``into`` on the host filesystem. See FileOps.move_into."""
    return default_fileops().move_into(src, into, overwrite=overwrite)


def delete(path: Path) -> None:
    """Delete ``path`` on the host filesystem. See FileOps.delete."""
    default_fileops().delete(path)


def touch(path: Path) -> Path:
    """Create an empty file on the host filesystem. See FileOps.touch."""
    return default_fileops().touch(path)


def mkdir(path: Path, options: MakeDirectoryOptions | str | None = None) -> Path:
    """Create a directory on the host filesystem. See FileOps.mkdir."""
    return default_fileops().mkdir(path, options)


def rename(path: Path, new_name: str) -> Path:
    """Rename ``path`` on the host filesystem. See FileOps.rename."""
    return default_fileops().rename(path, new_name)
