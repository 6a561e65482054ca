"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for the path values the
operations act on, the filesystem backend they delegate to, and the
operations themselves. Designing to interfaces enables:
- Loose coupling between the operations and the host filesystem
- Easy substitution of test doubles
- Clear contracts for implementations

All concrete implementations satisfy these protocols structurally (duck typing).
``pathlib.Path`` satisfies ``PathLike``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathops.types import MakeDirectoryOptions


@runtime_checkable
class PathLike(Protocol):
    """Protocol for path values.

    Only the path algebra and stat queries used by the operations are
    required.
    """

    @property
    def name(self) -> str:
        """Final path component (the basename)."""
        ...

    @property
    def parent(self) -> PathLike:
        """Logical parent of the path."""
        ...

    def __truediv__(self, key: str) -> PathLike:
        """Join a child component onto the path."""
        ...

    def exists(self) -> bool:
        """Check if the path exists."""
        ...

    def is_file(self) -> bool:
        """Check if the path is a regular file."""
        ...

    def is_dir(self) -> bool:
        """Check if the path is a directory."""
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem backends.

    Abstracts filesystem access to enable testing without real I/O.
    Mutating primitives raise ``FileOpsError`` carrying the failure's
    domain and code.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file.

        Args:
            path: Path to check.

        Returns:
            True if path is a file, False otherwise.
        """
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def copy_item(self, src: Path, dst: Path) -> None:
        """Copy a file or directory tree.

        Args:
            src: Source file or directory.
            dst: Destination path. Must not exist.

        Raises:
            FileOpsError: DESTINATION_IS_DIRECTORY if ``dst`` is a
                directory, ALREADY_EXISTS if it is anything else.
        """
        ...

    def move_item(self, src: Path, dst: Path) -> None:
        """Move a file or directory tree.

        Args:
            src: Source file or directory.
            dst: Destination path. Must not exist.

        Raises:
            FileOpsError: DESTINATION_IS_DIRECTORY if ``dst`` is a
                directory, ALREADY_EXISTS if it is anything else.
        """
        ...

    def remove_item(self, path: Path) -> None:
        """Remove a file, symlink or directory tree.

        Args:
            path: Path to remove.

        Raises:
            FileOpsError: NOT_FOUND if ``path`` does not exist.
        """
        ...

    def create_directory(self, path: Path, recursive: bool = False) -> None:
        """Create a directory.

        Args:
            path: Directory to create.
            recursive: Create missing intermediate directories.

        Raises:
            FileOpsError: An "already exists" error if ``path`` exists,
                PARENT_MISSING if the parent is missing and not recursive.
        """
        ...

    def write_bytes(self, path: Path, data: bytes) -> None:
        """Write bytes to a file, truncating it if it exists.

        Args:
            path: Path to the file.
            data: Content to write.
        """
        ...


@runtime_checkable
class PathOperations(Protocol):
    """Protocol for the idempotent file operations.

    Implementations return the resulting path so calls can be chained.
    """

    def copy_to(self, src: Path, to: Path, overwrite: bool = False) -> Path:
        """Copy ``src`` to exactly ``to``."""
        ...

    def copy_into(self, src: Path, into: Path, overwrite: bool = False) -> Path:
        """Copy ``src`` into directory ``into``."""
        ...

    def move_to(self, src: Path, to: Path, overwrite: bool = False) -> Path:
        """Move ``src`` to exactly ``to``."""
        ...

    def move_into(self, src: Path, into: Path, overwrite: bool = False) -> Path:
        """Move ``src`` into directory ``into``."""
        ...

    def delete(self, path: Path) -> None:
        """Delete ``path`` recursively; noop if it does not exist."""
        ...

    def touch(self, path: Path) -> Path:
        """Create an empty file at ``path``."""
        ...

    def mkdir(
        self, path: Path, options: MakeDirectoryOptions | str | None = None
    ) -> Path:
        """Create a directory; noop if it already exists."""
        ...

    def rename(self, path: Path, new_name: str) -> Path:
        """Rename ``path`` within its parent directory."""
        ...
