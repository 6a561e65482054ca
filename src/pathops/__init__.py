"""Idempotent file operations over the host filesystem."""

__version__ = "0.1.0"

from pathops.errors import ErrorKind, FileOpsError, is_already_exists_error
from pathops.operations import (
    FileOps,
    copy_into,
    copy_to,
    delete,
    mkdir,
    move_into,
    move_to,
    rename,
    touch,
)

# Export protocol interfaces for type hints and dependency injection
from pathops.protocols import FileSystem, PathLike, PathOperations
from pathops.types import MakeDirectoryOptions

__all__ = [
    "__version__",
    "ErrorKind",
    "FileOps",
    "FileOpsError",
    "FileSystem",
    "MakeDirectoryOptions",
    "PathLike",
    "PathOperations",
    "copy_into",
    "copy_to",
    "delete",
    "is_already_exists_error",
    "mkdir",
    "move_into",
    "move_to",
    "rename",
    "touch",
]
