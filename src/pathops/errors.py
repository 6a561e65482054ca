"""Error taxonomy and OS error normalization.

Backends report failures as ``FileOpsError`` carrying a kind, a domain and
a numeric code. The domain and code come straight from the operating
system (``errno`` on POSIX, ``winerror`` on Windows) so callers that need
to recognize a specific condition can inspect them rather than relying on
the Python exception type, which is not consistent across platforms.
"""

from __future__ import annotations

import errno
from enum import Enum
from pathlib import Path

__all__ = [
    "ErrorDomain",
    "ErrorKind",
    "FileOpsError",
    "is_already_exists_error",
    "translate_os_error",
]


class ErrorKind(str, Enum):
    """Normalized failure categories."""

    ALREADY_EXISTS = "already_exists"
    DESTINATION_IS_DIRECTORY = "destination_is_directory"
    DESTINATION_IS_FILE = "destination_is_file"
    PARENT_MISSING = "parent_missing"
    PERMISSION_DENIED = "permission_denied"
    LOCKED = "locked"
    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"


class ErrorDomain(str, Enum):
    """Origin of an error code."""

    POSIX = "posix"
    WINDOWS = "windows"
    PATHOPS = "pathops"


# Codes used for errors raised by pathops itself (domain PATHOPS).
PATHOPS_CODES: dict[ErrorKind, int] = {
    ErrorKind.ALREADY_EXISTS: 1,
    ErrorKind.DESTINATION_IS_DIRECTORY: 2,
    ErrorKind.DESTINATION_IS_FILE: 3,
    ErrorKind.PARENT_MISSING: 4,
    ErrorKind.PERMISSION_DENIED: 5,
    ErrorKind.LOCKED: 6,
    ErrorKind.NOT_FOUND: 7,
    ErrorKind.UNKNOWN: 99,
}

# Windows system error codes (winerror.h).
ERROR_FILE_NOT_FOUND = 2
ERROR_PATH_NOT_FOUND = 3
ERROR_ACCESS_DENIED = 5
ERROR_SHARING_VIOLATION = 32
ERROR_LOCK_VIOLATION = 33
ERROR_INVALID_NAME = 123
ERROR_FILE_EXISTS = 80
ERROR_DIR_NOT_EMPTY = 145
ERROR_ALREADY_EXISTS = 183
ERROR_DIRECTORY = 267

# The only place where "already exists" differs between platforms.
ALREADY_EXISTS_CODES: dict[ErrorDomain, frozenset[int]] = {
    ErrorDomain.POSIX: frozenset({errno.EEXIST}),
    ErrorDomain.WINDOWS: frozenset({ERROR_FILE_EXISTS, ERROR_ALREADY_EXISTS}),
    ErrorDomain.PATHOPS: frozenset({PATHOPS_CODES[ErrorKind.ALREADY_EXISTS]}),
}

_POSIX_KINDS: dict[int, ErrorKind] = {
    errno.EEXIST: ErrorKind.ALREADY_EXISTS,
    errno.ENOTEMPTY: ErrorKind.ALREADY_EXISTS,
    errno.EISDIR: ErrorKind.DESTINATION_IS_DIRECTORY,
    errno.ENOTDIR: ErrorKind.DESTINATION_IS_FILE,
    errno.EACCES: ErrorKind.PERMISSION_DENIED,
    errno.EPERM: ErrorKind.PERMISSION_DENIED,
    errno.EROFS: ErrorKind.PERMISSION_DENIED,
    errno.EBUSY: ErrorKind.LOCKED,
    errno.ETXTBSY: ErrorKind.LOCKED,
    errno.ENOENT: ErrorKind.NOT_FOUND,
}

_WINDOWS_KINDS: dict[int, ErrorKind] = {
    ERROR_FILE_EXISTS: ErrorKind.ALREADY_EXISTS,
    ERROR_ALREADY_EXISTS: ErrorKind.ALREADY_EXISTS,
    ERROR_DIR_NOT_EMPTY: ErrorKind.ALREADY_EXISTS,
    ERROR_DIRECTORY: ErrorKind.DESTINATION_IS_FILE,
    ERROR_ACCESS_DENIED: ErrorKind.PERMISSION_DENIED,
    ERROR_SHARING_VIOLATION: ErrorKind.LOCKED,
    ERROR_LOCK_VIOLATION: ErrorKind.LOCKED,
    ERROR_FILE_NOT_FOUND: ErrorKind.NOT_FOUND,
    ERROR_PATH_NOT_FOUND: ErrorKind.NOT_FOUND,
}


class FileOpsError(Exception):
    """Error raised by a filesystem operation.

    Attributes:
        kind: Normalized failure category.
        domain: Where ``code`` comes from.
        code: Numeric error code within ``domain`` (None if unknown).
        path: Path the failure refers to, if any.
        message: Human readable description.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        path: Path | None = None,
        domain: ErrorDomain = ErrorDomain.PATHOPS,
        code: int | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            kind: Normalized failure category.
            message: Human readable description.
            path: Path the failure refers to.
            domain: Origin of ``code``. Defaults to PATHOPS.
            code: Error code. Defaults to the PATHOPS code for ``kind``
                when ``domain`` is PATHOPS.
        """
        if code is None and domain is ErrorDomain.PATHOPS:
            code = PATHOPS_CODES[kind]
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.path = path
        self.domain = domain
        self.code = code

    @classmethod
    def already_exists(cls, path: Path) -> FileOpsError:
        """Create an ALREADY_EXISTS error for ``path``."""
        return cls(ErrorKind.ALREADY_EXISTS, f"File exists: '{path}'", path)

    @classmethod
    def destination_is_directory(cls, path: Path) -> FileOpsError:
        """Create a DESTINATION_IS_DIRECTORY error for ``path``."""
        return cls(ErrorKind.DESTINATION_IS_DIRECTORY, f"Is a directory: '{path}'", path)

    @classmethod
    def destination_is_file(cls, path: Path) -> FileOpsError:
        """Create a DESTINATION_IS_FILE error for ``path``."""
        return cls(ErrorKind.DESTINATION_IS_FILE, f"Not a directory: '{path}'", path)

    def __repr__(self) -> str:
        return (
            f"FileOpsError(kind={self.kind.value!r}, domain={self.domain.value!r}, "
            f"code={self.code!r}, path={str(self.path) if self.path else None!r})"
        )


def _os_error_code(exc: OSError) -> tuple[ErrorDomain, int | None]:
    """Get the most specific (domain, code) pair of an OSError."""
    winerror = getattr(exc, "winerror", None)
    if winerror is not None:
        return ErrorDomain.WINDOWS, winerror
    return ErrorDomain.POSIX, exc.errno


def translate_os_error(
    exc: OSError,
    path: Path | None = None,
    missing: ErrorKind = ErrorKind.NOT_FOUND,
) -> FileOpsError:
    """Translate an OSError into a FileOpsError.

    The original domain and code are preserved; only the kind is derived.

    Args:
        exc: The error raised by the operating system.
        path: Path the operation was acting on (defaults to ``exc.filename``).
        missing: Kind to use for "no such file" codes. Directory creation
            passes PARENT_MISSING since the leaf itself is never required.

    Returns:
        The translated error. Callers raise it ``from exc``.
    """
    domain, code = _os_error_code(exc)
    table = _WINDOWS_KINDS if domain is ErrorDomain.WINDOWS else _POSIX_KINDS
    kind = table.get(code, ErrorKind.UNKNOWN) if code is not None else ErrorKind.UNKNOWN
    if kind is ErrorKind.UNKNOWN and domain is ErrorDomain.WINDOWS and exc.errno is not None:
        # Unlisted Windows codes still carry an emulated errno.
        kind = _POSIX_KINDS.get(exc.errno, ErrorKind.UNKNOWN)
    if kind is ErrorKind.NOT_FOUND:
        kind = missing

    if path is None and exc.filename is not None:
        path = Path(exc.filename)
    message = exc.strerror or str(exc)
    if path is not None:
        message = f"{message}: '{path}'"
    return FileOpsError(kind, message, path=path, domain=domain, code=code)


def is_already_exists_error(err: object) -> bool:
    """Check whether an error reports that the target already exists.

    The decision is made from the error's domain and code, never from its
    Python type: a ``FileExistsError`` is not raised consistently across
    platforms, and an unrelated failure may share the same type.

    Args:
        err: A FileOpsError, an OSError, or anything else.

    Returns:
        True if the error's code is an "already exists" code of its domain.
    """
    if isinstance(err, FileOpsError):
        domain, code = err.domain, err.code
    elif isinstance(err, OSError):
        domain, code = _os_error_code(err)
    else:
        return False
    return code is not None and code in ALREADY_EXISTS_CODES.get(domain, frozenset())
