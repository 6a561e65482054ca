"""Tests for the file operations against a mock backend.

These tests pin down which backend primitives each operation calls, and in
which order, without touching real files.
"""

from __future__ import annotations

import errno
from pathlib import Path
from unittest.mock import MagicMock, call

import pytest

from pathops.errors import (
    ERROR_ALREADY_EXISTS,
    ERROR_FILE_EXISTS,
    ErrorDomain,
    ErrorKind,
    FileOpsError,
)
from pathops.operations import FileOps

SRC = Path("/work/src/x.txt")
DEST_DIR = Path("/work/dest")


def _primitive_calls(fs: MagicMock) -> list[str]:
    """Names of the mutating primitives called on the backend."""
    mutating = {"copy_item", "move_item", "remove_item", "create_directory", "write_bytes"}
    return [name for name, _, _ in fs.method_calls if name in mutating]


class TestCopyPolicy:
    """Tests for copy overwrite negotiation."""

    def test_copy_to_overwrite_removes_first(
        self, mock_ops: FileOps, mock_filesystem: MagicMock
    ) -> None:
        """Test an overwritten file is removed before copying."""
        to = Path("/work/copy.txt")
        mock_filesystem.is_file.return_value = True

        mock_ops.copy_to(SRC, to, overwrite=True)

        assert _primitive_calls(mock_filesystem) == ["remove_item", "copy_item"]
        mock_filesystem.remove_item.assert_called_once_with(to)
        mock_filesystem.copy_item.assert_called_once_with(SRC, to)

    def test_copy_to_overwrite_ignored_for_directory(
        self, mock_ops: FileOps, mock_filesystem: MagicMock
    ) -> None:
        """Test nothing is removed when the source is a directory."""
        to = Path("/work/copy.txt")
        mock_filesystem.is_file.side_effect = lambda p: p == to

        mock_ops.copy_to(Path("/work/tree"), to, overwrite=True)

        mock_filesystem.remove_item.assert_not_called()
        mock_filesystem.copy_item.assert_called_once()

    def test_copy_to_without_overwrite_delegates(
        self, mock_ops: FileOps, mock_filesystem: MagicMock
    ) -> None:
        """Test the backend's conflict error surfaces unchanged."""
        err = FileOpsError.already_exists(Path("/work/copy.txt"))
        mock_filesystem.is_file.return_value = True
        mock_filesystem.copy_item.side_effect = err

        with pytest.raises(FileOpsError) as exc_info:
            mock_ops.copy_to(SRC, Path("/work/copy.txt"))

        assert exc_info.value is err
        mock_filesystem.remove_item.assert_not_called()

    def test_copy_into_refuses_for_overwriting_backend(
        self, mock_ops: FileOps, mock_filesystem: MagicMock
    ) -> None:
        """Test a backend that would overwrite silently is never asked to."""
        mock_filesystem.exists.return_value = True
        mock_filesystem.is_dir.return_value = True
        mock_filesystem.is_file.side_effect = lambda p: p == DEST_DIR / "x.txt"

        with pytest.raises(FileOpsError) as exc_info:
            mock_ops.copy_into(SRC, DEST_DIR)

        assert exc_info.value.kind is ErrorKind.ALREADY_EXISTS
        assert exc_info.value.path == DEST_DIR / "x.txt"
        mock_filesystem.copy_item.assert_not_called()

    def test_copy_into_creates_directory_first(
        self, mock_ops: FileOps, mock_filesystem: MagicMock
    ) -> None:
        """Test a missing directory is created recursively before copying."""
        rv = mock_ops.copy_into(SRC, DEST_DIR)

        assert rv == DEST_DIR / "x.txt"
        assert _primitive_calls(mock_filesystem) == ["create_directory", "copy_item"]
        mock_filesystem.create_directory.assert_called_once_with(DEST_DIR, recursive=True)

    def test_copy_into_overwrite_deletes_destination(
        self, mock_ops: FileOps, mock_filesystem: MagicMock
    ) -> None:
        """Test overwrite deletes the destination file before copying."""
        mock_filesystem.exists.return_value = True
        mock_filesystem.is_dir.return_value = True
        mock_filesystem.is_file.return_value = True

        mock_ops.copy_into(SRC, DEST_DIR, overwrite=True)

        assert mock_filesystem.method_calls[-2:] == [
            call.remove_item(DEST_DIR / "x.txt"),
            call.copy_item(SRC, DEST_DIR / "x.txt"),
        ]


class TestMovePolicy:
    """Tests for move overwrite negotiation."""

    def test_move_to_overwrite_removes_first(
        self, mock_ops: FileOps, mock_filesystem: MagicMock
    ) -> None:
        """Test an overwritten file is removed before moving."""
        to = Path("/work/moved.txt")
        mock_filesystem.is_file.return_value = True

        assert mock_ops.move_to(SRC, to, overwrite=True) == to
        assert _primitive_calls(mock_filesystem) == ["remove_item", "move_item"]

    def test_move_into_missing_directory_uses_mkdir(
        self, mock_ops: FileOps, mock_filesystem: MagicMock
    ) -> None:
        """Test a missing directory goes through the idempotent mkdir."""
        mock_filesystem.create_directory.side_effect = FileOpsError(
            ErrorKind.UNKNOWN, "exists", domain=ErrorDomain.POSIX, code=errno.EEXIST
        )
        mock_filesystem.is_dir.return_value = True

        rv = mock_ops.move_into(SRC, DEST_DIR)

        assert rv == DEST_DIR / "x.txt"
        mock_filesystem.move_item.assert_called_once_with(SRC, DEST_DIR / "x.txt")

    def test_move_into_file_leaves_source(
        self, mock_ops: FileOps, mock_filesystem: MagicMock
    ) -> None:
        """Test moving into a file fails before touching anything."""
        mock_filesystem.exists.return_value = True

        with pytest.raises(FileOpsError) as exc_info:
            mock_ops.move_into(SRC, DEST_DIR)

        assert exc_info.value.kind is ErrorKind.DESTINATION_IS_FILE
        assert _primitive_calls(mock_filesystem) == []


class TestDeletePolicy:
    """Tests for delete idempotence."""

    def test_missing_calls_nothing(self, mock_ops: FileOps, mock_filesystem: MagicMock) -> None:
        """Test a missing path never reaches the backend's remove."""
        mock_ops.delete(SRC)

        mock_filesystem.remove_item.assert_not_called()

    def test_failure_not_retried(self, mock_ops: FileOps, mock_filesystem: MagicMock) -> None:
        """Test a removal failure propagates after a single attempt."""
        mock_filesystem.exists.return_value = True
        mock_filesystem.remove_item.side_effect = FileOpsError(
            ErrorKind.LOCKED, "locked", domain=ErrorDomain.POSIX, code=errno.EBUSY
        )

        with pytest.raises(FileOpsError):
            mock_ops.delete(SRC)

        assert mock_filesystem.remove_item.call_count == 1


class TestMkdirNormalization:
    """Tests for mkdir's "already exists" normalization."""

    @pytest.mark.parametrize(
        "err",
        [
            FileOpsError(ErrorKind.UNKNOWN, "x", domain=ErrorDomain.POSIX, code=errno.EEXIST),
            FileOpsError(ErrorKind.UNKNOWN, "x", domain=ErrorDomain.WINDOWS, code=ERROR_ALREADY_EXISTS),
            FileOpsError(ErrorKind.UNKNOWN, "x", domain=ErrorDomain.WINDOWS, code=ERROR_FILE_EXISTS),
            FileExistsError(errno.EEXIST, "File exists"),
        ],
    )
    def test_existing_directory_swallowed(
        self, mock_ops: FileOps, mock_filesystem: MagicMock, err: Exception
    ) -> None:
        """Test every platform's "exists" error becomes success."""
        mock_filesystem.create_directory.side_effect = err
        mock_filesystem.is_dir.return_value = True

        assert mock_ops.mkdir(DEST_DIR) == DEST_DIR

    def test_existing_file_reraised(self, mock_ops: FileOps, mock_filesystem: MagicMock) -> None:
        """Test the same code is re-raised when a file occupies the path."""
        err = FileExistsError(errno.EEXIST, "File exists")
        mock_filesystem.create_directory.side_effect = err
        mock_filesystem.is_dir.return_value = False

        with pytest.raises(FileExistsError) as exc_info:
            mock_ops.mkdir(DEST_DIR, "p")

        assert exc_info.value is err

    def test_other_errors_reraised_unchanged(
        self, mock_ops: FileOps, mock_filesystem: MagicMock
    ) -> None:
        """Test unrelated failures are not swallowed even for a directory."""
        err = FileOpsError(
            ErrorKind.PERMISSION_DENIED, "denied", domain=ErrorDomain.POSIX, code=errno.EACCES
        )
        mock_filesystem.create_directory.side_effect = err
        mock_filesystem.is_dir.return_value = True

        with pytest.raises(FileOpsError) as exc_info:
            mock_ops.mkdir(DEST_DIR)

        assert exc_info.value is err

    @pytest.mark.parametrize(("options", "recursive"), [(None, False), ("p", True)])
    def test_recursive_flag(
        self,
        mock_ops: FileOps,
        mock_filesystem: MagicMock,
        options: str | None,
        recursive: bool,
    ) -> None:
        """Test the "p" option maps to a recursive create."""
        mock_ops.mkdir(DEST_DIR, options)

        mock_filesystem.create_directory.assert_called_once_with(DEST_DIR, recursive=recursive)


class TestTouchAndRename:
    """Tests for touch and rename delegation."""

    def test_touch_writes_zero_bytes(self, mock_ops: FileOps, mock_filesystem: MagicMock) -> None:
        """Test touch writes without checking existence."""
        assert mock_ops.touch(SRC) == SRC

        mock_filesystem.write_bytes.assert_called_once_with(SRC, b"")
        mock_filesystem.exists.assert_not_called()

    def test_rename_moves_within_parent(
        self, mock_ops: FileOps, mock_filesystem: MagicMock
    ) -> None:
        """Test rename moves to a sibling path unconditionally."""
        rv = mock_ops.rename(SRC, "y.txt")

        assert rv == SRC.parent / "y.txt"
        mock_filesystem.move_item.assert_called_once_with(SRC, Path("/work/src/y.txt"))
        mock_filesystem.remove_item.assert_not_called()
