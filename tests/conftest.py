"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from pathops.filesystem import RealFileSystem
from pathops.operations import FileOps


@pytest.fixture
def fs() -> RealFileSystem:
    """Create the production filesystem backend."""
    return RealFileSystem()


@pytest.fixture
def ops(fs: RealFileSystem) -> FileOps:
    """Create FileOps over the real filesystem."""
    return FileOps.create(filesystem=fs)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Create a file with known content."""
    path = tmp_path / "src" / "x.txt"
    path.parent.mkdir(parents=True)
    path.write_text("hi")
    return path


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree."""
    root = tmp_path / "tree"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "sub" / "b.txt").write_text("b")
    return root


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    By default nothing exists.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_file.return_value = False
    fs.is_dir.return_value = False
    return fs


@pytest.fixture
def mock_ops(mock_filesystem: MagicMock) -> FileOps:
    """Create FileOps over the mock filesystem."""
    return FileOps(filesystem=mock_filesystem)
