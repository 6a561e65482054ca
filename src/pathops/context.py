"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

Dependencies are typed using Protocols (abstract interfaces) rather than
concrete implementations, so test doubles can be injected without
inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass

from pathops.protocols import FileSystem, PathOperations


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for the services used by CLI commands.
    """

    fileops: PathOperations


def create_context(filesystem: FileSystem | None = None) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        filesystem: Override the filesystem backend (for testing).

    Returns:
        Configured AppContext with all dependencies.
    """
    from pathops.operations import FileOps

    return AppContext(fileops=FileOps.create(filesystem=filesystem))
