"""Shared data types for pathops."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pathops.errors import ErrorKind

__all__ = ["MakeDirectoryOptions", "OperationResult"]


class MakeDirectoryOptions(str, Enum):
    """Options for ``FileOps.mkdir``."""

    # Create intermediate directories, like ``mkdir -p``.
    P = "p"


class OperationResult(BaseModel):
    """Outcome of a single file operation, as reported by the CLI.

    Attributes:
        operation: Operation name (copy, move, delete, touch, mkdir, rename).
        source: Path the operation acted on.
        destination: Resulting path (None for delete and on failure).
        success: True if the operation succeeded.
        error_kind: Normalized failure category (None on success).
        error: Error message (None on success).
    """

    model_config = ConfigDict(populate_by_name=True)

    operation: str
    source: str
    destination: str | None = None
    success: bool = True
    error_kind: ErrorKind | None = Field(default=None, alias="errorKind")
    error: str | None = None

    @model_validator(mode="after")
    def _check_invariants(self) -> OperationResult:
        """Validate invariants."""
        if self.success and self.error is not None:
            raise ValueError("success=True but error is set")
        if not self.success and self.error is None:
            raise ValueError("success=False requires error message")
        if not self.operation:
            raise ValueError("operation cannot be empty")
        return self
