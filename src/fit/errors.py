"""Application-level exception types for fit."""

from __future__ import annotations


class FitError(Exception):
    """Base exception for fit."""


class GitNotFoundError(FitError):
    """Raised when the configured git executable cannot be launched."""

    def __init__(self, binary: str) -> None:
        super().__init__(f"git executable not found: {binary}")
        self.binary = binary
