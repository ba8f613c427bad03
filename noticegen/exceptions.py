"""Custom exceptions for noticegen."""

from __future__ import annotations

from pathlib import Path


class NoticeGenError(Exception):
    """Base exception for all noticegen errors."""


class RootNotFoundError(NoticeGenError):
    """Raised when the dependency tree root does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"node_modules not found: {path}")


class DescriptorError(NoticeGenError):
    """Raised when a package.json cannot be read or parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed package descriptor {path}: {reason}")
