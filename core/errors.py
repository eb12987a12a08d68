# Path: core/errors.py
# Purpose: Define the fatal error kinds raised while resolving and running a filter pass.
# Layer: core.
# Details: Each error aborts the whole run; callers branch on the concrete class.

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ImgSiftError(Exception):
    """Base class for errors that abort a filtering run."""


class MissingDirectory(ImgSiftError):
    """The resolved root directory does not exist or is not a directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"could not find directory: {path}")


class MissingMetadataSource(ImgSiftError):
    """Score filters were requested but no metadata file was resolved."""

    def __init__(self) -> None:
        super().__init__("score filters require a metadata file, but none was provided")


class MetadataLoadError(ImgSiftError):
    """The metadata file is missing, unreadable, or malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to load metadata from {path}: {reason}")


class ConfigError(ImgSiftError):
    """A required configuration value is absent or the config file is invalid."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)


__all__ = ["ConfigError", "ImgSiftError", "MetadataLoadError", "MissingDirectory", "MissingMetadataSource"]
