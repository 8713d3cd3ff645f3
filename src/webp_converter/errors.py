"""Exception hierarchy for WebP conversion."""

from __future__ import annotations


class ConversionError(Exception):
    """Base error for conversion failures surfaced to callers."""

    exit_code = 1


class SourceNotFoundError(ConversionError, FileNotFoundError):
    """Raised when a single input image does not exist."""


class SourceDirectoryNotFoundError(ConversionError, FileNotFoundError):
    """Raised when the batch input directory does not exist."""

    exit_code = 2
