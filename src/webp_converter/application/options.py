"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EncodingOptions:
    """WebP encoder configuration.

    Defaults reproduce the fixed encoding policy: lossless output at maximum
    quality and effort, with EXIF/ICC/XMP metadata carried over.
    """

    lossless: bool = True
    quality: int = 100
    effort: int = 6
    keep_metadata: bool = True


@dataclass(frozen=True)
class BatchOptions:
    """Directory batch conversion configuration."""

    encoding: EncodingOptions = EncodingOptions()
    sort_entries: bool = True
