"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from webp_converter.application.options import EncodingOptions


class ImageEncoder(Protocol):
    """Encode a source image file into WebP bytes."""

    def encode(self, input_path: Path, options: EncodingOptions) -> bytes:
        """Return the encoded WebP payload."""


class OutputWriter(Protocol):
    """Persist an encoded payload."""

    def write(self, output_path: Path, data: bytes) -> None:
        """Write ``data`` to ``output_path``, replacing any existing file."""
