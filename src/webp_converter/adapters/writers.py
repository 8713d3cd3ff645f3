"""Filesystem writer for encoded WebP payloads."""

from __future__ import annotations

from pathlib import Path


class FileOutputWriter:
    """Write encoded bytes straight to disk."""

    def write(self, output_path: Path, data: bytes) -> None:
        """Write ``data`` to ``output_path``, overwriting previous output."""
        output_path.write_bytes(data)
