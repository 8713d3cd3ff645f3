"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class WebpEncodingConfig(BaseModel):
    """Validated WebP encoder parameters."""

    model_config = ConfigDict(extra="forbid", strict=True)

    lossless: bool = True
    quality: int = Field(default=100, ge=0, le=100)
    effort: int = Field(default=6, ge=0, le=6)
    keep_metadata: bool = True


class BatchConversionConfig(BaseModel):
    """Validated input for directory batch conversion."""

    model_config = ConfigDict(extra="forbid")

    input_dir: Path
    output_dir: Path
    sort_entries: bool = True
