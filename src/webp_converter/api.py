"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from webp_converter.application.results import ConversionResult
from webp_converter.application.use_cases import build_batch_options
from webp_converter.application.use_cases import build_encoding_options
from webp_converter.application.use_cases import convert_directory
from webp_converter.application.use_cases import convert_file
from webp_converter.types import PathInput


def convert_file_to_webp(
    input_path: PathInput,
    lossless: bool = True,
    quality: int = 100,
    effort: int = 6,
    keep_metadata: bool = True,
) -> bytes:
    """Encode a single image file and return the WebP bytes."""
    options = build_encoding_options(
        lossless=lossless,
        quality=quality,
        effort=effort,
        keep_metadata=keep_metadata,
    )
    return convert_file(input_path=input_path, options=options)


def convert_directory_to_webp(
    input_dir: PathInput,
    output_dir: PathInput,
    lossless: bool = True,
    quality: int = 100,
    effort: int = 6,
    keep_metadata: bool = True,
    sort_entries: bool = True,
) -> list[ConversionResult]:
    """Convert every supported image in ``input_dir`` into ``output_dir``."""
    options = build_batch_options(
        lossless=lossless,
        quality=quality,
        effort=effort,
        keep_metadata=keep_metadata,
        sort_entries=sort_entries,
    )
    return convert_directory(
        input_dir=input_dir,
        output_dir=output_dir,
        options=options,
    )
