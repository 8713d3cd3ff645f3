"""Application-layer use-cases and option objects."""

from __future__ import annotations

from webp_converter.application.options import BatchOptions, EncodingOptions
from webp_converter.application.ports import ImageEncoder, OutputWriter
from webp_converter.application.results import ConversionResult
from webp_converter.types import PathInput


def build_encoding_options(
    *,
    lossless: bool = True,
    quality: int = 100,
    effort: int = 6,
    keep_metadata: bool = True,
) -> EncodingOptions:
    """Build typed encoder options via lazy use-case import."""
    from webp_converter.application.use_cases import build_encoding_options as _impl

    return _impl(
        lossless=lossless,
        quality=quality,
        effort=effort,
        keep_metadata=keep_metadata,
    )


def convert_file(
    *,
    input_path: PathInput,
    options: EncodingOptions | None = None,
    encoder: ImageEncoder | None = None,
) -> bytes:
    """Encode one image via lazy use-case import."""
    from webp_converter.application.use_cases import convert_file as _impl

    return _impl(input_path=input_path, options=options, encoder=encoder)


def convert_directory(
    *,
    input_dir: PathInput,
    output_dir: PathInput,
    options: BatchOptions | None = None,
    encoder: ImageEncoder | None = None,
    writer: OutputWriter | None = None,
) -> list[ConversionResult]:
    """Convert a directory of images via lazy use-case import."""
    from webp_converter.application.use_cases import convert_directory as _impl

    return _impl(
        input_dir=input_dir,
        output_dir=output_dir,
        options=options,
        encoder=encoder,
        writer=writer,
    )


__all__ = [
    "BatchOptions",
    "EncodingOptions",
    "ConversionResult",
    "build_encoding_options",
    "convert_file",
    "convert_directory",
]
