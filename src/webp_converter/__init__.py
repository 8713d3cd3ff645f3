"""Top-level API for lossless image-to-WebP conversion."""

from __future__ import annotations

from webp_converter.application.options import BatchOptions, EncodingOptions
from webp_converter.application.results import ConversionResult
from webp_converter.errors import (
    ConversionError,
    SourceDirectoryNotFoundError,
    SourceNotFoundError,
)
from webp_converter.types import PathInput

__version__ = "0.1.0"


def convert_file(
    input_path: PathInput,
    options: EncodingOptions | None = None,
) -> bytes:
    """Convert one image file to WebP.

    Parameters
    ----------
    input_path : str | os.PathLike
        Absolute or relative path to an existing image.
    options : EncodingOptions, optional
        Encoder settings. Defaults to lossless, quality 100, effort 6 with
        metadata preserved.

    Returns
    -------
    bytes
        WebP-encoded image. Nothing is written to disk.

    Raises
    ------
    SourceNotFoundError
        If ``input_path`` does not exist.
    """
    from webp_converter.application.use_cases import convert_file as _impl

    return _impl(input_path=input_path, options=options)


def convert_path(
    input_dir: PathInput,
    output_dir: PathInput,
    options: BatchOptions | None = None,
) -> list[ConversionResult]:
    """Convert every supported image of a directory to WebP.

    Parameters
    ----------
    input_dir : str | os.PathLike
        Directory holding ``.jpg``, ``.jpeg``, ``.png``, ``.bmp``, ``.tiff``
        or ``.gif`` files. Only immediate entries are considered.
    output_dir : str | os.PathLike
        Destination directory, created with parents when missing. Existing
        ``.webp`` files are overwritten.
    options : BatchOptions, optional
        Encoder settings and ordering.

    Returns
    -------
    list[ConversionResult]
        One record per supported input file, in processing order.

    Raises
    ------
    SourceDirectoryNotFoundError
        If ``input_dir`` does not exist.
    """
    from webp_converter.application.use_cases import convert_directory as _impl

    return _impl(input_dir=input_dir, output_dir=output_dir, options=options)


__all__ = [
    "BatchOptions",
    "ConversionError",
    "ConversionResult",
    "EncodingOptions",
    "SourceDirectoryNotFoundError",
    "SourceNotFoundError",
    "convert_file",
    "convert_path",
]
