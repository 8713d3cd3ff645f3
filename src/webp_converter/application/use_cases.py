"""Application use-cases orchestrating WebP conversion workflows."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from webp_converter.adapters.encoders import PillowWebpEncoder
from webp_converter.adapters.writers import FileOutputWriter
from webp_converter.application.options import BatchOptions, EncodingOptions
from webp_converter.application.ports import ImageEncoder, OutputWriter
from webp_converter.application.results import ConversionResult
from webp_converter.errors import (
    ConversionError,
    SourceDirectoryNotFoundError,
    SourceNotFoundError,
)
from webp_converter.schemas import BatchConversionConfig, WebpEncodingConfig
from webp_converter.types import PathInput

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".bmp", ".tiff", ".gif"})
WEBP_SUFFIX = ".webp"


def is_supported_image(name: str) -> bool:
    """Return whether ``name`` carries a supported image extension."""
    return Path(name).suffix.lower() in SUPPORTED_EXTENSIONS


def output_name_for(name: str) -> str:
    """Return the WebP file name derived from an input file name."""
    return f"{Path(name).stem}{WEBP_SUFFIX}"


def discover_images(input_dir: Path, *, sort_entries: bool = True) -> list[str]:
    """List supported image names directly inside ``input_dir``.

    Parameters
    ----------
    input_dir : Path
        Directory to scan. Subdirectories are not descended into.
    sort_entries : bool, default=True
        Sort names so batch order does not depend on the filesystem.

    Returns
    -------
    list[str]
        Matching entry names in processing order.
    """
    names = [entry.name for entry in input_dir.iterdir() if is_supported_image(entry.name)]
    if sort_entries:
        names.sort()
    return names


def convert_file(
    *,
    input_path: PathInput,
    options: EncodingOptions | None = None,
    encoder: ImageEncoder | None = None,
) -> bytes:
    """Use-case: encode one image file into WebP bytes without writing it."""
    raw_path = os.fspath(input_path)
    source_path = Path(raw_path)
    if not source_path.exists():
        raise SourceNotFoundError(f"Source file not found: {raw_path}")

    encoder = encoder or PillowWebpEncoder()
    return encoder.encode(source_path, options or EncodingOptions())


def convert_directory(
    *,
    input_dir: PathInput,
    output_dir: PathInput,
    options: BatchOptions | None = None,
    encoder: ImageEncoder | None = None,
    writer: OutputWriter | None = None,
) -> list[ConversionResult]:
    """Use-case: convert every supported image in a directory to WebP.

    The input directory must exist; the output directory is created on
    demand. Per-file failures are recorded in the returned list and never
    stop the batch.
    """
    options = options or BatchOptions()
    raw_input_dir = os.fspath(input_dir)
    try:
        config = BatchConversionConfig(
            input_dir=Path(raw_input_dir),
            output_dir=Path(os.fspath(output_dir)),
            sort_entries=options.sort_entries,
        )
    except ValidationError as exc:
        raise ConversionError(f"Invalid batch conversion parameters: {exc}") from exc

    if not config.input_dir.exists():
        raise SourceDirectoryNotFoundError(
            f"Source directory not found: {raw_input_dir}"
        )
    if not config.output_dir.exists():
        config.output_dir.mkdir(parents=True)

    encoder = encoder or PillowWebpEncoder()
    writer = writer or FileOutputWriter()

    names = discover_images(config.input_dir, sort_entries=config.sort_entries)
    logger.info(
        "Converting %d image(s) from %s into %s",
        len(names),
        config.input_dir,
        config.output_dir,
    )

    results: list[ConversionResult] = []
    for name in names:
        results.append(
            _convert_entry(
                name,
                input_dir=config.input_dir,
                output_dir=config.output_dir,
                options=options.encoding,
                encoder=encoder,
                writer=writer,
            )
        )
    return results


def _convert_entry(
    name: str,
    *,
    input_dir: Path,
    output_dir: Path,
    options: EncodingOptions,
    encoder: ImageEncoder,
    writer: OutputWriter,
) -> ConversionResult:
    output_name = output_name_for(name)
    output_path = output_dir / output_name

    try:
        data = convert_file(input_path=input_dir / name, options=options, encoder=encoder)
    except SourceNotFoundError as exc:
        logger.warning("Skipping %s: %s", name, exc)
        return ConversionResult.failed(name, str(exc), "missing-source")
    except Exception as exc:
        logger.warning("Failed to encode %s: %s", name, exc)
        return ConversionResult.failed(name, str(exc), "codec-failure")

    try:
        writer.write(output_path, data)
    except Exception as exc:
        logger.warning("Failed to write %s: %s", output_path, exc)
        return ConversionResult.failed(name, str(exc), "write-failure")

    logger.info("Converted %s -> %s (%d bytes)", name, output_name, len(data))
    return ConversionResult.succeeded(name, output_name, output_path)


def build_encoding_options(
    *,
    lossless: bool = True,
    quality: int = 100,
    effort: int = 6,
    keep_metadata: bool = True,
) -> EncodingOptions:
    """Build typed encoder options from command/API params."""
    try:
        config = WebpEncodingConfig(
            lossless=lossless,
            quality=quality,
            effort=effort,
            keep_metadata=keep_metadata,
        )
    except ValidationError as exc:
        raise ConversionError(f"Invalid WebP encoding parameters: {exc}") from exc
    return EncodingOptions(
        lossless=config.lossless,
        quality=config.quality,
        effort=config.effort,
        keep_metadata=config.keep_metadata,
    )


def build_batch_options(
    *,
    lossless: bool = True,
    quality: int = 100,
    effort: int = 6,
    keep_metadata: bool = True,
    sort_entries: bool = True,
) -> BatchOptions:
    """Build typed batch options from command/API params."""
    return BatchOptions(
        encoding=build_encoding_options(
            lossless=lossless,
            quality=quality,
            effort=effort,
            keep_metadata=keep_metadata,
        ),
        sort_entries=sort_entries,
    )
