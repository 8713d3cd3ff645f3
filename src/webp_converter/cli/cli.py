#!/usr/bin/env python3
"""
webp_converter.cli.cli

Typer-based CLI for converting images to lossless WebP.

Examples
--------
Convert one file next to its source:

    webp-convert file photos/cat.jpg

Convert a whole directory:

    webp-convert dir photos/ photos-webp/
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from pathlib import Path

import typer


app = typer.Typer(
    name="webp-convert",
    help="Convert JPEG/PNG/BMP/TIFF/GIF images to lossless WebP.",
    no_args_is_help=True,
)

QUALITY_HELP = "WebP quality (0-100). In lossless mode this trades speed for size."
EFFORT_HELP = "Compression effort (0-6). Higher is slower and smaller."
LOSSY_HELP = "Use lossy encoding instead of lossless."
STRIP_METADATA_HELP = "Drop EXIF/ICC/XMP metadata instead of copying it."


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _format_size(size: int) -> str:
    return f"{size / 1024:.2f} KB"


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each converted file."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    verbose : bool, default=False
        Whether to enable INFO logging.
    """
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("file")
def file_cmd(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., help="Image file to convert."),
    output_path: Path | None = typer.Argument(
        None, help="Where to write the .webp file. Defaults to INPUT_PATH with a .webp suffix."
    ),
    quality: int = typer.Option(100, "--quality", help=QUALITY_HELP),
    effort: int = typer.Option(6, "--effort", help=EFFORT_HELP),
    lossy: bool = typer.Option(False, "--lossy", help=LOSSY_HELP),
    strip_metadata: bool = typer.Option(
        False, "--strip-metadata", help=STRIP_METADATA_HELP
    ),
    validate: bool = typer.Option(
        False, "--validate", help="Re-open the written file and check it decodes as WebP."
    ),
) -> None:
    """Convert a single image to WebP."""
    debug: bool = bool(ctx.obj.get("debug", False))
    destination = output_path or input_path.with_suffix(".webp")

    try:
        from webp_converter.api import convert_file_to_webp
        from webp_converter.validate import validate_webp_if_requested

        data = convert_file_to_webp(
            input_path,
            lossless=not lossy,
            quality=quality,
            effort=effort,
            keep_metadata=not strip_metadata,
        )
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(data)
        validate_webp_if_requested(destination, validate)
        typer.secho(
            f"✓ Saved: {destination} ({_format_size(len(data))})",
            fg=typer.colors.GREEN,
        )
    except Exception as exc:
        # ConversionError and raw codec errors share one path; exit_code decides status.
        raise typer.Exit(code=_print_conversion_error(exc, debug))


@app.command("dir")
def dir_cmd(
    ctx: typer.Context,
    input_dir: Path = typer.Argument(..., help="Directory containing source images."),
    output_dir: Path = typer.Argument(..., help="Directory for .webp outputs (created if missing)."),
    quality: int = typer.Option(100, "--quality", help=QUALITY_HELP),
    effort: int = typer.Option(6, "--effort", help=EFFORT_HELP),
    lossy: bool = typer.Option(False, "--lossy", help=LOSSY_HELP),
    strip_metadata: bool = typer.Option(
        False, "--strip-metadata", help=STRIP_METADATA_HELP
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON."),
    allow_failures: bool = typer.Option(
        False,
        "--allow-failures",
        help="Exit with status 0 even when some files failed to convert.",
    ),
) -> None:
    """Convert every supported image in a directory to WebP.

    Notes
    -----
    - Only immediate entries are converted; subdirectories are ignored.
    - Existing outputs with the same name are overwritten.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from webp_converter.api import convert_directory_to_webp

        results = convert_directory_to_webp(
            input_dir,
            output_dir,
            lossless=not lossy,
            quality=quality,
            effort=effort,
            keep_metadata=not strip_metadata,
        )
    except Exception as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    if as_json:
        typer.echo(json.dumps([result.to_dict() for result in results], indent=2))
    else:
        for index, result in enumerate(results, start=1):
            if result.success:
                typer.secho(
                    f"{index}. ✓ {result.input} → {result.output}",
                    fg=typer.colors.GREEN,
                )
            else:
                typer.secho(
                    f"{index}. ✗ {result.input}: {result.error}",
                    fg=typer.colors.RED,
                )
        succeeded = sum(1 for result in results if result.success)
        typer.echo(f"{succeeded}/{len(results)} conversions succeeded")

    if not allow_failures and any(not result.success for result in results):
        raise typer.Exit(code=1)


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed toolchain versions and WebP support."""
    import importlib.metadata as metadata

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in ("pillow", "pydantic", "typer"):
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    try:
        from webp_converter.adapters.encoders import webp_supported

        supported = webp_supported()
    except Exception:
        supported = False
    typer.echo(f"webp: {'available' if supported else '<unavailable>'}")


if __name__ == "__main__":
    app()
