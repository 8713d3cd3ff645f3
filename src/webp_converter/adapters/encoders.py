"""Pillow-backed WebP encoder."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

from PIL import Image

from webp_converter.application.options import EncodingOptions

_WEBP_MODES = ("RGB", "RGBA")
_XMP_KEYS = ("xmp", "XML:com.adobe.xmp")


def _normalize_mode(image: Image.Image) -> Image.Image:
    if image.mode in _WEBP_MODES:
        return image
    has_alpha = "A" in image.getbands() or "transparency" in image.info
    return image.convert("RGBA" if has_alpha else "RGB")


def collect_metadata(image: Image.Image) -> dict[str, bytes]:
    """Return EXIF, ICC profile and XMP payloads found on ``image``.

    Parameters
    ----------
    image : PIL.Image.Image
        Opened source image.

    Returns
    -------
    dict[str, bytes]
        Keyword arguments accepted by Pillow's WebP writer. Keys absent from
        the source are omitted.
    """
    params: dict[str, bytes] = {}
    exif = image.info.get("exif")
    if not exif:
        # TIFF keeps its tags in the IFD rather than info["exif"].
        tags = image.getexif()
        exif = tags.tobytes() if tags else None
    if exif:
        params["exif"] = exif
    icc_profile = image.info.get("icc_profile")
    if icc_profile:
        params["icc_profile"] = icc_profile
    for key in _XMP_KEYS:
        xmp = image.info.get(key)
        if xmp:
            params["xmp"] = xmp.encode("utf-8") if isinstance(xmp, str) else xmp
            break
    return params


class PillowWebpEncoder:
    """Encode raster images to WebP through Pillow."""

    def encode(self, input_path: Path, options: EncodingOptions) -> bytes:
        """Decode ``input_path`` and re-encode it as WebP.

        Parameters
        ----------
        input_path : Path
            Source image file.
        options : EncodingOptions
            Lossless/quality/effort/metadata settings.

        Returns
        -------
        bytes
            Encoded WebP payload.

        Notes
        -----
        Pillow errors (``UnidentifiedImageError``, ``OSError``) are not
        wrapped. Animated sources contribute their first frame only.
        """
        with Image.open(input_path) as source:
            metadata = collect_metadata(source) if options.keep_metadata else {}
            image = _normalize_mode(source)
            buffer = BytesIO()
            image.save(
                buffer,
                format="WEBP",
                lossless=options.lossless,
                quality=options.quality,
                method=options.effort,
                **metadata,
            )
        return buffer.getvalue()


def webp_supported() -> bool:
    """Return whether the installed Pillow build can write WebP."""
    from PIL import features

    return bool(features.check("webp"))
