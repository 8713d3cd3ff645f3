"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

type ImageFactory = Callable[..., Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def make_image() -> ImageFactory:
    """Return a factory writing a small generated image to disk."""

    def _make(
        path: Path,
        *,
        mode: str = "RGB",
        size: tuple[int, int] = (16, 12),
        color: object = (180, 40, 90),
        **save_kwargs: object,
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        image = Image.new(mode, size, color)
        # Give the image some structure so lossless checks are meaningful.
        if mode in {"RGB", "RGBA"}:
            for x in range(size[0]):
                fill = (x * 13 % 256, 255 - x * 7 % 256, 64)
                image.putpixel((x, 0), fill + ((200,) if mode == "RGBA" else ()))
        image.save(path, **save_kwargs)
        return path

    return _make
