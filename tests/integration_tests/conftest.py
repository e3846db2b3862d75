"""Fixtures producing real JPEG files with Pillow."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

MAKE_TAG = 0x010F
ORIENTATION_TAG = 0x0112

type JpegFactory = Callable[..., Path]


def _write_jpeg(
    path: Path,
    size: tuple[int, int] = (16, 8),
    color: tuple[int, int, int] = (200, 40, 40),
    orientation: int | None = None,
    make: str | None = None,
) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    exif = Image.Exif()
    if make is not None:
        exif[MAKE_TAG] = make
    if orientation is not None:
        exif[ORIENTATION_TAG] = orientation
    with Image.new("RGB", size, color) as image:
        if len(exif):
            image.save(path, "JPEG", quality=95, exif=exif.tobytes())
        else:
            image.save(path, "JPEG", quality=95)
    return path


@pytest.fixture
def make_jpeg() -> JpegFactory:
    """Return a factory writing a small JPEG, optionally with EXIF tags."""
    return _write_jpeg
