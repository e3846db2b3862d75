"""JPEG decode / WebP encode adapter backed by Pillow."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from webp_converter.errors import DecodeError, EncodeError, RotationError
from webp_converter.types import ExifValue

logger = logging.getLogger(__name__)

ORIENTATION_DEGREES: dict[int, int] = {3: 180, 6: -90, 8: 90}

_DECODE_ERRORS = (OSError, SyntaxError, ValueError, Image.DecompressionBombError)
_WEBP_MODES = {"RGB", "RGBA"}


def rotation_degrees(orientation: object) -> int:
    """Map an EXIF orientation value to a counter-clockwise rotation.

    Only the pure rotations are handled: ``3 -> 180``, ``6 -> -90`` and
    ``8 -> 90``. Every other value, including mirrored orientations and
    missing data, maps to ``0``.
    """
    if not isinstance(orientation, int):
        return 0
    return ORIENTATION_DEGREES.get(orientation, 0)


class PillowImageCodec:
    """Decode, rotate and encode rasters using Pillow."""

    def decode(self, image_path: Path) -> Image.Image:
        """Fully decode a JPEG file.

        Raises
        ------
        DecodeError
            If the file is not a JPEG or its data is truncated or corrupt.
        """
        try:
            image = Image.open(image_path, formats=["JPEG"])
        except _DECODE_ERRORS as exc:
            raise DecodeError(f"Failed to create image from {image_path}") from exc
        try:
            image.load()
        except _DECODE_ERRORS as exc:
            image.close()
            raise DecodeError(f"Failed to create image from {image_path}") from exc
        logger.debug("decoded %s (%s, %sx%s)", image_path, image.mode, *image.size)
        return image

    def rotate(self, raster: Image.Image, orientation: ExifValue) -> Image.Image:
        """Rotate per EXIF ``orientation``; a ``0`` mapping returns ``raster``."""
        degrees = rotation_degrees(orientation)
        if degrees == 0:
            return raster
        try:
            return raster.rotate(degrees, expand=True)
        except (OSError, ValueError, MemoryError) as exc:
            raise RotationError(f"Rotation by {degrees} degrees failed") from exc

    def encode(self, raster: Image.Image, output_path: Path, quality: int) -> bool:
        """Save ``raster`` as WebP.

        The return value mirrors the encoder's own success signal only;
        callers must still verify the file on disk.

        Raises
        ------
        EncodeError
            If the encoder raises.
        """
        image = raster if raster.mode in _WEBP_MODES else raster.convert("RGB")
        try:
            image.save(output_path, "WEBP", quality=quality)
        except (OSError, ValueError, KeyError) as exc:
            raise EncodeError(f"Failed to create WebP image {output_path}") from exc
        finally:
            if image is not raster:
                image.close()
        logger.debug("encoded %s at quality %d", output_path, quality)
        return True

    def release(self, raster: Image.Image) -> None:
        raster.close()
