"""EXIF extraction backed by Pillow."""

from __future__ import annotations

import logging
import math
from pathlib import Path

from PIL import ExifTags, Image, TiffImagePlugin

from webp_converter.types import ExifMap, ExifValue, MutableExifMap

logger = logging.getLogger(__name__)

ORIENTATION_TAG = "Orientation"

_POINTER_TAGS = {
    int(ExifTags.Base.ExifOffset),
    int(ExifTags.Base.GPSInfo),
    int(ExifTags.Base.InteropOffset),
}


def _decode_bytes(value: bytes) -> str:
    stripped = value.rstrip(b"\x00")
    try:
        text = stripped.decode("ascii")
    except UnicodeDecodeError:
        return value.hex()
    return text if text.isprintable() else value.hex()


def json_safe(value: object) -> ExifValue:
    """Convert a Pillow EXIF value into a JSON-serializable value."""
    if isinstance(value, TiffImagePlugin.IFDRational):
        number = float(value)
        return number if math.isfinite(number) else None
    if isinstance(value, bytes):
        return _decode_bytes(value)
    if isinstance(value, str):
        return value.rstrip("\x00")
    if isinstance(value, (bool, int)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, (tuple, list)):
        return [json_safe(item) for item in value]
    if isinstance(value, dict):
        return {str(key): json_safe(item) for key, item in value.items()}
    return str(value)


def _flatten(exif: Image.Exif) -> MutableExifMap:
    tags: MutableExifMap = {}
    for tag_id, value in exif.items():
        if tag_id in _POINTER_TAGS:
            continue
        tags[ExifTags.TAGS.get(tag_id, str(tag_id))] = json_safe(value)
    for tag_id, value in exif.get_ifd(ExifTags.IFD.Exif).items():
        if tag_id in _POINTER_TAGS:
            continue
        tags[ExifTags.TAGS.get(tag_id, str(tag_id))] = json_safe(value)
    for tag_id, value in exif.get_ifd(ExifTags.IFD.GPSInfo).items():
        tags[ExifTags.GPSTAGS.get(tag_id, str(tag_id))] = json_safe(value)
    return tags


class PillowExifReader:
    """Read EXIF tags from JPEG files into a flat name/value mapping."""

    def read(self, image_path: Path) -> ExifMap | None:
        """Return EXIF tags for ``image_path``.

        Parameters
        ----------
        image_path : Path
            Image to inspect.

        Returns
        -------
        ExifMap | None
            Tag name to JSON-safe value mapping, or ``None`` when the file
            has no EXIF block or the block cannot be parsed.
        """
        try:
            with Image.open(image_path) as image:
                tags = _flatten(image.getexif())
        except Exception as exc:
            # Corrupt segments surface as assorted struct/value/OS errors.
            logger.debug("no readable EXIF in %s: %s", image_path, exc)
            return None
        return tags or None
