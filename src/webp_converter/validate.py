"""Validation helpers for conversion inputs."""

from __future__ import annotations

import math
import os
import re
from pathlib import Path

from webp_converter.errors import DirectoryAccessError

MIN_QUALITY = 0
MAX_QUALITY = 100
DEFAULT_QUALITY = 90

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def validate_quality(quality: int | float | str) -> int:
    """Clamp a WebP quality value into ``[0, 100]``.

    Parameters
    ----------
    quality : int | float | str
        Raw quality value. Strings are read up to their first non-numeric
        character; a string without a leading number counts as ``0``.

    Returns
    -------
    int
        ``clamp(int(quality), 0, 100)``.
    """
    if isinstance(quality, str):
        match = _LEADING_NUMBER.match(quality)
        number: int | float = float(match.group(0)) if match else 0
    else:
        number = quality
    if isinstance(number, float) and not math.isfinite(number):
        return MIN_QUALITY
    return max(MIN_QUALITY, min(MAX_QUALITY, int(number)))


def check_directory_permissions(directory: Path) -> None:
    """Ensure ``directory`` is an existing, writable directory.

    Raises
    ------
    DirectoryAccessError
        If the path is missing, not a directory, or not writable.
    """
    if not directory.is_dir() or not os.access(directory, os.W_OK):
        raise DirectoryAccessError(f"Directory {directory} is not writable")
