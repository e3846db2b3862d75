"""Filesystem helpers for conversion outputs and EXIF sidecars."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path

from webp_converter.application.tasks import EXIF_DIRNAME
from webp_converter.errors import ExifDirectoryError

logger = logging.getLogger(__name__)

EXIF_DIR_MODE = 0o770
EXIF_FILE_MODE = 0o660


def create_exif_directory(parent: Path) -> Path:
    """Create ``<parent>/.exif`` with owner/group-only access.

    Raises
    ------
    ExifDirectoryError
        If the directory cannot be created or is not writable.
    """
    exif_dir = parent / EXIF_DIRNAME
    message = (
        f"Critical Error: Cannot create or access EXIF directory at {parent}. "
        "Please check permissions."
    )
    try:
        exif_dir.mkdir(mode=EXIF_DIR_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        raise ExifDirectoryError(message) from exc
    if not exif_dir.is_dir() or not os.access(exif_dir, os.W_OK):
        raise ExifDirectoryError(message)
    return exif_dir


def write_exif_json(path: Path, exif: Mapping[str, object]) -> bool:
    """Write ``{"exif": ...}`` to ``path``; return False on failure."""
    try:
        payload = json.dumps({"exif": dict(exif)})
        path.write_text(payload, encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("failed to write EXIF sidecar %s: %s", path, exc)
        return False
    return True


def restrict_file_permissions(path: Path) -> bool:
    """Set owner/group read-write on ``path``; return False on failure."""
    try:
        os.chmod(path, EXIF_FILE_MODE)
    except OSError as exc:
        logger.debug("chmod failed for %s: %s", path, exc)
        return False
    return True


def verify_output(path: Path) -> bool:
    """Return whether ``path`` exists and is non-empty."""
    try:
        return path.is_file() and path.stat().st_size > 0
    except OSError:
        return False


def file_identity(path: Path) -> tuple[int, int] | None:
    """Return ``(st_dev, st_ino)`` for ``path``, or None when it is absent.

    Two names resolving to one file on a case-insensitive filesystem share
    an identity.
    """
    try:
        info = path.stat()
    except OSError:
        return None
    return info.st_dev, info.st_ino


def remove_file(path: Path) -> None:
    """Remove ``path`` if present."""
    path.unlink(missing_ok=True)


def file_size(path: Path) -> int:
    """Return the size of ``path`` in bytes."""
    return path.stat().st_size
