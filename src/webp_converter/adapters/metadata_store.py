"""EXIF sidecar persistence under per-directory ``.exif`` folders."""

from __future__ import annotations

from pathlib import Path

from webp_converter.infrastructure.filesystem import (
    create_exif_directory,
    restrict_file_permissions,
    write_exif_json,
)
from webp_converter.types import ExifMap


class JsonExifStore:
    """Write ``{"exif": ...}`` JSON sidecars next to converted images.

    Directory creation is memoized on the last-seen parent only, which is
    effective because files of one directory are visited contiguously.
    """

    def __init__(self) -> None:
        self._last_parent: Path | None = None
        self._last_dir: Path | None = None

    def ensure_directory(self, parent: Path) -> Path:
        """Return ``<parent>/.exif``, creating it on first use.

        Raises
        ------
        ExifDirectoryError
            If the directory cannot be created or written.
        """
        if self._last_dir is not None and parent == self._last_parent:
            return self._last_dir
        exif_dir = create_exif_directory(parent)
        self._last_parent = parent
        self._last_dir = exif_dir
        return exif_dir

    def write(self, destination: Path, exif: ExifMap) -> bool:
        return write_exif_json(destination, exif)

    def restrict_permissions(self, destination: Path) -> bool:
        return restrict_file_permissions(destination)
