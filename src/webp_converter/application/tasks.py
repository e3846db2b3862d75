"""Per-file conversion tasks and derived output paths."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

JPEG_SUFFIX = re.compile(r"\.(jpe?g)$", re.IGNORECASE)
EXIF_DIRNAME = ".exif"


def is_jpeg(path: Path) -> bool:
    """Return whether ``path`` carries a ``.jpg``/``.jpeg`` suffix (any case)."""
    return JPEG_SUFFIX.search(path.name) is not None


@dataclass(frozen=True)
class FileTask:
    """One JPEG scheduled for conversion."""

    original_path: Path
    directory: Path
    filename: str

    @classmethod
    def from_path(cls, path: Path) -> FileTask:
        """Build a task for a JPEG file path."""
        return cls(original_path=path, directory=path.parent, filename=path.name)

    @property
    def webp_path(self) -> Path:
        """Sibling ``.webp`` output path."""
        return self.directory / JPEG_SUFFIX.sub(".webp", self.filename)

    @property
    def exif_dir(self) -> Path:
        """Directory holding EXIF sidecars for this task's directory."""
        return self.directory / EXIF_DIRNAME

    @property
    def exif_json_path(self) -> Path:
        """EXIF sidecar path ``<dir>/.exif/<name>.exif.json``."""
        return self.exif_dir / JPEG_SUFFIX.sub(".exif.json", self.filename)
