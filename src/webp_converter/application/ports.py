"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from webp_converter.application.results import ConversionStats
from webp_converter.types import ExifMap, ExifValue, Raster


class FileWalker(Protocol):
    """Enumerate candidate files below a root directory."""

    def walk(self, root: Path, follow_symlinks: bool = False) -> Iterator[Path]:
        """Yield file paths recursively."""


class ExifReader(Protocol):
    """Read embedded metadata from an image file."""

    def read(self, image_path: Path) -> ExifMap | None:
        """Return tag name to value mapping, or None when absent."""


class ImageCodec(Protocol):
    """Decode JPEG, rotate, and encode WebP rasters."""

    def decode(self, image_path: Path) -> Raster:
        """Decode a JPEG file into a raster."""

    def rotate(self, raster: Raster, orientation: ExifValue) -> Raster:
        """Rotate per EXIF orientation; identity when no rotation applies."""

    def encode(self, raster: Raster, output_path: Path, quality: int) -> bool:
        """Encode raster to WebP at ``output_path``."""

    def release(self, raster: Raster) -> None:
        """Free raster memory."""


class MetadataStore(Protocol):
    """Persist EXIF sidecar documents."""

    def ensure_directory(self, parent: Path) -> Path:
        """Return the sidecar directory for ``parent``, creating it if needed."""

    def write(self, destination: Path, exif: ExifMap) -> bool:
        """Write a sidecar document; False on failure."""

    def restrict_permissions(self, destination: Path) -> bool:
        """Restrict sidecar access to owner/group; False on failure."""


class Reporter(Protocol):
    """Surface run progress and diagnostics to the user."""

    def info(self, message: str) -> None:
        """Report a recoverable per-file problem."""

    def warning(self, message: str) -> None:
        """Report a non-counting warning."""

    def error(self, message: str) -> None:
        """Report an unexpected per-file exception."""

    def progress(self, stats: ConversionStats) -> None:
        """Render an in-place progress line."""

    def summary(self, stats: ConversionStats) -> None:
        """Render the final results table."""
