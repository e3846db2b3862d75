"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from webp_converter.validate import DEFAULT_QUALITY


@dataclass(frozen=True)
class ConversionOptions:
    """Run-wide conversion options, validated once at startup."""

    directory: Path
    quality: int = DEFAULT_QUALITY
    preserve_exif: bool = True
    rotate: bool = False
    cleanup_originals: bool = False
    follow_symlinks: bool = False
    verbose: bool = False

    @property
    def needs_exif(self) -> bool:
        """Whether EXIF must be read for persistence or rotation."""
        return self.preserve_exif or self.rotate
