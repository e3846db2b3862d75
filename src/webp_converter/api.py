"""Public directory conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from webp_converter.application import build_conversion_options
from webp_converter.application import convert_directory as _convert_directory
from webp_converter.application.ports import Reporter
from webp_converter.application.results import ConversionStats


def convert_directory(
    directory: Path | str,
    quality: int | float | str = 90,
    preserve_exif: bool = True,
    rotate: bool = False,
    cleanup_originals: bool = False,
    follow_symlinks: bool = False,
    verbose: bool = False,
    reporter: Optional[Reporter] = None,
) -> ConversionStats:
    """Convert every JPEG below ``directory`` to WebP and return run statistics."""
    options = build_conversion_options(
        directory=directory,
        quality=quality,
        preserve_exif=preserve_exif,
        rotate=rotate,
        cleanup_originals=cleanup_originals,
        follow_symlinks=follow_symlinks,
        verbose=verbose,
    )
    return _convert_directory(options, reporter=reporter)
