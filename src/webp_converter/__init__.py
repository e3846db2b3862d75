"""Top-level API for batch JPEG to WebP conversion."""

from __future__ import annotations

from pathlib import Path

from webp_converter.application.ports import Reporter
from webp_converter.application.results import ConversionStats
from webp_converter.validate import validate_quality

__version__ = "0.1.0"


def convert_directory(
    directory: Path | str,
    quality: int | float | str = 90,
    preserve_exif: bool = True,
    rotate: bool = False,
    cleanup_originals: bool = False,
    follow_symlinks: bool = False,
    verbose: bool = False,
    reporter: Reporter | None = None,
) -> ConversionStats:
    """Convert every JPEG below a directory to a sibling WebP file.

    Parameters
    ----------
    directory : Path | str
        Root directory; must exist and be writable.
    quality : int | float | str, default=90
        WebP quality, clamped to ``[0, 100]``.
    preserve_exif : bool, default=True
        Write EXIF tags to ``.exif/<name>.exif.json`` sidecars.
    rotate : bool, default=False
        Rotate rasters according to the EXIF orientation tag.
    cleanup_originals : bool, default=False
        Delete each original after a verified conversion.
    follow_symlinks : bool, default=False
        Descend into symlinked directories.
    verbose : bool, default=False
        Print progress lines and a final summary table.
    reporter : Reporter | None, default=None
        Sink for diagnostics; defaults to the console.

    Returns
    -------
    ConversionStats
        Counters for the completed run.
    """
    from .api import convert_directory as _impl

    return _impl(
        directory=directory,
        quality=quality,
        preserve_exif=preserve_exif,
        rotate=rotate,
        cleanup_originals=cleanup_originals,
        follow_symlinks=follow_symlinks,
        verbose=verbose,
        reporter=reporter,
    )


__all__ = [
    "ConversionStats",
    "convert_directory",
    "validate_quality",
]
