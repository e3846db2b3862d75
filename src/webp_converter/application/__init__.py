"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from webp_converter.application.options import ConversionOptions
from webp_converter.application.ports import (
    ExifReader,
    FileWalker,
    ImageCodec,
    MetadataStore,
    Reporter,
)
from webp_converter.application.results import ConversionResult, ConversionStats
from webp_converter.application.tasks import FileTask


def build_conversion_options(
    *,
    directory: Path | str,
    quality: int | float | str = 90,
    preserve_exif: bool = True,
    rotate: bool = False,
    cleanup_originals: bool = False,
    follow_symlinks: bool = False,
    verbose: bool = False,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from webp_converter.application.use_cases import build_conversion_options as _impl

    return _impl(
        directory=directory,
        quality=quality,
        preserve_exif=preserve_exif,
        rotate=rotate,
        cleanup_originals=cleanup_originals,
        follow_symlinks=follow_symlinks,
        verbose=verbose,
    )


def convert_file(
    task: FileTask,
    options: ConversionOptions,
    *,
    exif_reader: ExifReader,
    codec: ImageCodec,
    metadata_store: MetadataStore,
    reporter: Reporter,
) -> ConversionResult:
    """Convert a single JPEG via lazy use-case import."""
    from webp_converter.application.use_cases import convert_file as _impl

    return _impl(
        task,
        options,
        exif_reader=exif_reader,
        codec=codec,
        metadata_store=metadata_store,
        reporter=reporter,
    )


def convert_directory(
    options: ConversionOptions,
    *,
    walker: FileWalker | None = None,
    exif_reader: ExifReader | None = None,
    codec: ImageCodec | None = None,
    metadata_store: MetadataStore | None = None,
    reporter: Reporter | None = None,
) -> ConversionStats:
    """Convert a directory tree via lazy use-case import."""
    from webp_converter.application.use_cases import convert_directory as _impl

    return _impl(
        options,
        walker=walker,
        exif_reader=exif_reader,
        codec=codec,
        metadata_store=metadata_store,
        reporter=reporter,
    )


__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "ConversionStats",
    "FileTask",
    "build_conversion_options",
    "convert_file",
    "convert_directory",
]
