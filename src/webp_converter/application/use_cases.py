"""Application use-cases orchestrating JPEG to WebP conversion."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from webp_converter.adapters.codec import PillowImageCodec
from webp_converter.adapters.exif import ORIENTATION_TAG, PillowExifReader
from webp_converter.adapters.metadata_store import JsonExifStore
from webp_converter.adapters.walker import DirectoryWalker
from webp_converter.application.options import ConversionOptions
from webp_converter.application.ports import (
    ExifReader,
    FileWalker,
    ImageCodec,
    MetadataStore,
    Reporter,
)
from webp_converter.application.results import ConversionResult, ConversionStats
from webp_converter.application.tasks import FileTask, is_jpeg
from webp_converter.errors import (
    ConfigurationError,
    DecodeError,
    EncodeError,
    RotationError,
)
from webp_converter.infrastructure.filesystem import (
    file_identity,
    file_size,
    remove_file,
    verify_output,
)
from webp_converter.infrastructure.reporting import ConsoleReporter
from webp_converter.schemas import ConverterConfig
from webp_converter.types import ExifMap, Raster
from webp_converter.validate import (
    DEFAULT_QUALITY,
    check_directory_permissions,
    validate_quality,
)

logger = logging.getLogger(__name__)


def build_conversion_options(
    *,
    directory: Path | str,
    quality: int | float | str = DEFAULT_QUALITY,
    preserve_exif: bool = True,
    rotate: bool = False,
    cleanup_originals: bool = False,
    follow_symlinks: bool = False,
    verbose: bool = False,
) -> ConversionOptions:
    """Build a validated option object from command/API params.

    Raises
    ------
    ConfigurationError
        If the parameters fail schema validation.
    DirectoryAccessError
        If the directory is missing or not writable.
    """
    try:
        config = ConverterConfig(
            directory=directory,
            quality=quality,
            preserve_exif=preserve_exif,
            rotate=rotate,
            cleanup_originals=cleanup_originals,
            follow_symlinks=follow_symlinks,
            verbose=verbose,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid conversion parameters: {exc}") from exc

    check_directory_permissions(config.directory)
    return ConversionOptions(
        directory=config.directory,
        quality=config.quality,
        preserve_exif=config.preserve_exif,
        rotate=config.rotate,
        cleanup_originals=config.cleanup_originals,
        follow_symlinks=config.follow_symlinks,
        verbose=config.verbose,
    )


def _rotate(
    raster: Raster,
    exif: ExifMap | None,
    source: Path,
    codec: ImageCodec,
    reporter: Reporter,
) -> Raster:
    orientation = exif.get(ORIENTATION_TAG) if exif else None
    try:
        return codec.rotate(raster, orientation)
    except RotationError:
        reporter.warning(
            f"Warning: Rotation failed for {source} - keeping original orientation"
        )
        return raster


def _encode(
    image: Raster,
    task: FileTask,
    options: ConversionOptions,
    codec: ImageCodec,
    reporter: Reporter,
) -> bool:
    try:
        encoded = codec.encode(image, task.webp_path, validate_quality(options.quality))
    except EncodeError:
        encoded = False
    if not encoded:
        reporter.info(f"Error: Failed to create WebP image {task.webp_path}")
        remove_file(task.webp_path)
    return encoded


def _persist_exif(
    task: FileTask,
    exif: ExifMap | None,
    options: ConversionOptions,
    metadata_store: MetadataStore,
    reporter: Reporter,
) -> bool:
    if not options.preserve_exif or not exif:
        return True

    # ExifDirectoryError propagates and aborts the run.
    exif_dir = metadata_store.ensure_directory(task.directory)
    destination = exif_dir / task.exif_json_path.name
    if not metadata_store.write(destination, exif):
        reporter.warning(f"Warning: Failed to save EXIF data for {task.original_path}")
        return False
    if not metadata_store.restrict_permissions(destination):
        reporter.warning(f"Warning: Failed to set permissions on EXIF file {destination}")
    return True


def convert_file(
    task: FileTask,
    options: ConversionOptions,
    *,
    exif_reader: ExifReader,
    codec: ImageCodec,
    metadata_store: MetadataStore,
    reporter: Reporter,
) -> ConversionResult:
    """Use-case: convert one JPEG into a verified WebP sibling.

    Runs decode, optional rotation, encode, on-disk verification, optional
    EXIF sidecar persistence and optional removal of the original. Per-file
    failures are reported and returned as an unsuccessful result; only
    ``ExifDirectoryError`` and unexpected ``OSError`` escape.
    """
    source = task.original_path
    exif = exif_reader.read(source) if options.needs_exif else None

    try:
        raster = codec.decode(source)
    except DecodeError:
        reporter.info(f"Error: Failed to create image from {source}")
        return ConversionResult.failed()

    image = raster
    try:
        if options.rotate:
            image = _rotate(raster, exif, source, codec, reporter)
        if not _encode(image, task, options, codec, reporter):
            return ConversionResult.failed()
    finally:
        if image is not raster:
            codec.release(image)
        codec.release(raster)

    # The encoder can report success while leaving an empty or missing file.
    webp_path = task.webp_path
    if not verify_output(webp_path):
        reporter.info(
            f"Error: WebP conversion failed for {source} - image file is empty or missing"
        )
        remove_file(webp_path)
        return ConversionResult.failed()

    bytes_original = bytes_converted = 0
    if options.cleanup_originals:
        bytes_original = file_size(source)
        bytes_converted = file_size(webp_path)

    exif_written = _persist_exif(task, exif, options, metadata_store, reporter)

    original_deleted = False
    if options.cleanup_originals:
        if exif_written:
            source.unlink()
            original_deleted = True
        else:
            reporter.warning(
                f"Warning: Cleanup failed for {source} - WebP or EXIF data is missing"
            )

    return ConversionResult(
        webp_written=True,
        exif_written=exif_written,
        original_deleted=original_deleted,
        bytes_original=bytes_original,
        bytes_converted=bytes_converted,
    )


def _output_taken(task: FileTask, written: set[tuple[int, int]]) -> bool:
    # p.jpg and p.jpeg share p.webp; the second must not overwrite the first.
    identity = file_identity(task.webp_path)
    return identity is not None and identity in written


def convert_directory(
    options: ConversionOptions,
    *,
    walker: FileWalker | None = None,
    exif_reader: ExifReader | None = None,
    codec: ImageCodec | None = None,
    metadata_store: MetadataStore | None = None,
    reporter: Reporter | None = None,
) -> ConversionStats:
    """Use-case: convert every JPEG below ``options.directory``.

    Files are enumerated once and buffered so the progress total matches
    what is processed. A failure on one file never stops the run; fatal
    errors (``DirectoryAccessError``, ``ExifDirectoryError``) propagate.
    """
    walker = walker or DirectoryWalker()
    exif_reader = exif_reader or PillowExifReader()
    codec = codec or PillowImageCodec()
    metadata_store = metadata_store or JsonExifStore()
    reporter = reporter or ConsoleReporter()

    tasks = [
        FileTask.from_path(path)
        for path in walker.walk(options.directory, follow_symlinks=options.follow_symlinks)
        if is_jpeg(path)
    ]
    stats = ConversionStats(total=len(tasks))
    logger.debug("found %d JPEG files under %s", stats.total, options.directory)

    written: set[tuple[int, int]] = set()
    for task in tasks:
        if _output_taken(task, written):
            reporter.warning(
                f"Warning: Skipping {task.original_path} - {task.webp_path} "
                "was already written from another file"
            )
            stats.record_result(False)
            if options.verbose:
                reporter.progress(stats)
            continue
        try:
            result = convert_file(
                task,
                options,
                exif_reader=exif_reader,
                codec=codec,
                metadata_store=metadata_store,
                reporter=reporter,
            )
        except OSError as exc:
            logger.debug("unexpected error converting %s", task.original_path, exc_info=True)
            reporter.error(f"Error processing file {task.original_path}: {exc}")
            stats.record_result(False)
        else:
            stats.add_bytes(result.bytes_original, result.bytes_converted)
            stats.record_result(result.success)
            identity = file_identity(task.webp_path) if result.webp_written else None
            if identity is not None:
                written.add(identity)

        if options.verbose:
            reporter.progress(stats)

    if options.verbose:
        reporter.summary(stats)
    return stats
