"""Error taxonomy for JPEG to WebP conversion."""

from __future__ import annotations


class ConversionError(Exception):
    """Base error for conversion runs.

    Attributes
    ----------
    exit_code : int
        Process exit code used by the CLI when this error aborts a run.
    """

    exit_code: int = 1


class ConfigurationError(ConversionError):
    """Raised when conversion options fail validation."""


class DependencyError(ConversionError):
    """Raised when the runtime lacks a required imaging capability."""


class DirectoryAccessError(ConversionError):
    """Raised when the root directory cannot be opened or written."""


class ExifDirectoryError(ConversionError):
    """Raised when a ``.exif`` metadata directory cannot be created.

    This aborts the whole run: it signals a systemic permissions problem
    rather than a per-file issue.
    """


class ImageProcessingError(ConversionError):
    """Per-file processing failure; never aborts the run."""


class DecodeError(ImageProcessingError):
    """Raised when a JPEG file cannot be decoded."""


class RotationError(ImageProcessingError):
    """Raised when a decoded raster cannot be rotated."""


class EncodeError(ImageProcessingError):
    """Raised when a raster cannot be encoded to WebP."""
