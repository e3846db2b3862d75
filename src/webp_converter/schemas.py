"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from webp_converter.validate import DEFAULT_QUALITY, validate_quality


class ConverterConfig(BaseModel):
    """Validated input for a directory conversion run."""

    model_config = ConfigDict(extra="forbid")

    directory: Path
    quality: int = DEFAULT_QUALITY
    preserve_exif: bool = True
    rotate: bool = False
    cleanup_originals: bool = False
    follow_symlinks: bool = False
    verbose: bool = False

    @field_validator("directory")
    @classmethod
    def _absolute_directory(cls, value: Path) -> Path:
        return value.expanduser().absolute()

    @field_validator("quality", mode="before")
    @classmethod
    def _clamp_quality(cls, value: object) -> int:
        if value is None:
            return DEFAULT_QUALITY
        if not isinstance(value, (int, float, str)):
            raise ValueError("quality must be a number.")
        return validate_quality(value)
