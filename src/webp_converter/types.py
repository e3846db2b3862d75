"""Shared type aliases and protocols for converter modules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol


class Raster(Protocol):
    """Marker protocol for in-memory decoded images."""


type ExifScalar = str | int | float | bool | None
type ExifValue = ExifScalar | list["ExifValue"] | dict[str, "ExifValue"]
type ExifMap = Mapping[str, ExifValue]
type MutableExifMap = dict[str, ExifValue]
