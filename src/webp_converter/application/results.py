"""Application-layer result and statistics objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionResult:
    """Structured outcome of one file's conversion."""

    webp_written: bool
    exif_written: bool
    original_deleted: bool = False
    bytes_original: int = 0
    bytes_converted: int = 0

    @property
    def success(self) -> bool:
        """A file succeeds only when both the WebP and its metadata landed."""
        return self.webp_written and self.exif_written

    @classmethod
    def failed(cls) -> ConversionResult:
        """Outcome for a file that never produced a verified WebP."""
        return cls(webp_written=False, exif_written=False)


@dataclass
class ConversionStats:
    """Run-wide counters, mutated only by the orchestrator."""

    total: int = 0
    processed: int = 0
    succeeded: int = 0
    failed: int = 0
    bytes_original: int = 0
    bytes_converted: int = 0

    def record_result(self, success: bool) -> None:
        """Count one processed file."""
        self.processed += 1
        if success:
            self.succeeded += 1
        else:
            self.failed += 1

    def add_bytes(self, original: int, converted: int) -> None:
        """Accumulate storage totals for a verified conversion."""
        self.bytes_original += original
        self.bytes_converted += converted

    @property
    def byte_accounting_active(self) -> bool:
        return self.bytes_original > 0

    @property
    def bytes_saved(self) -> int:
        """Storage delta; negative when WebP output grew."""
        return self.bytes_original - self.bytes_converted

    @property
    def percent_processed(self) -> float:
        return _percent(self.processed, self.total)

    @property
    def percent_saved(self) -> float:
        return _percent(self.bytes_saved, self.bytes_original)


def _percent(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return part / whole * 100
