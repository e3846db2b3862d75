"""Unit tests for progress lines, byte formatting and the summary table."""

from __future__ import annotations

import pytest

from webp_converter.application.results import ConversionStats
from webp_converter.infrastructure.reporting import (
    ConsoleReporter,
    final_report,
    format_bytes,
    format_bytes_raw,
    progress_line,
)


@pytest.mark.parametrize(
    ("num_bytes", "expected"),
    [
        (0, "0 B"),
        (512, "512 B"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (5 * 1024**2, "5 MB"),
        (3 * 1024**4, "3 TB"),
        (2048 * 1024**4, "2048 TB"),
        (1_234_567 * 1024**4, "1234567 TB"),
        (123_456 * 1024**4 + 512 * 1024**3, "123456.5 TB"),
        (1100, "1.07 KB"),
        (-10, "0 B"),
    ],
)
def test_format_bytes(num_bytes: int, expected: str) -> None:
    assert format_bytes(num_bytes) == expected


def test_format_bytes_raw_keeps_sign() -> None:
    assert format_bytes_raw(-1536) == -1.5
    assert format_bytes_raw(1536) == 1.5


def _stats(**kwargs: int) -> ConversionStats:
    return ConversionStats(**kwargs)


def test_progress_line_without_byte_accounting() -> None:
    stats = _stats(total=4, processed=1, succeeded=1)

    assert progress_line(stats) == "\rProgress: 1/4 (25.0%) - Success: 1, Failed: 0"


def test_progress_line_reports_savings() -> None:
    stats = _stats(
        total=2, processed=2, succeeded=2, bytes_original=2048, bytes_converted=1024
    )

    assert progress_line(stats) == (
        "\rProgress: 2/2 (100.0%) - Success: 2, Failed: 0"
        " - Storage saved: 1.00 KB (50.0%)"
    )


def test_progress_line_reports_growth() -> None:
    stats = _stats(
        total=1, processed=1, succeeded=1, bytes_original=1024, bytes_converted=1536
    )

    assert progress_line(stats).endswith(" - Storage increased: 512.00 B (-50.0%)")


def test_final_report_basic_rows() -> None:
    stats = _stats(total=3, processed=3, succeeded=2, failed=1)

    report = final_report(stats)
    lines = report.split("\n")

    assert report.startswith("\n\nConversion Results:\n")
    assert report.endswith("\n\n")
    assert "| Total Files | 3     | 100.0%     |" in lines
    assert "| Successful  | 2     | 66.7%      |" in lines
    assert "| Failed      | 1     | 33.3%      |" in lines
    assert "Original Size" not in report


def test_final_report_table_lines_are_aligned() -> None:
    stats = _stats(
        total=2,
        processed=2,
        succeeded=2,
        bytes_original=3 * 1024**2,
        bytes_converted=1024**2,
    )

    table = [line for line in final_report(stats).split("\n") if line[:1] in "|+" and line]

    assert len({len(line) for line in table}) == 1
    assert any("Storage Saved" in line and "2 MB" in line and "66.7%" in line for line in table)
    assert any("Converted Size" in line and "33.3%" in line for line in table)
    assert table[1].startswith("+═")


def test_final_report_storage_increase() -> None:
    stats = _stats(
        total=1, processed=1, succeeded=1, bytes_original=1000, bytes_converted=1500
    )

    assert "Storage Increased" in final_report(stats)
    assert "-50.0%" in final_report(stats)


def test_final_report_with_no_files() -> None:
    """An empty run reports 0.0% rather than dividing by zero."""
    report = final_report(_stats())

    assert "| Successful  | 0     | 0.0%       |" in report.split("\n")


def test_console_reporter_streams(capsys: pytest.CaptureFixture[str]) -> None:
    reporter = ConsoleReporter()
    reporter.info("converted")
    reporter.warning("careful")
    reporter.error("broken")
    reporter.progress(_stats(total=1, processed=1, succeeded=1))

    captured = capsys.readouterr()
    assert captured.out == (
        "converted\ncareful\n\rProgress: 1/1 (100.0%) - Success: 1, Failed: 0"
    )
    assert captured.err == "broken\n"
