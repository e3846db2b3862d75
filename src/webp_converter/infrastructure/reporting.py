"""Console reporting for conversion progress and final statistics."""

from __future__ import annotations

import typer

from webp_converter.application.results import ConversionStats

BYTE_UNITS = ("B", "KB", "MB", "GB", "TB")
_RULE = "─"
_HEADER_RULE = "═"


def _unit_power(num_bytes: int | float) -> int:
    power = 0
    while power < len(BYTE_UNITS) - 1 and num_bytes >= 1024 ** (power + 1):
        power += 1
    return power


def format_bytes_raw(num_bytes: int) -> float:
    """Scale ``num_bytes`` into its display unit, keeping the sign."""
    magnitude = abs(num_bytes)
    value = round(magnitude / 1024 ** _unit_power(magnitude), 2)
    return -value if num_bytes < 0 else value


def byte_unit(num_bytes: int) -> str:
    """Return the display unit for a non-negative byte count."""
    return BYTE_UNITS[_unit_power(num_bytes)]


def format_bytes(num_bytes: int, precision: int = 2) -> str:
    """Format a byte count with a 1024-based unit, e.g. ``1.5 MB``."""
    num_bytes = max(num_bytes, 0)
    power = _unit_power(num_bytes)
    text = f"{num_bytes / 1024**power:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {BYTE_UNITS[power]}"


def progress_line(stats: ConversionStats) -> str:
    """Render the in-place progress line for ``stats``."""
    message = (
        f"\rProgress: {stats.processed}/{stats.total} "
        f"({stats.percent_processed:.1f}%) - "
        f"Success: {stats.succeeded}, Failed: {stats.failed}"
    )
    if stats.byte_accounting_active:
        saved = stats.bytes_saved
        prefix = "saved" if saved >= 0 else "increased"
        message += (
            f" - Storage {prefix}: {abs(format_bytes_raw(saved)):.2f} "
            f"{byte_unit(abs(saved))} ({stats.percent_saved:.1f}%)"
        )
    return message


def _share(part: int, whole: int) -> str:
    if whole == 0:
        return "0.0%"
    return f"{part / whole * 100:.1f}%"


def _rule(widths: list[int], char: str) -> str:
    return "+" + "+".join(char * (width + 2) for width in widths) + "+"


def final_report(stats: ConversionStats) -> str:
    """Render the bordered final results table."""
    rows: list[tuple[str, str, str]] = [
        ("Category", "Value", "Percentage"),
        (_RULE, _RULE, _RULE),
        ("Total Files", str(stats.total), "100.0%"),
        ("Successful", str(stats.succeeded), _share(stats.succeeded, stats.total)),
        ("Failed", str(stats.failed), _share(stats.failed, stats.total)),
    ]
    if stats.byte_accounting_active:
        saved = stats.bytes_saved
        word = "Saved" if saved >= 0 else "Increased"
        rows.extend(
            [
                (_RULE, _RULE, _RULE),
                ("Original Size", format_bytes(stats.bytes_original), "100.0%"),
                (
                    "Converted Size",
                    format_bytes(stats.bytes_converted),
                    _share(stats.bytes_converted, stats.bytes_original),
                ),
                (
                    f"Storage {word}",
                    format_bytes(abs(saved)),
                    f"{stats.percent_saved:.1f}%",
                ),
            ]
        )

    widths = [max(len(row[col]) for row in rows) for col in range(3)]
    lines = ["", "", "Conversion Results:"]
    for index, row in enumerate(rows):
        if row[0] == _RULE:
            lines.append(_rule(widths, _RULE))
            continue
        cells = [cell.ljust(width) for cell, width in zip(row, widths, strict=True)]
        lines.append("| " + " | ".join(cells) + " |")
        if index == 0:
            lines.append(_rule(widths, _HEADER_RULE))
    lines.append(_rule(widths, _RULE))
    return "\n".join(lines) + "\n\n"


class ConsoleReporter:
    """Reporter writing diagnostics to stdout and exceptions to stderr."""

    def info(self, message: str) -> None:
        typer.echo(message)

    def warning(self, message: str) -> None:
        typer.echo(message)

    def error(self, message: str) -> None:
        typer.echo(message, err=True)

    def progress(self, stats: ConversionStats) -> None:
        typer.echo(progress_line(stats), nl=False)

    def summary(self, stats: ConversionStats) -> None:
        typer.echo(final_report(stats), nl=False)
