#!/usr/bin/env python3
"""
webp_converter.cli.cli

Typer-based CLI for batch-converting JPEG images to WebP.

Examples
--------
Convert a directory tree, keeping EXIF sidecars:

    webp-conv --directory /path/to/images

Rotate per EXIF orientation at quality 70:

    webp-conv -rd /path/to/images -q 70

Skip EXIF, follow symlinks:

    webp-conv -xfd /path/to/images

Rotate, report progress and delete originals after verified conversion:

    webp-conv -rvcd /path/to/images -q 85
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import typer

from webp_converter.errors import ConversionError, DependencyError

app = typer.Typer(
    name="webp-conv",
    help="Batch-convert JPEG images to WebP.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

EPILOG = (
    "Original JPEG files are kept unless --cleanup is given. "
    "EXIF data is preserved in .exif/<name>.exif.json next to each image."
)
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


# -----------------------------
# Dependency checks / utilities
# -----------------------------
@dataclass(frozen=True)
class MissingDep:
    """Represent a missing runtime dependency."""

    import_name: str
    dist_name: str
    purpose: str


def _is_importable(module: str) -> bool:
    """Check whether a module can be resolved.

    Parameters
    ----------
    module : str
        Module name to resolve.

    Returns
    -------
    bool
        ``True`` if the module can be imported, otherwise ``False``.
    """
    try:
        import importlib.util

        return importlib.util.find_spec(module) is not None
    except Exception:
        return False


def _require_deps(missing: Sequence[MissingDep]) -> None:
    """Raise ``DependencyError`` if any required deps are missing.

    Parameters
    ----------
    missing : Sequence[MissingDep]
        Dependency requirements for the conversion run.
    """
    not_found = [d for d in missing if not _is_importable(d.import_name)]
    if not not_found:
        return

    dists = sorted({d.dist_name for d in not_found})
    details = "\n".join(
        f"- Missing '{d.import_name}' ({d.purpose})." for d in not_found
    )
    raise DependencyError(
        "Missing required dependencies.\n\n"
        f"{details}\n\n"
        f"Install with:\n  pip install {' '.join(dists)}\n"
    )


def _require_webp_support() -> None:
    """Raise ``DependencyError`` when Pillow was built without libwebp."""
    from PIL import features

    if not features.check("webp"):
        raise DependencyError(
            "Pillow was built without WebP support. "
            "Reinstall Pillow with libwebp available."
        )


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly fatal error.

    Parameters
    ----------
    exc : Exception
        Exception that aborted the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Command
# -----------------------------
@app.command(
    epilog=EPILOG,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def convert_cmd(
    ctx: typer.Context,
    directory: Path | None = typer.Option(
        None,
        "--directory",
        "-d",
        help="Directory containing images to convert.",
    ),
    quality: str = typer.Option(
        "90", "--quality", "-q", help="WebP output quality, 0-100."
    ),
    noexif: bool = typer.Option(
        False, "--noexif", "-x", help="Do not save EXIF data."
    ),
    rotate: bool = typer.Option(
        False, "--rotate", "-r", help="Auto-rotate images based on EXIF orientation."
    ),
    cleanup: bool = typer.Option(
        False,
        "--cleanup",
        "-c",
        help="Delete JPEG originals upon successful conversion.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show progress messages and a final summary."
    ),
    follow_symlinks: bool = typer.Option(
        False,
        "--follow-symlinks",
        "-f",
        help="Follow symbolic links when traversing directories.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Convert every JPEG below a directory to WebP.

    Parameters
    ----------
    ctx : typer.Context
        Typer context; unknown extra arguments land in ``ctx.args``.
    directory : Path | None
        Root directory to convert. Help is shown when omitted.
    quality : str, default="90"
        WebP quality; clamped to ``[0, 100]``.
    noexif : bool, default=False
        Skip writing EXIF sidecars.
    cleanup : bool, default=False
        Delete originals after verified conversion.

    Notes
    -----
    - Requires Pillow built with WebP support.
    - Per-file failures are reported and counted; the exit code stays 0.
    """
    if directory is None or ctx.args:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)

    _configure_logging(debug)

    try:
        _require_deps([MissingDep("PIL", "pillow", "JPEG decoding / WebP encoding")])
        _require_webp_support()

        from webp_converter.api import convert_directory

        convert_directory(
            directory=directory,
            quality=quality,
            preserve_exif=not noexif,
            rotate=rotate,
            cleanup_originals=cleanup,
            follow_symlinks=follow_symlinks,
            verbose=verbose,
        )
    except ConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))


if __name__ == "__main__":
    app()
