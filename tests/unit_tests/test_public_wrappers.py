"""Unit tests for thin public wrapper modules."""

from __future__ import annotations

from pathlib import Path

import pytest

import webp_converter
from webp_converter import api, application
from webp_converter.application import use_cases
from webp_converter.application.options import ConversionOptions
from webp_converter.application.results import ConversionResult, ConversionStats
from webp_converter.application.tasks import FileTask


def test_top_level_wrapper_forwards(monkeypatch: pytest.MonkeyPatch) -> None:
    """Forward top-level arguments to the API module implementation."""
    called: dict[str, object] = {}
    stats = ConversionStats(total=3)

    def fake_impl(**kwargs: object) -> ConversionStats:
        called.update(kwargs)
        return stats

    monkeypatch.setattr(api, "convert_directory", fake_impl)

    out = webp_converter.convert_directory("/photos", quality=70, rotate=True)

    assert out is stats
    assert called["directory"] == "/photos"
    assert called["quality"] == 70
    assert called["rotate"] is True
    assert called["preserve_exif"] is True
    assert called["reporter"] is None


def test_api_builds_options_and_runs_use_case(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The API validates parameters, then hands options to the directory use-case."""
    seen: dict[str, object] = {}

    def fake_convert_directory(options: ConversionOptions, **kwargs: object) -> ConversionStats:
        seen["options"] = options
        seen.update(kwargs)
        return ConversionStats()

    monkeypatch.setattr(use_cases, "convert_directory", fake_convert_directory)

    api.convert_directory(tmp_path, quality="150", cleanup_originals=True)

    options = seen["options"]
    assert isinstance(options, ConversionOptions)
    assert options.quality == 100
    assert options.cleanup_originals
    assert seen["reporter"] is None
    assert seen["walker"] is None


def test_application_build_options_wrapper(tmp_path: Path) -> None:
    options = application.build_conversion_options(directory=tmp_path, quality=-4)

    assert options == ConversionOptions(directory=tmp_path, quality=0)


def test_application_convert_file_wrapper_forwards(monkeypatch: pytest.MonkeyPatch) -> None:
    """Forward per-file conversion to the use-case implementation."""
    called: dict[str, object] = {}
    result = ConversionResult(webp_written=True, exif_written=True)

    def fake_convert_file(
        task: FileTask, options: ConversionOptions, **kwargs: object
    ) -> ConversionResult:
        called["task"] = task
        called["options"] = options
        called.update(kwargs)
        return result

    monkeypatch.setattr(use_cases, "convert_file", fake_convert_file)
    task = FileTask.from_path(Path("/p/a.jpg"))
    options = ConversionOptions(directory=Path("/p"))
    ports = {
        "exif_reader": object(),
        "codec": object(),
        "metadata_store": object(),
        "reporter": object(),
    }

    out = application.convert_file(task, options, **ports)

    assert out is result
    assert called["task"] is task
    assert called["options"] is options
    assert all(called[name] is port for name, port in ports.items())
