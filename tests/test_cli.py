#!/usr/bin/env python3
"""Tests for the command line entry point."""

import sys
import os

import pytest
from PIL import Image

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fractal_image_composer import compute_fractal, load_image, Point, save_image
from fractal_image_composer.cli import main
from conftest import make_pattern


@pytest.fixture
def source_png(tmp_path):
    path = tmp_path / "source.png"
    save_image(make_pattern(40, 30), path)
    return path


def test_defaults_write_output(source_png, tmp_path):
    out = tmp_path / "out.png"
    assert main([str(source_png), "-o", str(out)]) == 0

    result = load_image(out)
    expected = compute_fractal(load_image(source_png), 2, [Point(20, 15)], 2)
    assert result.same_pixels(expected)


def test_explicit_parameters(source_png, tmp_path):
    out = tmp_path / "out.png"
    assert main([str(source_png), "3", "1", "-10", "-10", "20", "5", "-o", str(out)]) == 0

    expected = compute_fractal(load_image(source_png), 1, [Point(-10, -10), Point(20, 5)], 3)
    assert load_image(out).same_pixels(expected)


def test_odd_offset_count_fails(source_png, tmp_path, capsys):
    out = tmp_path / "out.png"
    assert main([str(source_png), "2", "2", "5", "-o", str(out)]) == 1
    assert "even number" in capsys.readouterr().err
    assert not out.exists()


def test_too_many_offsets_fails(source_png, capsys):
    coords = [str(v) for v in range(22)]
    assert main([str(source_png), "2", "2", *coords]) == 1
    assert "Max 10" in capsys.readouterr().err


def test_unreadable_image_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing.png")]) == 1
    assert "not found" in capsys.readouterr().err


def test_degenerate_reduction_fails(tmp_path, capsys):
    path = tmp_path / "tiny.png"
    Image.new("RGB", (4, 4)).save(path)
    assert main([str(path), "8", "0"]) == 1
    assert "collapses" in capsys.readouterr().err


def test_show_prints_preview(source_png, capsys):
    assert main([str(source_png), "--show", "--preview-width", "20"]) == 0
    out = capsys.readouterr().out
    assert "\x1b[38;2;" in out
    # 40 px wide source shrunk by 2 to fit 20 cells
    first_line = out.split("\n")[0]
    assert first_line.count("▀") == 20


def test_parameters_without_offsets_leave_image_unchanged(source_png, tmp_path):
    """Reduction and iterations given, no offsets: nothing is pasted."""
    out = tmp_path / "out.png"
    assert main([str(source_png), "2", "2", "-o", str(out)]) == 0
    assert load_image(out).same_pixels(load_image(source_png))


@pytest.mark.parametrize("width", ["0", "-3", "wide"])
def test_bad_preview_width_rejected(source_png, width, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(source_png), "--show", "--preview-width", width])
    assert excinfo.value.code == 2
    assert "--preview-width" in capsys.readouterr().err


def test_unknown_output_extension_fails(source_png, tmp_path, capsys):
    out = tmp_path / "out.xyz"
    assert main([str(source_png), "-o", str(out)]) == 1
    assert "Could not write image" in capsys.readouterr().err


def test_unwritable_output_fails(source_png, tmp_path, capsys):
    out = tmp_path / "missing_dir" / "out.png"
    assert main([str(source_png), "-o", str(out)]) == 1
    assert "Could not write image" in capsys.readouterr().err


def test_log_level_case_insensitive_and_validated(source_png, tmp_path, capsys):
    out = tmp_path / "out.png"
    assert main([str(source_png), "--log-level", "info", "-o", str(out)]) == 0

    with pytest.raises(SystemExit) as excinfo:
        main([str(source_png), "--log-level", "chatty"])
    assert excinfo.value.code == 2
    assert "--log-level" in capsys.readouterr().err
