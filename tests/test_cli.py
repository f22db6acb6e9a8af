"""Tests for the command-line entry point.

Tests cover:
- Rendering a scene to PPM and PNG
- Seeded runs are byte-identical
- Invalid arguments exit with a usage error
"""

import pytest
from PIL import Image

from main import build_parser, main


def tiny_args(output, *extra):
    return ["--scene", "cornell_box", "--width", "6", "--samples", "1",
            "--depth", "2", "--workers", "1", "--seed", "11",
            "--output", str(output), "--log-level", "WARNING", *extra]


class TestMain:
    """Tests for main()."""

    def test_renders_ppm(self, tmp_path):
        """Test a render written as plain PPM."""
        output = tmp_path / "cornell.ppm"
        assert main(tiny_args(output)) == 0
        lines = output.read_text().splitlines()
        assert lines[:3] == ["P3", "6 6", "255"]
        assert len(lines) == 3 + 36

    def test_renders_png(self, tmp_path):
        """Test a render written through Pillow."""
        output = tmp_path / "cornell.png"
        assert main(tiny_args(output, "--aspect-ratio", "2.0")) == 0
        with Image.open(output) as img:
            assert img.size == (6, 3)

    def test_seeded_runs_identical(self, tmp_path):
        """Test that a seed reproduces the image, whatever the backend."""
        first = tmp_path / "a.ppm"
        second = tmp_path / "b.ppm"
        main(tiny_args(first))
        main(tiny_args(second, "--workers", "2", "--backend", "thread"))
        assert first.read_text() == second.read_text()

    @pytest.mark.parametrize("bad", [
        ["--width", "0"],
        ["--samples", "0"],
        ["--workers", "0"],
        ["--scene", "teapot"],
        ["--backend", "gpu"],
    ])
    def test_invalid_arguments(self, tmp_path, bad):
        """Test that bad values are reported as usage errors."""
        with pytest.raises(SystemExit) as excinfo:
            main(tiny_args(tmp_path / "x.ppm", *bad))
        assert excinfo.value.code == 2


class TestParser:
    """Tests for the argument parser defaults."""

    def test_defaults(self):
        """Test the defaults of an empty command line."""
        args = build_parser().parse_args([])
        assert args.scene == "random_spheres"
        assert args.width == 400
        assert args.samples == 100
        assert args.depth == 50
        assert args.backend == "process"
        assert args.output == "image.ppm"
        assert args.workers >= 1
