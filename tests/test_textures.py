"""Unit tests for textures and Perlin noise.

Tests cover:
- Solid and checker textures
- Marble noise stays in [0, 1]
- Perlin noise determinism and range
- Image lookup with v flipped to row order
- Missing images fall back to cyan
"""

import logging

import numpy as np
import pytest
from PIL import Image

from core.vector import Color, Vector3
from materials.perlin import Perlin
from materials.textures import (MISSING_TEXTURE_COLOR, CheckerTexture, ImageTexture,
                                NoiseTexture, SolidColor, as_texture)


class TestSolidAndChecker:
    """Tests for procedural color textures."""

    def test_solid(self):
        """Test that a solid texture ignores its inputs."""
        tex = SolidColor(Color(0.1, 0.2, 0.3))
        assert tex.color_value(Vector3(5, 6, 7), 0.3, 0.9) == Color(0.1, 0.2, 0.3)

    def test_checker_alternates(self):
        """Test the sign of the sine product selects the texture."""
        tex = CheckerTexture(Color(1, 1, 1), Color(0, 0, 0), scale=1.0)
        assert tex.color_value(Vector3(1, 1, 1), 0, 0) == Color(1, 1, 1)
        assert tex.color_value(Vector3(-1, 1, 1), 0, 0) == Color(0, 0, 0)

    def test_checker_nested(self):
        """Test a checker of textures rather than colors."""
        inner = SolidColor(Color(0.5, 0.5, 0.5))
        tex = CheckerTexture(inner, Color(0, 0, 0))
        assert tex.even is inner
        assert isinstance(tex.odd, SolidColor)

    def test_as_texture(self):
        """Test that colors are wrapped and textures pass through."""
        wrapped = as_texture(Color(0.2, 0.4, 0.6))
        assert isinstance(wrapped, SolidColor)
        assert wrapped.color_value(Vector3(0, 0, 0), 0, 0) == Color(0.2, 0.4, 0.6)
        checker = CheckerTexture(Color(1, 1, 1), Color(0, 0, 0))
        assert as_texture(checker) is checker


class TestPerlin:
    """Tests for gradient noise."""

    def test_seeded_tables_repeat(self):
        """Test that the same seed gives the same noise."""
        p = Vector3(1.3, -2.7, 0.4)
        assert Perlin(seed=3).noise(p) == Perlin(seed=3).noise(p)

    def test_zero_at_lattice_points(self):
        """Test that gradient noise vanishes on integer points."""
        perlin = Perlin(seed=1)
        assert abs(perlin.noise(Vector3(2, -3, 5))) < 1e-12

    def test_range(self):
        """Test noise bounds and non-negative turbulence."""
        perlin = Perlin(seed=2)
        rng = np.random.default_rng(0)
        for x, y, z in rng.uniform(-50, 50, (200, 3)):
            p = Vector3(x, y, z)
            assert -1.0 <= perlin.noise(p) <= 1.0
            assert perlin.turb(p) >= 0.0

    def test_marble_in_unit_range(self):
        """Test the marble texture value is a gray in [0, 1]."""
        tex = NoiseTexture(4.0, Perlin(seed=5))
        for i in range(50):
            c = tex.color_value(Vector3(i * 0.37, i * 0.11, i * 0.73), 0, 0)
            assert c.x == c.y == c.z
            assert 0.0 <= c.x <= 1.0


class TestImageTexture:
    """Tests for image-backed textures."""

    @pytest.fixture
    def quad_image(self, tmp_path):
        """A 2x2 image: red, green on the top row; blue, white on the bottom."""
        pixels = np.array([
            [[255, 0, 0], [0, 255, 0]],
            [[0, 0, 255], [255, 255, 255]],
        ], dtype=np.uint8)
        path = tmp_path / "quad.png"
        Image.fromarray(pixels).save(path)
        return path

    def test_lookup(self, quad_image):
        """Test that v = 1 is the top row of the image."""
        tex = ImageTexture(str(quad_image))
        assert tex.is_loaded
        assert tex.color_value(Vector3(0, 0, 0), 0.1, 0.9) == Color(1, 0, 0)
        assert tex.color_value(Vector3(0, 0, 0), 0.9, 0.9) == Color(0, 1, 0)
        assert tex.color_value(Vector3(0, 0, 0), 0.1, 0.1) == Color(0, 0, 1)
        assert tex.color_value(Vector3(0, 0, 0), 0.9, 0.1) == Color(1, 1, 1)

    def test_edges_clamped(self, quad_image):
        """Test coordinates at and beyond the edges."""
        tex = ImageTexture(str(quad_image))
        assert tex.color_value(Vector3(0, 0, 0), 1.0, 1.0) == Color(0, 1, 0)
        assert tex.color_value(Vector3(0, 0, 0), -3.0, 7.0) == Color(1, 0, 0)

    def test_from_array(self):
        """Test a texture built from an in-memory array."""
        tex = ImageTexture(data=np.full((4, 4, 3), 0.25))
        assert tex.color_value(Vector3(0, 0, 0), 0.5, 0.5) == Color(0.25, 0.25, 0.25)

    def test_missing_file_is_cyan(self, tmp_path, caplog):
        """Test that an unreadable file logs a warning and renders cyan."""
        with caplog.at_level(logging.WARNING, logger="materials.textures"):
            tex = ImageTexture(str(tmp_path / "nope.jpg"))
        assert not tex.is_loaded
        assert tex.color_value(Vector3(0, 0, 0), 0.5, 0.5) == MISSING_TEXTURE_COLOR
        assert "nope.jpg" in caplog.text

    def test_no_source_is_cyan(self):
        """Test a texture constructed without an image."""
        assert ImageTexture().color_value(Vector3(0, 0, 0), 0, 0) == Color(0, 1, 1)
