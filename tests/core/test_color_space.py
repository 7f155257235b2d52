"""
Tests for RGB <-> HSV conversion
"""

import colorsys

import numpy as np
import pytest

from core.color_space import hsv_to_rgb, hsv_to_rgb_array, rgb_to_hsv, rgb_to_hsv_array


class TestScalarConversion:
    """Test the single pixel conversion"""

    def test_primary_colors(self):
        """Test hue of the primaries in degrees"""
        assert rgb_to_hsv(255, 0, 0) == pytest.approx((0.0, 255.0, 255.0))
        assert rgb_to_hsv(0, 255, 0) == pytest.approx((120.0, 255.0, 255.0))
        assert rgb_to_hsv(0, 0, 255) == pytest.approx((240.0, 255.0, 255.0))

    def test_achromatic(self):
        """Test that gray and black have zero hue and saturation"""
        assert rgb_to_hsv(128, 128, 128) == pytest.approx((0.0, 0.0, 128.0))
        assert rgb_to_hsv(0, 0, 0) == pytest.approx((0.0, 0.0, 0.0))

    def test_hsv_to_rgb_primaries(self):
        """Test converting primaries back"""
        assert hsv_to_rgb(0, 255, 255) == (255, 0, 0)
        assert hsv_to_rgb(120, 255, 255) == (0, 255, 0)
        assert hsv_to_rgb(240, 255, 255) == (0, 0, 255)

    def test_hue_wraps(self):
        """Test that hue is taken modulo 360 in both directions"""
        assert hsv_to_rgb(480, 255, 255) == hsv_to_rgb(120, 255, 255)
        assert hsv_to_rgb(-120, 255, 255) == (0, 0, 255)
        assert hsv_to_rgb(360, 255, 255) == (255, 0, 0)

    def test_zero_saturation_is_gray(self):
        """Test that s = 0 gives equal channels regardless of hue"""
        assert hsv_to_rgb(77, 0, 200) == (200, 200, 200)

    @pytest.mark.parametrize(
        "rgb",
        [(10, 20, 30), (200, 100, 50), (1, 2, 3), (255, 254, 0), (17, 200, 199)],
    )
    def test_round_trip(self, rgb):
        """Test that integer colors survive a round trip"""
        assert hsv_to_rgb(*rgb_to_hsv(*rgb)) == rgb


class TestArrayConversion:
    """Test that the vectorized conversion agrees with the scalar one"""

    @pytest.fixture
    def colors(self):
        rng = np.random.default_rng(7)
        colors = rng.integers(0, 256, size=(200, 3))
        # Include ties and grays
        extra = np.array([[0, 0, 0], [255, 255, 255], [90, 90, 10], [10, 90, 90], [90, 10, 90]])
        return np.concatenate([colors, extra])

    def test_rgb_to_hsv_matches_scalar(self, colors):
        """Test rgb_to_hsv_array against rgb_to_hsv"""
        hsv = rgb_to_hsv_array(colors)
        assert hsv.shape == colors.shape

        for rgb, row in zip(colors, hsv):
            assert tuple(row) == pytest.approx(rgb_to_hsv(*rgb), abs=1e-3)

    def test_hsv_to_rgb_matches_scalar(self, colors):
        """Test hsv_to_rgb_array against hsv_to_rgb"""
        hsv = rgb_to_hsv_array(colors)
        hsv[:, 0] += 37.5
        rgb = hsv_to_rgb_array(hsv)

        assert rgb.dtype == np.uint8
        for row, expected in zip(hsv, rgb):
            single = np.array(hsv_to_rgb(*row))
            assert np.abs(single - expected.astype(int)).max() <= 1

    def test_array_round_trip(self, colors):
        """Test that the vectorized round trip is exact"""
        np.testing.assert_array_equal(hsv_to_rgb_array(rgb_to_hsv_array(colors)), colors)

    def test_accepts_image_shape(self):
        """Test (H, W, 3) input"""
        image = np.zeros((2, 3, 3), dtype=np.uint8)
        image[..., 0] = 255
        hsv = rgb_to_hsv_array(image)

        assert hsv.shape == (2, 3, 3)
        np.testing.assert_allclose(hsv[..., 1], 255.0)


class TestColorsysAgreement:
    """Test the OpenCV conversion against the standard colorsys formulas"""

    @pytest.fixture
    def colors(self):
        rng = np.random.default_rng(11)
        return rng.integers(0, 256, size=(300, 3))

    def test_rgb_to_hsv(self, colors):
        hsv = rgb_to_hsv_array(colors)

        for rgb, row in zip(colors, hsv):
            h, s, v = colorsys.rgb_to_hsv(*(rgb / 255.0))
            assert row[0] == pytest.approx(h * 360.0, abs=1e-2)
            assert row[1] == pytest.approx(s * 255.0, abs=1e-3)
            assert row[2] == pytest.approx(v * 255.0, abs=1e-3)

    def test_hsv_to_rgb(self):
        """Test arbitrary hue, saturation and value against colorsys"""
        rng = np.random.default_rng(12)
        hsv = np.column_stack(
            [rng.uniform(0, 360, 300), rng.uniform(0, 255, 300), rng.uniform(0, 255, 300)]
        )
        rgb = hsv_to_rgb_array(hsv).astype(int)

        for (h, s, v), row in zip(hsv, rgb):
            expected = colorsys.hsv_to_rgb(h / 360.0, s / 255.0, v / 255.0)
            for channel, reference in zip(row, expected):
                assert abs(channel - reference * 255.0) <= 1.0

    def test_float_output_shape(self):
        """Test that a (H, W, 3) image keeps its shape through cvtColor"""
        image = np.full((3, 5, 3), 40, dtype=np.uint8)
        image[..., 2] = 200

        rgb = hsv_to_rgb_array(rgb_to_hsv_array(image))

        assert rgb.shape == (3, 5, 3)
        np.testing.assert_array_equal(rgb, image)
