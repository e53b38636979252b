"""Tests for the CMY/CMYK, HSV/HLS and YUV models."""

import math

import numpy as np
import pytest

from colorxform.models import CMY, CMYK, HLS, HSV, YUV, LinearRGB

RGB_SAMPLES = [
    (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0),
    (0.2, 0.5, 0.8),
    (0.9, 0.1, 0.3),
    (0.4, 0.7, 0.1),
    (0.5, 0.5, 0.2),
]


class TestCMY:
    def test_inverts_rgb(self):
        assert LinearRGB(0.2, 0.5, 0.8).to_cmy().as_tuple() == pytest.approx((0.8, 0.5, 0.2))

    def test_to_linear_rgb(self):
        assert CMY(0.8, 0.5, 0.2).to_linear_rgb().as_tuple() == pytest.approx((0.2, 0.5, 0.8))


class TestCMYK:
    def test_white_has_no_ink(self):
        assert CMY(0.0, 0.0, 0.0).to_cmyk().as_tuple() == (0.0, 0.0, 0.0, 0.0)

    def test_black_is_pure_key(self):
        cmyk = CMY(1.0, 1.0, 1.0).to_cmyk()
        assert cmyk.as_tuple() == (0.0, 0.0, 0.0, 1.0)
        assert not any(math.isnan(v) for v in cmyk.as_tuple())

    def test_from_rgb_black(self):
        assert LinearRGB(0.0, 0.0, 0.0).to_cmyk().as_tuple() == (0.0, 0.0, 0.0, 1.0)

    def test_key_extraction(self):
        cmyk = CMY(0.2, 0.5, 0.7).to_cmyk()
        assert cmyk.as_tuple() == pytest.approx((0.0, 0.375, 0.625, 0.2))

    def test_to_cmy_restores(self):
        cmy = CMYK(0.0, 0.375, 0.625, 0.2).to_cmy()
        assert cmy.as_tuple() == pytest.approx((0.2, 0.5, 0.7))

    def test_to_cmy_caps_at_one(self):
        assert CMYK(1.5, 0.0, 0.0, 0.5).to_cmy().c == 1.0

    def test_cmy_from_cmyk(self):
        assert CMY.from_color(CMYK(0.0, 0.0, 0.0, 1.0)).as_tuple() == (1.0, 1.0, 1.0)

    @pytest.mark.parametrize("rgb", RGB_SAMPLES)
    def test_roundtrip(self, rgb):
        back = LinearRGB(*rgb).to_cmyk().to_linear_rgb()
        np.testing.assert_allclose(back.as_tuple(), rgb, atol=1e-12)


class TestHSV:
    def test_known_value(self):
        hsv = LinearRGB(0.2, 0.5, 0.8).to_hsv()
        assert hsv.h == pytest.approx(7 * math.pi / 6)
        assert hsv.s == pytest.approx(0.75)
        assert hsv.v == pytest.approx(0.8)

    def test_black_is_defined(self):
        assert LinearRGB(0.0, 0.0, 0.0).to_hsv().as_tuple() == (0.0, 0.0, 0.0)

    def test_gray_has_no_saturation(self):
        assert LinearRGB(0.4, 0.4, 0.4).to_hsv().as_tuple() == pytest.approx((0.0, 0.0, 0.4))

    def test_infinite_hue_does_not_raise(self):
        hsv = HSV(math.inf, 1.0, 1.0)
        assert math.isnan(hsv.h)
        assert all(math.isnan(c) for c in hsv.to_linear_rgb().as_tuple())

    def test_hue_normalized_on_construction(self):
        assert HSV(-math.pi / 3, 1.0, 1.0).h == pytest.approx(5 * math.pi / 3)
        assert HSV(5 * math.pi, 1.0, 1.0).h == pytest.approx(math.pi)

    @pytest.mark.parametrize("rgb", RGB_SAMPLES)
    def test_roundtrip(self, rgb):
        back = LinearRGB(*rgb).to_hsv().to_linear_rgb()
        np.testing.assert_allclose(back.as_tuple(), rgb, atol=1e-12)


class TestHLS:
    def test_known_value(self):
        hls = LinearRGB(0.2, 0.5, 0.8).to_hls()
        assert hls.h == pytest.approx(7 * math.pi / 6)
        assert hls.l == pytest.approx(0.5)
        assert hls.s == pytest.approx(0.6)

    def test_dark_color_saturation(self):
        hls = LinearRGB(0.1, 0.3, 0.1).to_hls()
        assert hls.l == pytest.approx(0.2)
        assert hls.s == pytest.approx(0.5)

    def test_gray(self):
        assert LinearRGB(0.3, 0.3, 0.3).to_hls().as_tuple() == pytest.approx((0.0, 0.3, 0.0))

    def test_zero_saturation_to_rgb(self):
        assert HLS(2.0, 0.25, 0.0).to_linear_rgb().as_tuple() == (0.25, 0.25, 0.25)

    @pytest.mark.parametrize("rgb", RGB_SAMPLES)
    def test_roundtrip(self, rgb):
        back = LinearRGB(*rgb).to_hls().to_linear_rgb()
        np.testing.assert_allclose(back.as_tuple(), rgb, atol=1e-12)


class TestYUV:
    def test_white(self):
        yuv = LinearRGB(1.0, 1.0, 1.0).to_yuv()
        assert yuv.as_tuple() == pytest.approx((1.0, 0.501, 0.5), abs=1e-9)

    def test_neutral_chroma_centered(self):
        yuv = LinearRGB(0.0, 0.0, 0.0).to_yuv()
        assert yuv.as_tuple() == pytest.approx((0.0, 0.5, 0.5))

    @pytest.mark.parametrize("rgb", RGB_SAMPLES)
    def test_roundtrip(self, rgb):
        back = YUV.from_color(LinearRGB(*rgb)).to_linear_rgb()
        np.testing.assert_allclose(back.as_tuple(), rgb, atol=5e-3)
