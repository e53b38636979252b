"""Tests for the color value types and linear RGB dispatch."""

import dataclasses

import numpy as np
import pytest

from colorxform.colorimetry.gamma import ADOBE_RGB_CURVE, SRGB_CURVE
from colorxform.errors import UnsupportedColorError
from colorxform.models import (
    CMY,
    CMYK,
    HLS,
    HSV,
    XYZ,
    YUV,
    CIELab,
    GammaRGB,
    LinearRGB,
    as_linear_rgb,
)
from colorxform.profiles import ADOBE_RGB, D50, D65, SRGB

SAMPLE = LinearRGB(0.2, 0.5, 0.8)


def test_channels_coerced_to_float():
    rgb = LinearRGB(1, 0, 0)
    assert isinstance(rgb.r, float)
    assert rgb.as_tuple() == (1.0, 0.0, 0.0)


def test_values_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SAMPLE.r = 0.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        XYZ(0.1, 0.2, 0.3, D65).white_point = D50


def test_value_semantics():
    assert LinearRGB(0.2, 0.5, 0.8) == SAMPLE
    assert hash(LinearRGB(0.2, 0.5, 0.8)) == hash(SAMPLE)


@pytest.mark.parametrize(
    "color",
    [
        SAMPLE.to_srgb(),
        SAMPLE.to_adobe_rgb(),
        SAMPLE.to_cmy(),
        SAMPLE.to_cmyk(),
        SAMPLE.to_hsv(),
        SAMPLE.to_hls(),
        SAMPLE.to_xyz(),
        SAMPLE.to_cielab(),
    ],
    ids=lambda c: type(c).__name__,
)
def test_every_variant_returns_to_linear_rgb(color):
    back = as_linear_rgb(color)
    assert isinstance(back, LinearRGB)
    np.testing.assert_allclose(back.as_tuple(), SAMPLE.as_tuple(), atol=1e-9)


def test_linear_rgb_dispatch_is_identity():
    assert as_linear_rgb(SAMPLE) is SAMPLE
    assert LinearRGB.from_color(SAMPLE) is SAMPLE


@pytest.mark.parametrize("value", [(0.2, 0.5, 0.8), "red", None, np.array([0.2, 0.5, 0.8])])
def test_dispatch_rejects_non_colors(value):
    with pytest.raises(UnsupportedColorError, match="Cannot convert"):
        as_linear_rgb(value)


class TestGammaRGB:
    def test_default_curve_is_srgb(self):
        assert GammaRGB(0.5, 0.5, 0.5).curve is SRGB_CURVE

    def test_constructors(self):
        assert GammaRGB.srgb(0.1, 0.2, 0.3).curve is SRGB_CURVE
        assert GammaRGB.adobe_rgb(0.1, 0.2, 0.3).curve is ADOBE_RGB_CURVE

    def test_reencode_between_curves(self):
        srgb = SAMPLE.to_srgb()
        adobe = GammaRGB.from_color(srgb, ADOBE_RGB_CURVE)
        np.testing.assert_allclose(
            adobe.as_tuple(), SAMPLE.to_adobe_rgb().as_tuple(), atol=1e-12
        )

    def test_to_xyz_uses_curve_profile(self):
        adobe = SAMPLE.to_adobe_rgb()
        expected = adobe.to_linear_rgb().to_xyz(ADOBE_RGB)
        np.testing.assert_allclose(adobe.to_xyz().as_tuple(), expected.as_tuple(), atol=1e-12)
        assert adobe.native_profile() is ADOBE_RGB

    def test_xyz_from_gamma_rgb_defaults_to_curve_profile(self):
        adobe = SAMPLE.to_adobe_rgb()
        assert XYZ.from_color(adobe) == adobe.to_xyz()

    def test_srgb_white(self):
        white = GammaRGB.srgb(1.0, 1.0, 1.0)
        np.testing.assert_allclose(white.to_xyz().as_tuple(), D65, atol=1e-12)


class TestXYZ:
    def test_from_color_keeps_xyz(self):
        xyz = XYZ(0.1, 0.2, 0.3, D65)
        assert XYZ.from_color(xyz) is xyz

    def test_white_point_stored_as_tuple(self):
        xyz = XYZ(0.1, 0.2, 0.3, [0.95046, 1.0, 1.08906])
        assert xyz.white_point == D65

    def test_adapt_to_returns_new_value(self):
        original = SAMPLE.to_xyz(SRGB)
        adapted = original.adapt_to(D50)

        assert adapted is not original
        assert adapted.white_point == D50
        assert original.white_point == D65
        assert adapted.as_tuple() != original.as_tuple()

    def test_adapt_to_same_white_point(self):
        xyz = XYZ(0.1, 0.2, 0.3, D65)
        assert xyz.adapt_to(D65) is xyz

    def test_to_linear_rgb_default_profile(self):
        xyz = SAMPLE.to_xyz()
        np.testing.assert_allclose(xyz.to_linear_rgb().as_tuple(), SAMPLE.as_tuple(), atol=1e-9)

    def test_to_linear_rgb_other_profile(self):
        xyz = SAMPLE.to_xyz(ADOBE_RGB)
        back = xyz.to_linear_rgb(ADOBE_RGB)
        np.testing.assert_allclose(back.as_tuple(), SAMPLE.as_tuple(), atol=1e-9)


def test_to_gray():
    assert LinearRGB(1.0, 1.0, 1.0).to_gray() == pytest.approx(1.0)
    assert SAMPLE.to_gray() == pytest.approx(0.2 * 0.3 + 0.5 * 0.59 + 0.8 * 0.11)


def test_to_yuv_type():
    assert isinstance(SAMPLE.to_yuv(), YUV)


@pytest.mark.parametrize("cls", [CMY, CMYK, HSV, HLS, YUV, CIELab])
def test_from_color_accepts_any_variant(cls):
    converted = cls.from_color(SAMPLE.to_srgb())
    assert isinstance(converted, cls)
