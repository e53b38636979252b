from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from ..colorimetry.gamma import (
    ADOBE_RGB_CURVE,
    SRGB_CURVE,
    GammaCurve,
    decode_rgb,
    encode_rgb,
)
from ..profiles import SRGB_D50, STANDARD, Profile
from ..provider import get_profile

if TYPE_CHECKING:
    from .ciexyz import XYZ, CIELab
    from .cylindrical import HLS, HSV
    from .dispatch import Color
    from .luma import YUV
    from .subtractive import CMY, CMYK


@dataclass(frozen=True)
class LinearRGB:
    """Linear-light RGB, nominally 0.0 <= r, g, b <= 1.0."""

    r: float
    g: float
    b: float

    def __post_init__(self):
        object.__setattr__(self, "r", float(self.r))
        object.__setattr__(self, "g", float(self.g))
        object.__setattr__(self, "b", float(self.b))

    @classmethod
    def from_color(cls, color: "Color") -> "LinearRGB":
        from .dispatch import as_linear_rgb

        return as_linear_rgb(color)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def to_linear_rgb(self) -> "LinearRGB":
        return self

    def to_gray(self) -> float:
        """Luma with NTSC-style 0.3 / 0.59 / 0.11 weights."""
        return self.r * 0.3 + self.g * 0.59 + self.b * 0.11

    def to_srgb(self) -> "GammaRGB":
        return GammaRGB.from_color(self, SRGB_CURVE)

    def to_adobe_rgb(self) -> "GammaRGB":
        return GammaRGB.from_color(self, ADOBE_RGB_CURVE)

    def to_cmy(self) -> "CMY":
        from .subtractive import CMY

        return CMY.from_color(self)

    def to_cmyk(self) -> "CMYK":
        from .subtractive import CMYK

        return CMYK.from_color(self)

    def to_hsv(self) -> "HSV":
        from .cylindrical import HSV

        return HSV.from_color(self)

    def to_hls(self) -> "HLS":
        from .cylindrical import HLS

        return HLS.from_color(self)

    def to_yuv(self) -> "YUV":
        from .luma import YUV

        return YUV.from_color(self)

    def to_xyz(self, profile: Profile = STANDARD) -> "XYZ":
        from .ciexyz import XYZ

        return XYZ.from_color(self, profile)

    def to_cielab(self, profile: Profile = SRGB_D50) -> "CIELab":
        """Encode as D50 CIE L*a*b* via XYZ under ``profile``.

        The default profile already has a D50 white, so no adaptation takes
        place and :meth:`CIELab.to_linear_rgb` inverts it exactly.
        """
        return self.to_xyz(profile).to_cielab()


@dataclass(frozen=True)
class GammaRGB:
    """Gamma-encoded RGB tagged with the transfer curve it was encoded with."""

    r: float
    g: float
    b: float
    curve: GammaCurve = SRGB_CURVE

    def __post_init__(self):
        object.__setattr__(self, "r", float(self.r))
        object.__setattr__(self, "g", float(self.g))
        object.__setattr__(self, "b", float(self.b))

    @classmethod
    def srgb(cls, r: float, g: float, b: float) -> "GammaRGB":
        return cls(r, g, b, SRGB_CURVE)

    @classmethod
    def adobe_rgb(cls, r: float, g: float, b: float) -> "GammaRGB":
        return cls(r, g, b, ADOBE_RGB_CURVE)

    @classmethod
    def from_color(cls, color: "Color", curve: GammaCurve = SRGB_CURVE) -> "GammaRGB":
        """Encode any color value with ``curve``.

        Values already encoded with a different curve are decoded to linear
        RGB first.
        """
        linear = LinearRGB.from_color(color)
        return cls(*encode_rgb(curve, linear.as_tuple()), curve=curve)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def to_linear_rgb(self) -> LinearRGB:
        return LinearRGB(*decode_rgb(self.curve, self.as_tuple()))

    def native_profile(self) -> Profile:
        """The built-in profile whose primaries belong with this curve."""
        return get_profile(self.curve.profile_name)

    def to_xyz(self) -> "XYZ":
        return self.to_linear_rgb().to_xyz(self.native_profile())
