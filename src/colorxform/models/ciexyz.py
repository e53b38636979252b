from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from ..colorimetry.adaptation import adapt_xyz, same_white_point
from ..colorimetry.cielab import lab_to_xyz, xyz_to_lab
from ..colorimetry.transform import rgb_to_xyz, xyz_to_rgb
from ..profiles import D50, SRGB_D50, STANDARD, Profile
from ..profiles.profile import Point
from .rgb import GammaRGB, LinearRGB

if TYPE_CHECKING:
    from .dispatch import Color


def _as_white_point(white: Tuple[float, ...]) -> Point:
    return (float(white[0]), float(white[1]), float(white[2]))


@dataclass(frozen=True)
class XYZ:
    """CIE XYZ tristimulus values relative to a reference white point.

    Two XYZ values can only be combined directly when their white points
    are equal; use :meth:`adapt_to` otherwise.
    """

    x: float
    y: float
    z: float
    white_point: Point

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))
        object.__setattr__(self, "white_point", _as_white_point(self.white_point))

    @classmethod
    def from_color(cls, color: "Color", profile: Optional[Profile] = None) -> "XYZ":
        """Convert any color value to XYZ.

        Args:
            color: Color value; XYZ input is returned unchanged
            profile: Profile of the linear RGB; defaults to the encoding's
                own profile for GammaRGB and to the standard profile otherwise

        Returns:
            XYZ relative to the profile's white point
        """
        if isinstance(color, XYZ):
            return color

        if profile is None and isinstance(color, GammaRGB):
            profile = color.native_profile()
        elif profile is None:
            profile = STANDARD

        linear = LinearRGB.from_color(color)
        xyz, white = rgb_to_xyz(linear.as_tuple(), profile)
        return cls(*xyz, white_point=white)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_linear_rgb(self, profile: Profile = STANDARD) -> LinearRGB:
        """Convert to linear RGB in ``profile``, adapting white points if needed."""
        return LinearRGB(*xyz_to_rgb(self.as_tuple(), self.white_point, profile))

    def adapt_to(self, dest_white: Tuple[float, float, float]) -> "XYZ":
        """Return the equivalent XYZ relative to ``dest_white`` (Bradford)."""
        if same_white_point(self.white_point, dest_white):
            return self
        adapted = adapt_xyz(self.as_tuple(), self.white_point, dest_white)
        return XYZ(*adapted, white_point=dest_white)

    def to_cielab(self, use_current_white_point: bool = False) -> "CIELab":
        """Encode as CIE L*a*b*.

        Args:
            use_current_white_point: Encode against this value's own white
                point instead of adapting to D50 first

        Returns:
            CIELab relative to D50, or to this value's white point
        """
        source = self if use_current_white_point else self.adapt_to(D50)
        lab = xyz_to_lab(source.as_tuple(), source.white_point)
        return CIELab(*lab, white_point=source.white_point)


@dataclass(frozen=True)
class CIELab:
    """CIE L*a*b* relative to a reference white point (D50 by default path)."""

    l: float
    a: float
    b: float
    white_point: Point = D50

    def __post_init__(self):
        object.__setattr__(self, "l", float(self.l))
        object.__setattr__(self, "a", float(self.a))
        object.__setattr__(self, "b", float(self.b))
        object.__setattr__(self, "white_point", _as_white_point(self.white_point))

    @classmethod
    def from_color(
        cls, color: "Color", use_current_white_point: bool = False
    ) -> "CIELab":
        """Encode any color value as CIE L*a*b*.

        Non-XYZ values go through linear RGB and XYZ under the standard
        profile (or the encoding's own profile for GammaRGB).
        """
        if isinstance(color, CIELab):
            return color

        return XYZ.from_color(color).to_cielab(use_current_white_point)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.l, self.a, self.b)

    def to_xyz(self) -> XYZ:
        xyz = lab_to_xyz(self.as_tuple(), self.white_point)
        return XYZ(*xyz, white_point=self.white_point)

    def to_linear_rgb(self, profile: Profile = SRGB_D50) -> LinearRGB:
        """Decode to linear RGB, by default in the D50-adapted sRGB profile."""
        return self.to_xyz().to_linear_rgb(profile)
