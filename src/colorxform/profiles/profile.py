from dataclasses import dataclass
from typing import Sequence, Tuple

import colour
import numpy as np

Point = Tuple[float, float, float]


@dataclass(frozen=True)
class Profile:
    """RGB color space defined by a white point and three primaries.

    The white point is stored as (Xn, 1.0, Zn). Primaries are stored as
    chromaticities (x, y, z) with x + y + z = 1.
    """

    name: str
    white: Point
    red: Point
    green: Point
    blue: Point

    @classmethod
    def from_chromaticities(
        cls,
        name: str,
        white: Sequence[float],
        red: Sequence[float],
        green: Sequence[float],
        blue: Sequence[float],
    ) -> "Profile":
        """Build a profile from user-supplied chromaticities.

        Args:
            name: Profile name
            white: (Xn, 1, Zn) tristimulus values or an (x, y) chromaticity
            red: (x, y) or (x, y, z) chromaticity of the red primary
            green: (x, y) or (x, y, z) chromaticity of the green primary
            blue: (x, y) or (x, y, z) chromaticity of the blue primary

        Returns:
            Profile with a normalized white point and full (x, y, z) primaries

        Raises:
            ValueError: If a point does not have two or three components
        """
        return cls(
            name=name,
            white=_white_point(white),
            red=_primary(red),
            green=_primary(green),
            blue=_primary(blue),
        )


def _primary(point: Sequence[float]) -> Point:
    if len(point) == 2:
        x, y = float(point[0]), float(point[1])
        return (x, y, 1.0 - x - y)
    if len(point) == 3:
        return (float(point[0]), float(point[1]), float(point[2]))
    raise ValueError(f"Primary must have 2 or 3 components, got {len(point)}")


def _white_point(point: Sequence[float]) -> Point:
    if len(point) == 2:
        xyz = colour.xy_to_XYZ(np.array(point, dtype=np.float64))
        return (float(xyz[0]), float(xyz[1]), float(xyz[2]))
    if len(point) == 3:
        return (float(point[0]), float(point[1]), float(point[2]))
    raise ValueError(f"White point must have 2 or 3 components, got {len(point)}")


def white_point(profile: Profile) -> Point:
    return profile.white


def red_point(profile: Profile) -> Point:
    return profile.red


def green_point(profile: Profile) -> Point:
    return profile.green


def blue_point(profile: Profile) -> Point:
    return profile.blue


def rgb_points(profile: Profile) -> Tuple[Point, Point, Point]:
    return (profile.red, profile.green, profile.blue)
