"""Linear RGB <-> CIE XYZ under an RGB profile."""

from typing import Sequence, Tuple

import numpy as np

from ..profiles import STANDARD, Profile
from ..profiles.profile import Point
from .adaptation import adapt_xyz
from .matrix import rgb_to_xyz_matrix

Triple = Tuple[float, float, float]


def rgb_to_xyz(
    rgb: Sequence[float], profile: Profile = STANDARD
) -> Tuple[Triple, Point]:
    """Convert linear RGB to XYZ.

    Args:
        rgb: Linear (r, g, b); decode gamma-encoded values first
        profile: Profile the RGB values are expressed in

    Returns:
        Tuple of (XYZ values, profile white point the values are relative to)
    """
    xyz = rgb_to_xyz_matrix(profile) @ np.asarray(rgb, dtype=np.float64)
    return (float(xyz[0]), float(xyz[1]), float(xyz[2])), profile.white


def xyz_to_rgb(
    xyz: Sequence[float], white: Sequence[float], profile: Profile = STANDARD
) -> Triple:
    """Convert XYZ to linear RGB in a destination profile.

    XYZ values relative to a different white point are Bradford-adapted to
    the profile's white point first.

    Args:
        xyz: (X, Y, Z)
        white: White point the XYZ values are relative to
        profile: Destination profile

    Returns:
        Linear (r, g, b)
    """
    adapted = adapt_xyz(xyz, white, profile.white)
    return xyz_to_rgb_with_matrix(adapted, rgb_to_xyz_matrix(profile))


def xyz_to_rgb_with_matrix(xyz: Sequence[float], matrix: np.ndarray) -> Triple:
    """Solve matrix @ rgb = xyz for rgb, without any white point handling."""
    rgb = np.linalg.solve(
        np.asarray(matrix, dtype=np.float64), np.asarray(xyz, dtype=np.float64)
    )
    return (float(rgb[0]), float(rgb[1]), float(rgb[2]))
