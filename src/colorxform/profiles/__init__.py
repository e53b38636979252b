from .profile import (
    Profile,
    blue_point,
    green_point,
    red_point,
    rgb_points,
    white_point,
)
from .rgb_spaces import (
    ADOBE_RGB,
    ADOBE_RGB_D50,
    CIE_RGB,
    NTSC_RGB,
    SRGB,
    SRGB_D50,
    STANDARD,
)
from .white_points import C, D50, D65, E, WHITE_POINTS

__all__ = [
    "Profile",
    "white_point",
    "red_point",
    "green_point",
    "blue_point",
    "rgb_points",
    "CIE_RGB",
    "SRGB",
    "ADOBE_RGB",
    "NTSC_RGB",
    "SRGB_D50",
    "ADOBE_RGB_D50",
    "STANDARD",
    "C",
    "D50",
    "D65",
    "E",
    "WHITE_POINTS",
]
