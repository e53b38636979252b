from .errors import ProfileNotFoundError
from .profiles import (
    ADOBE_RGB,
    ADOBE_RGB_D50,
    CIE_RGB,
    NTSC_RGB,
    SRGB,
    SRGB_D50,
    STANDARD,
    WHITE_POINTS,
    Profile,
)
from .profiles.profile import Point

BUILTIN_PROFILES: dict[str, Profile] = {
    "standard": STANDARD,
    "srgb": SRGB,
    "adobe_rgb": ADOBE_RGB,
    "cie_rgb": CIE_RGB,
    "ntsc_rgb": NTSC_RGB,
    "srgb_d50": SRGB_D50,
    "adobe_rgb_d50": ADOBE_RGB_D50,
}


def _normalize_name(name: str) -> str:
    return name.strip().lower().replace("-", "_").replace(" ", "_")


def get_profile(name: str) -> Profile:
    """Get a built-in RGB profile by name.

    Args:
        name: Profile name (case-insensitive, '-' and ' ' match '_')

    Returns:
        The shared immutable Profile

    Raises:
        ProfileNotFoundError: If name is not recognized
    """
    profile = BUILTIN_PROFILES.get(_normalize_name(name))

    if profile is None:
        raise ProfileNotFoundError(name, list(BUILTIN_PROFILES.keys()))

    return profile


def get_white_point(name: str) -> Point:
    """Get a standard illuminant white point by name.

    Args:
        name: Illuminant name such as 'D65' (case-insensitive)

    Returns:
        (Xn, 1.0, Zn) white point tuple

    Raises:
        ProfileNotFoundError: If name is not recognized
    """
    white = WHITE_POINTS.get(_normalize_name(name))

    if white is None:
        raise ProfileNotFoundError(name, list(WHITE_POINTS.keys()))

    return white
