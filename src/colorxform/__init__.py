__version__ = "0.1.0"

from .errors import (
    ColorxformError,
    DegenerateProfileError,
    NumericDomainWarning,
    ProfileNotFoundError,
    UnsupportedColorError,
)
from .models import (
    CMY,
    CMYK,
    HLS,
    HSV,
    XYZ,
    YUV,
    CIELab,
    Color,
    GammaRGB,
    LinearRGB,
    as_linear_rgb,
)
from .profiles import (
    ADOBE_RGB,
    ADOBE_RGB_D50,
    CIE_RGB,
    NTSC_RGB,
    SRGB,
    SRGB_D50,
    STANDARD,
    Profile,
)
from .provider import get_profile, get_white_point

__all__ = [
    "__version__",
    "ColorxformError",
    "DegenerateProfileError",
    "NumericDomainWarning",
    "ProfileNotFoundError",
    "UnsupportedColorError",
    "LinearRGB",
    "GammaRGB",
    "CMY",
    "CMYK",
    "HSV",
    "HLS",
    "YUV",
    "XYZ",
    "CIELab",
    "Color",
    "as_linear_rgb",
    "Profile",
    "CIE_RGB",
    "SRGB",
    "ADOBE_RGB",
    "NTSC_RGB",
    "SRGB_D50",
    "ADOBE_RGB_D50",
    "STANDARD",
    "get_profile",
    "get_white_point",
]
