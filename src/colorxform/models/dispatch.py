from typing import Union

from ..errors import UnsupportedColorError
from .ciexyz import XYZ, CIELab
from .cylindrical import HLS, HSV
from .luma import YUV
from .rgb import GammaRGB, LinearRGB
from .subtractive import CMY, CMYK

Color = Union[LinearRGB, GammaRGB, CMY, CMYK, HSV, HLS, YUV, XYZ, CIELab]


def as_linear_rgb(color: Color) -> LinearRGB:
    """Convert any color value to linear RGB.

    XYZ is decoded in the standard profile and CIELab in the D50 sRGB
    profile; call their ``to_linear_rgb`` directly to pick another one.

    Raises:
        UnsupportedColorError: If ``color`` is not one of the color variants
    """
    if isinstance(color, LinearRGB):
        return color
    if isinstance(color, (GammaRGB, CMY, CMYK, HSV, HLS, YUV, XYZ, CIELab)):
        return color.to_linear_rgb()

    raise UnsupportedColorError(color)
