from .ciexyz import XYZ, CIELab
from .cylindrical import HLS, HSV
from .dispatch import Color, as_linear_rgb
from .luma import YUV
from .rgb import GammaRGB, LinearRGB
from .subtractive import CMY, CMYK

__all__ = [
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
]
