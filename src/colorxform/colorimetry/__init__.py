from .adaptation import (
    BRADFORD,
    BRADFORD_INV,
    adapt_xyz,
    adaptation_matrix,
    same_white_point,
)
from .cielab import lab_to_xyz, xyz_to_lab
from .gamma import (
    ADOBE_RGB_CURVE,
    SRGB_CURVE,
    GammaCurve,
    decode_rgb,
    encode_rgb,
)
from .hue import chromatic_order, hue_from_order, hue_to_rgb, normalize_hue
from .matrix import decompose_matrix, rgb_to_xyz_matrix, xyz_to_rgb_matrix
from .transform import rgb_to_xyz, xyz_to_rgb, xyz_to_rgb_with_matrix

__all__ = [
    "BRADFORD",
    "BRADFORD_INV",
    "adaptation_matrix",
    "adapt_xyz",
    "same_white_point",
    "xyz_to_lab",
    "lab_to_xyz",
    "GammaCurve",
    "SRGB_CURVE",
    "ADOBE_RGB_CURVE",
    "encode_rgb",
    "decode_rgb",
    "chromatic_order",
    "hue_from_order",
    "normalize_hue",
    "hue_to_rgb",
    "rgb_to_xyz_matrix",
    "xyz_to_rgb_matrix",
    "decompose_matrix",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "xyz_to_rgb_with_matrix",
]
