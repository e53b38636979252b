"""Transfer curves between linear RGB and gamma-encoded RGB."""

import warnings
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

import numpy as np

from ..errors import NumericDomainWarning


@dataclass(frozen=True)
class GammaCurve:
    name: str
    encode: Callable[[float], float]
    decode: Callable[[float], float]
    profile_name: str


def _srgb_encode(c: float) -> float:
    """sRGB transfer function (IEC 61966-2-1:1999).

    - If c <= 0.0031308: 12.92 * c
    - Otherwise: 1.055 * c^(1/2.4) - 0.055
    """
    threshold = 0.0031308
    a = 12.92
    b = 1.055
    exponent = 1.0 / 2.4
    d = 0.055

    if c <= threshold:
        return a * c
    return b * np.power(c, exponent) - d


def _srgb_decode(c: float) -> float:
    # 0.040450 is not exactly 12.92 * 0.0031308; kept as published
    threshold = 0.040450

    if c <= threshold:
        return c / 12.92
    return np.power((c + 0.055) / 1.055, 2.4)


def _adobe_rgb_encode(c: float) -> float:
    if c <= 0.00174:
        return 32.0 * c
    return np.power(c, 1.0 / 2.2)


def _adobe_rgb_decode(c: float) -> float:
    if c <= 0.0556:
        return c / 32.0
    return np.power(c, 2.2)


SRGB_CURVE = GammaCurve(
    name="sRGB",
    encode=_srgb_encode,
    decode=_srgb_decode,
    profile_name="srgb",
)

ADOBE_RGB_CURVE = GammaCurve(
    name="Adobe RGB",
    encode=_adobe_rgb_encode,
    decode=_adobe_rgb_decode,
    profile_name="adobe_rgb",
)


def encode_rgb(
    curve: GammaCurve, rgb: Sequence[float]
) -> Tuple[float, float, float]:
    """Gamma-encode each linear channel independently.

    Args:
        curve: Transfer curve to apply
        rgb: Linear (r, g, b), nominally in [0, 1]; not clamped

    Returns:
        Encoded (r, g, b)
    """
    return _apply_per_channel(curve.encode, rgb, curve.name)


def decode_rgb(
    curve: GammaCurve, rgb: Sequence[float]
) -> Tuple[float, float, float]:
    """Decode gamma-encoded channels back to linear light.

    Args:
        curve: Transfer curve the values were encoded with
        rgb: Encoded (r, g, b), nominally in [0, 1]; not clamped

    Returns:
        Linear (r, g, b)
    """
    return _apply_per_channel(curve.decode, rgb, curve.name)


def _apply_per_channel(
    func: Callable[[float], float], rgb: Sequence[float], curve_name: str
) -> Tuple[float, float, float]:
    values = np.asarray(rgb, dtype=np.float64)

    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        result = np.array([func(c) for c in values], dtype=np.float64)

    if np.any(np.isfinite(values) & ~np.isfinite(result)):
        warnings.warn(
            f"{curve_name} curve produced non-finite output for {tuple(values)}",
            NumericDomainWarning,
            stacklevel=3,
        )

    return (float(result[0]), float(result[1]), float(result[2]))
