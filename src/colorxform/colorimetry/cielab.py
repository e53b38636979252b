"""CIE L*a*b* encoding relative to a reference white point."""

import warnings
from typing import Sequence, Tuple

import numpy as np

from ..errors import NumericDomainWarning

DELTA = 6.0 / 29.0
EPSILON = DELTA**3
KAPPA = (29.0 / 3.0) ** 3

Triple = Tuple[float, float, float]


def _lightness(t: float) -> float:
    """116 * f(t) - 16, with f the CIE cube-root / linear piecewise function.

    Above EPSILON: 116 * t^(1/3) - 16
    Otherwise: KAPPA * t
    """
    if t > EPSILON:
        return 116.0 * np.cbrt(t) - 16.0
    return KAPPA * t


def _inverse(f: float, n: float) -> float:
    if f > DELTA:
        return f * f * f * n
    return (116.0 * f - 16.0) * n / KAPPA


def xyz_to_lab(xyz: Sequence[float], white: Sequence[float]) -> Triple:
    """Encode XYZ as CIE L*a*b* relative to a white point.

    No chromatic adaptation happens here; the XYZ values must already be
    relative to ``white``.

    Args:
        xyz: (X, Y, Z)
        white: Reference white (Xn, Yn, Zn)

    Returns:
        (L*, a*, b*)
    """
    x, y, z = (np.float64(v) for v in xyz)
    xn, yn, zn = (np.float64(v) for v in white)

    with np.errstate(invalid="ignore", divide="ignore"):
        ly = _lightness(y / yn)
        lx = _lightness(x / xn)
        lz = _lightness(z / zn)

        lab = (
            float(ly),
            float(500.0 / 116.0 * (lx - ly)),
            float(200.0 / 116.0 * (ly - lz)),
        )

    _warn_if_not_finite(lab, (*xyz, *white), "CIELab encoding")
    return lab


def lab_to_xyz(lab: Sequence[float], white: Sequence[float]) -> Triple:
    """Decode CIE L*a*b* back to XYZ relative to the same white point.

    Args:
        lab: (L*, a*, b*)
        white: Reference white (Xn, Yn, Zn) the Lab values were encoded against

    Returns:
        (X, Y, Z)
    """
    l, a, b = (float(v) for v in lab)
    xn, yn, zn = (float(v) for v in white)

    fy = (l + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    return (_inverse(fx, xn), _inverse(fy, yn), _inverse(fz, zn))


def _warn_if_not_finite(
    values: Triple, inputs: Sequence[float], stage: str
) -> None:
    if all(np.isfinite(inputs)) and not all(np.isfinite(values)):
        warnings.warn(
            f"{stage} produced non-finite output {values}; "
            "check the reference white point for zero components",
            NumericDomainWarning,
            stacklevel=3,
        )
