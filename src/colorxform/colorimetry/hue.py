"""Hue sector helpers shared by the HSV and HLS models.

Hue is measured in radians in [0, 2π): red at 0, green at 2π/3 and blue at
4π/3.
"""

import math
from typing import List, Sequence, Tuple

DEG60 = math.pi / 3.0
DEG120 = DEG60 * 2.0
DEG240 = DEG120 * 2.0
DEG360 = math.pi * 2.0

ChannelOrder = List[Tuple[str, float]]


def chromatic_order(rgb: Sequence[float]) -> ChannelOrder:
    """Sort the channels ascending by value, tagged 'r', 'g' or 'b'.

    Ties keep r, g, b input order.
    """
    r, g, b = rgb
    channels = [("r", float(r)), ("g", float(g)), ("b", float(b))]
    return sorted(channels, key=lambda c: c[1])


def hue_from_order(order: ChannelOrder, chroma: float) -> float:
    """Hue of a color from its channel order and chroma (max - min).

    The result is not normalized and may be negative when red is the
    maximum and blue exceeds green. Callers must handle chroma == 0.
    """
    channels = dict(order)
    r, g, b = channels["r"], channels["g"], channels["b"]
    top = order[-1][0]

    if top == "r":
        return DEG60 * (g - b) / chroma
    if top == "g":
        return DEG60 * (b - r) / chroma + DEG120
    return DEG60 * (r - g) / chroma + DEG240


def normalize_hue(h: float) -> float:
    """Wrap a hue into [0, 2π) in constant time.

    Non-finite hues have no direction and come back as NaN.
    """
    if not math.isfinite(h):
        return math.nan
    wrapped = math.fmod(h, DEG360)
    if wrapped < 0.0:
        wrapped += DEG360
    # a tiny negative remainder rounds up to exactly 2π
    if wrapped >= DEG360:
        wrapped = 0.0
    return wrapped


def hue_to_rgb(h: float, low: float, high: float) -> Tuple[float, float, float]:
    """Map a normalized hue and channel extremes back to (r, g, b).

    Args:
        h: Hue in [0, 2π)
        low: Smallest channel value
        high: Largest channel value

    Returns:
        Linear (r, g, b)
    """
    if math.isnan(h):
        return (math.nan, math.nan, math.nan)

    span = high - low
    sector = min(int(h / DEG60), 5)

    if sector == 0:
        return (high, h / DEG60 * span + low, low)
    if sector == 1:
        return ((DEG120 - h) / DEG60 * span + low, high, low)
    if sector == 2:
        return (low, high, (h - DEG120) / DEG60 * span + low)
    if sector == 3:
        return (low, (DEG240 - h) / DEG60 * span + low, high)
    if sector == 4:
        return ((h - DEG240) / DEG60 * span + low, low, high)
    return (high, low, (DEG360 - h) / DEG60 * span + low)
