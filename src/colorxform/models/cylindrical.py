"""Cylindrical HSV (hexcone) and HLS (bicone) models over linear RGB."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from ..colorimetry.hue import chromatic_order, hue_from_order, hue_to_rgb, normalize_hue
from .rgb import LinearRGB

if TYPE_CHECKING:
    from .dispatch import Color


@dataclass(frozen=True)
class HSV:
    """Hue in radians [0, 2π), saturation and value in [0, 1].

    The hue is normalized on construction.
    """

    h: float
    s: float
    v: float

    def __post_init__(self):
        object.__setattr__(self, "h", normalize_hue(float(self.h)))
        object.__setattr__(self, "s", float(self.s))
        object.__setattr__(self, "v", float(self.v))

    @classmethod
    def from_color(cls, color: "Color") -> "HSV":
        if isinstance(color, HSV):
            return color

        order = chromatic_order(LinearRGB.from_color(color).as_tuple())
        v = order[-1][1]
        chroma = v - order[0][1]

        # achromatic colors have no defined hue; 0 is used
        h = hue_from_order(order, chroma) if chroma != 0.0 else 0.0
        s = chroma / v if v != 0.0 else 0.0

        return cls(h, s, v)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.h, self.s, self.v)

    def to_linear_rgb(self) -> LinearRGB:
        high = self.v
        low = (1.0 - self.s) * self.v
        return LinearRGB(*hue_to_rgb(self.h, low, high))


@dataclass(frozen=True)
class HLS:
    """Hue in radians [0, 2π), lightness and saturation in [0, 1]."""

    h: float
    l: float
    s: float

    def __post_init__(self):
        object.__setattr__(self, "h", normalize_hue(float(self.h)))
        object.__setattr__(self, "l", float(self.l))
        object.__setattr__(self, "s", float(self.s))

    @classmethod
    def from_color(cls, color: "Color") -> "HLS":
        if isinstance(color, HLS):
            return color

        order = chromatic_order(LinearRGB.from_color(color).as_tuple())
        high = order[-1][1]
        low = order[0][1]
        chroma = high - low
        l2 = high + low

        if chroma == 0.0:
            return cls(0.0, l2 / 2.0, 0.0)

        h = hue_from_order(order, chroma)
        s = chroma / l2 if l2 < 1.0 else chroma / (2.0 - l2)

        return cls(h, l2 / 2.0, s)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.h, self.l, self.s)

    def to_linear_rgb(self) -> LinearRGB:
        if self.s == 0.0:
            return LinearRGB(self.l, self.l, self.l)

        ls = self.l * self.s
        if self.l < 0.5:
            low, high = self.l - ls, self.l + ls
        else:
            low, high = self.l - self.s + ls, self.l + self.s - ls

        return LinearRGB(*hue_to_rgb(self.h, low, high))
