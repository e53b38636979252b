from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from .rgb import LinearRGB

if TYPE_CHECKING:
    from .dispatch import Color


@dataclass(frozen=True)
class CMY:
    c: float
    m: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "c", float(self.c))
        object.__setattr__(self, "m", float(self.m))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_color(cls, color: "Color") -> "CMY":
        if isinstance(color, CMY):
            return color
        if isinstance(color, CMYK):
            return color.to_cmy()

        r, g, b = LinearRGB.from_color(color).as_tuple()
        return cls(1.0 - r, 1.0 - g, 1.0 - b)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.c, self.m, self.y)

    def to_linear_rgb(self) -> LinearRGB:
        return LinearRGB(1.0 - self.c, 1.0 - self.m, 1.0 - self.y)

    def to_cmyk(self) -> "CMYK":
        return CMYK.from_color(self)


@dataclass(frozen=True)
class CMYK:
    c: float
    m: float
    y: float
    k: float

    def __post_init__(self):
        object.__setattr__(self, "c", float(self.c))
        object.__setattr__(self, "m", float(self.m))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "k", float(self.k))

    @classmethod
    def from_color(cls, color: "Color") -> "CMYK":
        """Extract black as the smallest of C, M and Y.

        Pure black (k == 1) leaves no chromatic ink, so C, M and Y are 0
        rather than 0 / 0.
        """
        if isinstance(color, CMYK):
            return color

        c, m, y = CMY.from_color(color).as_tuple()

        k = min(c, m, y)
        nk = 1.0 - k

        if nk == 0.0:
            return cls(0.0, 0.0, 0.0, k)

        return cls((c - k) / nk, (m - k) / nk, (y - k) / nk, k)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.c, self.m, self.y, self.k)

    def to_cmy(self) -> CMY:
        nk = 1.0 - self.k
        return CMY(
            min(1.0, self.c * nk + self.k),
            min(1.0, self.m * nk + self.k),
            min(1.0, self.y * nk + self.k),
        )

    def to_linear_rgb(self) -> LinearRGB:
        return self.to_cmy().to_linear_rgb()
