from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from .rgb import LinearRGB

if TYPE_CHECKING:
    from .dispatch import Color

# U and V are offset so that neutral colors sit at 0.5
CENTER = 0.5


@dataclass(frozen=True)
class YUV:
    y: float
    u: float
    v: float

    def __post_init__(self):
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "u", float(self.u))
        object.__setattr__(self, "v", float(self.v))

    @classmethod
    def from_color(cls, color: "Color") -> "YUV":
        if isinstance(color, YUV):
            return color

        r, g, b = LinearRGB.from_color(color).as_tuple()
        return cls(
            0.299 * r + 0.587 * g + 0.114 * b,
            -0.147 * r - 0.289 * g + 0.437 * b + CENTER,
            0.615 * r - 0.515 * g - 0.100 * b + CENTER,
        )

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.y, self.u, self.v)

    def to_linear_rgb(self) -> LinearRGB:
        u = self.u - CENTER
        v = self.v - CENTER
        return LinearRGB(
            self.y + 1.140 * v,
            self.y - 0.394 * u - 0.581 * v,
            self.y + 2.028 * u,
        )
