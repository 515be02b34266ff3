from __future__ import annotations

from dataclasses import dataclass

from ..colors.rgb import Rgb, as_rgb
from ..vec2 import XY
from .interpolator import Interpolator, Vec2Input
from .linear import Linear


def _axis_ratio(pos: int, size: int) -> float:
    # A surface one cell wide has a single column: it gets the first color.
    if size <= 1:
        return 0.0
    return float(pos) / float(size - 1)


@dataclass(frozen=True)
class Bilinear(Interpolator):
    """
    Bilinear gradient.

    Applies bilinear interpolation to a rectangle with a given color at each
    corner. The corner colors are reached exactly on the first and last
    row/column of the surface.
    """
    top_left: Rgb
    bottom_left: Rgb
    top_right: Rgb
    bottom_right: Rgb

    def __post_init__(self) -> None:
        for name in ("top_left", "bottom_left", "top_right", "bottom_right"):
            object.__setattr__(self, name, as_rgb(getattr(self, name)))

    def interpolate(self, pos: Vec2Input, size: Vec2Input) -> Rgb:
        pos = XY.of(pos)
        size = XY.of(size)
        ratio = XY(_axis_ratio(pos.x, size.x), _axis_ratio(pos.y, size.y))

        top = Linear(self.top_left, self.top_right).interpolate(ratio.x)
        bottom = Linear(self.bottom_left, self.bottom_right).interpolate(ratio.x)

        return Linear(top, bottom).interpolate(ratio.y)
