from __future__ import annotations

import math
from dataclasses import dataclass

from ..colors.rgb import Rgb
from ..errors import DegenerateGeometry
from ..vec2 import XY
from .interpolator import Interpolator, Vec2Input
from .linear import Linear


@dataclass(frozen=True)
class Radial(Interpolator):
    """
    Radial gradient.

    Args:
        center: Where the gradient starts, as a ratio of the total size.
            Each component must be in [0, 1].
        gradient: The gradient to apply according to the distance from the
            center. Position 1 is reached at the farthest corner.

    The farthest-corner distance is measured on the unrounded corner vector,
    while the center is truncated to a cell. On odd sizes the corner cells
    therefore stop short of the end color: a centered gradient on a 5x5
    surface gives cell (0, 0) the color at position 0.8. Rounding the corner
    vector down instead would reach the end color there, but would make a
    1x1 surface degenerate.
    """
    center: XY[float]
    gradient: Linear

    def __post_init__(self) -> None:
        center = XY.of(self.center).to_float()
        if not (0.0 <= center.x <= 1.0 and 0.0 <= center.y <= 1.0):
            raise ValueError(f"Radial center must be within [0, 1], got {tuple(center)}")
        object.__setattr__(self, "center", center)

    def interpolate(self, pos: Vec2Input, size: Vec2Input) -> Rgb:
        pos = XY.of(pos)
        size_f = XY.of(size).to_float()

        # Find the farthest corner from the center.
        to_corner = self.center.map(lambda c: 0.5 + abs(c - 0.5)) * size_f
        max_distance = math.sqrt(to_corner.sq_norm())
        if max_distance == 0.0:
            raise DegenerateGeometry(f"Cannot apply a radial gradient on a surface of size {tuple(size_f)}")

        center = (self.center * size_f).map(int)

        sq_dist = (center - pos).sq_norm()
        dist = math.sqrt(sq_dist)

        return self.gradient.interpolate(dist / max_distance)
