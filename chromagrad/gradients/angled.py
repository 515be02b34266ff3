from __future__ import annotations

import math
from dataclasses import dataclass

from ..colors.rgb import Rgb
from ..errors import DegenerateGeometry
from ..vec2 import XY
from .interpolator import Interpolator, Vec2Input
from .linear import Linear

FRAC_PI_2 = math.pi / 2
TAU = 2 * math.pi


def normalize_angle(angle: float) -> float:
    """Remove full turns so the angle is in [0, TAU)."""
    if not math.isfinite(angle):
        raise ValueError(f"Angle must be finite, got {angle!r}")

    angle = angle % TAU
    # tiny negative angles round up to TAU
    if angle >= TAU:
        angle = 0.0

    return angle


@dataclass(frozen=True)
class Angled(Interpolator):
    """
    An angled linear gradient.

    Args:
        angle_rad: Angle of the gradient in radians. 0 runs top to bottom,
            PI/2 runs left to right. Any finite value is accepted.
        gradient: The gradient to apply following the gradient angle.
    """
    angle_rad: float
    gradient: Linear

    def __post_init__(self) -> None:
        if not math.isfinite(self.angle_rad):
            raise ValueError(f"Angled angle must be finite, got {self.angle_rad!r}")

    def interpolate(self, pos: Vec2Input, size: Vec2Input) -> Rgb:
        pos = XY.of(pos)
        size = XY.of(size)

        angle = normalize_angle(self.angle_rad)

        # Fold the 4 quadrants [0:PI/2[, [PI/2:PI[, [PI:3PI/2[, [3PI/2:TAU[ onto the first one.
        if angle < FRAC_PI_2:
            pass
        elif angle < math.pi:
            pos = XY(size.y - pos.y, pos.x)
            size = size.swap()
            angle -= FRAC_PI_2
        elif angle < math.pi + FRAC_PI_2:
            pos = size - pos
            angle -= math.pi
        else:
            pos = XY(pos.y, size.x - pos.x)
            size = size.swap()
            angle -= math.pi + FRAC_PI_2

        d = pos.to_float().rotated(angle).y
        max_d = size.to_float().rotated(angle).y
        if max_d == 0.0:
            raise DegenerateGeometry(f"Cannot apply an angled gradient on a surface of size {tuple(size)}")

        return self.gradient.interpolate(d / max_d)
