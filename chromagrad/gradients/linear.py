from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..colors.rgb import Rgb, as_rgb
from ..errors import InvalidPosition
from ..types.color_types import ColorInput, ControlPoint
from ..types.format_type import FormatType, default_format_dtypes, max_channel


@dataclass(frozen=True)
class Linear:
    """
    A linear gradient interpolating between 0 and 1.

    The gradient is conceptually the sequence ``(0, start)``, then every
    ``(position, color)`` pair of ``middle``, then ``(1, end)``.

    Args:
        start: Color at position 0
        end: Color at position 1
        middle: Intermediate control points, sorted by position, each
            position within [0, 1]

    Raises:
        ValueError: If a middle position lies outside [0, 1] or the middle
            points are not sorted in increasing order.
    """
    start: Rgb
    end: Rgb
    middle: Tuple[ControlPoint, ...] = field(default=())

    def __post_init__(self) -> None:
        middle = tuple((float(pos), as_rgb(color)) for pos, color in self.middle)

        if any(not 0.0 <= pos <= 1.0 for pos, _ in middle):
            raise ValueError("Control point positions must be within [0, 1].")

        positions = [pos for pos, _ in middle]
        if positions != sorted(positions):
            raise ValueError("Control points must be sorted in increasing order.")

        object.__setattr__(self, "start", as_rgb(self.start))
        object.__setattr__(self, "end", as_rgb(self.end))
        object.__setattr__(self, "middle", middle)

    @classmethod
    def from_colors(cls, *colors: ColorInput) -> "Linear":
        """
        Build a gradient with evenly spaced stops.

        The first color is the start, the last is the end, and every color in
        between sits at ``i / (n - 1)``.
        """
        if len(colors) < 2:
            raise ValueError("At least 2 colors are required for from_colors")

        last = len(colors) - 1
        middle = tuple((i / last, colors[i]) for i in range(1, last))
        return cls(as_rgb(colors[0]), as_rgb(colors[-1]), middle)

    def interpolate(self, x: float) -> Rgb:
        """Interpolate the color for the given position."""
        if math.isnan(x):
            raise InvalidPosition(x)

        if x <= 0.0:
            return self.start
        if x >= 1.0:
            return self.end

        last = (0.0, self.start)
        for point in self.points():
            if x > point[0]:
                last = point
                continue

            d = point[0] - last[0]
            t = 0.0 if d == 0.0 else (x - last[0]) / d

            return last[1].interpolate(point[1], t)

        raise InvalidPosition(x)

    def points(self) -> Iterator[ControlPoint]:
        """Iterate on the points of this gradient, endpoints included."""
        yield (0.0, self.start)
        yield from self.middle
        yield (1.0, self.end)

    def sample(
        self,
        steps: int,
        format_type: FormatType = FormatType.FLOAT,
    ) -> NDArray:
        """
        Sample the gradient at ``steps`` evenly spaced positions.

        Args:
            steps: Number of samples, endpoints included
            format_type: FLOAT for unit channels, INT for 0..255 channels

        Returns:
            NDArray with shape (steps, 3)
        """
        if steps < 1:
            raise ValueError("steps must be >= 1")

        u = np.linspace(0.0, 1.0, steps, dtype=float)
        result = np.array([self.interpolate(float(x)).value for x in u], dtype=float)

        if format_type == FormatType.INT:
            return np.round(result * max_channel[FormatType.INT]).astype(default_format_dtypes[FormatType.INT])
        return result.astype(default_format_dtypes[FormatType.FLOAT])
