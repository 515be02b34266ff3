from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence, Union

import numpy as np
from numpy import ndarray as NDArray

from ..colors.rgb import Rgb
from ..types.format_type import FormatType, default_format_dtypes, max_channel
from ..vec2 import XY

logger = logging.getLogger(__name__)

Vec2Input = Union[XY[int], Sequence[int]]


class Interpolator(ABC):
    """Something that can interpolate a color over a 2-D surface."""

    @abstractmethod
    def interpolate(self, pos: Vec2Input, size: Vec2Input) -> Rgb:
        """Get the color for the given position, given the total size."""

    def sample(
        self,
        size: Vec2Input,
        format_type: FormatType = FormatType.FLOAT,
    ) -> NDArray:
        """
        Evaluate the gradient on every cell of a surface.

        Args:
            size: (width, height) of the surface
            format_type: FLOAT for unit channels, INT for 0..255 channels

        Returns:
            NDArray with shape (height, width, 3); cell ``[y, x]`` holds
            ``interpolate((x, y), size)``.
        """
        size = XY.of(size)
        width, height = size
        logger.debug("Sampling %s on a %dx%d surface", type(self).__name__, width, height)

        result = np.zeros((height, width, 3), dtype=float)
        for y in range(height):
            for x in range(width):
                result[y, x] = self.interpolate(XY(x, y), size).value

        if format_type == FormatType.INT:
            return np.round(result * max_channel[FormatType.INT]).astype(default_format_dtypes[FormatType.INT])
        return result.astype(default_format_dtypes[FormatType.FLOAT])
