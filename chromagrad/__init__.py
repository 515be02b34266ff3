"""Chromagrad: color gradients sampled over 2-D surfaces."""

from .colors.rgb import Rgb, as_rgb
from .vec2 import XY
from .gradients import (
    Linear,
    Interpolator,
    Radial,
    Angled,
    Bilinear,
)
from .errors import GradientError, InvalidPosition, DegenerateGeometry
from .types.format_type import FormatType
from .logger import LogBuffer, LogRecord, BufferHandler

__version__ = "1.0.0"

__all__ = [
    # colors and geometry
    "Rgb",
    "as_rgb",
    "XY",
    # gradients
    "Linear",
    "Interpolator",
    "Radial",
    "Angled",
    "Bilinear",
    # errors
    "GradientError",
    "InvalidPosition",
    "DegenerateGeometry",
    # formats
    "FormatType",
    # logging
    "LogBuffer",
    "LogRecord",
    "BufferHandler",
    "__version__",
]
