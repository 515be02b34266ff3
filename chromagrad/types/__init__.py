from .format_type import FormatType, max_channel, default_format_dtypes
from .color_types import ColorTuple, ColorInput, ControlPoint

__all__ = [
    "FormatType",
    "max_channel",
    "default_format_dtypes",
    "ColorTuple",
    "ColorInput",
    "ControlPoint",
]
