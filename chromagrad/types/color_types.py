from __future__ import annotations
from typing import Sequence, Tuple, TYPE_CHECKING, Union

if TYPE_CHECKING:
    from ..colors.rgb import Rgb

ColorTuple = Tuple[float, float, float]
ColorInput = Union["Rgb", Sequence[float]]
# position in [0, 1], color
ControlPoint = Tuple[float, "Rgb"]
