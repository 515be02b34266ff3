"""
Gradients
=========

- ``Linear``: colors along a single [0, 1] axis, with optional control points
- ``Radial``: distance from a center, normalized by the farthest corner
- ``Angled``: a linear gradient rotated by an arbitrary angle
- ``Bilinear``: four corner colors blended over a rectangle

``Radial``, ``Angled`` and ``Bilinear`` share the ``Interpolator`` interface:
``interpolate(pos, size)`` returns the color of cell ``pos`` on a surface of
``size`` cells.
"""
from .linear import Linear
from .interpolator import Interpolator
from .radial import Radial
from .angled import Angled, normalize_angle
from .bilinear import Bilinear

__all__ = [
    "Linear",
    "Interpolator",
    "Radial",
    "Angled",
    "Bilinear",
    "normalize_angle",
]
