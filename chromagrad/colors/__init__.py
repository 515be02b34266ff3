"""
Chromagrad Colors
=================

Immutable float RGB colors used as gradient stops.

>>> from chromagrad.colors import Rgb
>>> red = Rgb((1.0, 0.0, 0.0))
>>> Rgb.from_hex("#0000ff").value
(0.0, 0.0, 1.0)
>>> red.interpolate(Rgb((0.0, 0.0, 0.0)), 0.5).value
(0.5, 0.0, 0.0)
"""

from .rgb import Rgb, as_rgb

__all__ = ["Rgb", "as_rgb"]
