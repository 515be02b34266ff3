from __future__ import annotations
from typing import ClassVar, Iterator, Sequence, Tuple, cast
from boundednumbers import clamp
from numpy import ndarray
import numpy as np

from ..types.format_type import FormatType, max_channel, default_format_dtypes
from ..types.color_types import ColorInput, ColorTuple


class Rgb:
    """
    Immutable RGB color with float channels in [0, 1].

    Channel values outside the unit range are clamped on construction.
    Instances are frozen once ``__init__`` returns, so a single color can be
    shared by any number of gradients and threads.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    format_type: ClassVar[FormatType] = FormatType.FLOAT

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Sequence[float]) -> None:
        if isinstance(value, Rgb):
            value = value.value
        if isinstance(value, ndarray):
            value = value.tolist()
        value = tuple(value)

        if len(value) != self.num_channels:
            raise ValueError(f"Rgb expects {self.num_channels} channels, got {value!r}")

        maximum = max_channel[self.format_type]
        self._value = cast(ColorTuple, tuple(
            float(clamp(float(v), 0.0, maximum)) for v in value
        ))

        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_int(cls, value: Sequence[int]) -> Rgb:
        """Build a color from 0..255 integer channels."""
        maximum = max_channel[FormatType.INT]
        value = tuple(value)
        if len(value) != cls.num_channels:
            raise ValueError(f"Rgb expects {cls.num_channels} channels, got {value!r}")
        return cls(tuple(v / maximum for v in value))

    @classmethod
    def from_hex(cls, code: str) -> Rgb:
        """Parse ``#rrggbb`` or ``rrggbb``."""
        digits = code.strip().lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Invalid hex color: {code!r}")
        try:
            channels = tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError as e:
            raise ValueError(f"Invalid hex color: {code!r}") from e
        return cls.from_int(channels)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorTuple:
        return self._value

    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    # ------------------ OPERATIONS ------------------
    def interpolate(self, other: Rgb, t: float) -> Rgb:
        """
        Channel-wise linear interpolation towards ``other``.

        ``t = 0`` returns this color's channels and ``t = 1`` returns
        ``other``'s channels, both exactly.
        """
        u = 1.0 - t
        return Rgb(tuple(a * u + b * t for a, b in zip(self._value, other.value)))

    def as_int(self) -> Tuple[int, int, int]:
        maximum = max_channel[FormatType.INT]
        return cast(Tuple[int, int, int], tuple(int(round(v * maximum)) for v in self._value))

    def to_hex(self) -> str:
        return "#" + "".join(f"{v:02x}" for v in self.as_int())

    def to_array(self, format_type: FormatType = FormatType.FLOAT) -> ndarray:
        if format_type == FormatType.INT:
            return np.array(self.as_int(), dtype=default_format_dtypes[FormatType.INT])
        return np.array(self._value, dtype=default_format_dtypes[FormatType.FLOAT])

    # ------------------ DUNDERS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rgb):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Rgb({self._value[0]!r}, {self._value[1]!r}, {self._value[2]!r})"


def as_rgb(value: ColorInput) -> Rgb:
    """Coerce an ``Rgb`` or a 3-sequence of unit floats to ``Rgb``."""
    if isinstance(value, Rgb):
        return value
    return Rgb(value)
