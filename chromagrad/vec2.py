from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, Sequence, TypeVar, Union

T = TypeVar("T", int, float)
U = TypeVar("U", int, float)


@dataclass(frozen=True)
class XY(Generic[T]):
    """
    Immutable pair of numbers.

    Used for integer cell positions and surface sizes, and for float ratios
    once converted with ``to_float``. Arithmetic is component-wise.
    """
    x: T
    y: T

    @classmethod
    def of(cls, value: Union["XY", Sequence]) -> "XY":
        if isinstance(value, XY):
            return value
        x, y = value
        return cls(x, y)

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y

    def __add__(self, other: "XY") -> "XY":
        return XY(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "XY") -> "XY":
        return XY(self.x - other.x, self.y - other.y)

    def __mul__(self, other: "XY") -> "XY":
        return XY(self.x * other.x, self.y * other.y)

    def map(self, fn: Callable[[T], U]) -> "XY[U]":
        return XY(fn(self.x), fn(self.y))

    def to_float(self) -> "XY[float]":
        return self.map(float)

    def swap(self) -> "XY[T]":
        return XY(self.y, self.x)

    def sq_norm(self) -> T:
        return self.x * self.x + self.y * self.y

    def rotated(self, angle_rad: float) -> "XY[float]":
        """Rotate by ``angle_rad``: ``(x cos - y sin, x sin + y cos)``."""
        sin, cos = math.sin(angle_rad), math.cos(angle_rad)
        return XY(self.x * cos - self.y * sin, self.x * sin + self.y * cos)
