import math

import numpy as np
import pytest

from chromagrad import InvalidPosition, Linear, Rgb
from chromagrad.types.format_type import FormatType


@pytest.fixture
def three_stops(black, red, white):
    return Linear(black, white, middle=[(0.5, red)])


@pytest.mark.parametrize("x", [0.0, -0.1, -1.0, -math.inf])
def test_at_or_below_zero_returns_start(three_stops, black, x):
    assert three_stops.interpolate(x) is three_stops.start
    assert three_stops.interpolate(x) == black


@pytest.mark.parametrize("x", [1.0, 1.1, 42.0, math.inf])
def test_at_or_above_one_returns_end(three_stops, white, x):
    assert three_stops.interpolate(x) is three_stops.end
    assert three_stops.interpolate(x) == white


def test_two_colors_midpoint(black, white):
    gradient = Linear(black, white)
    assert gradient.middle == ()
    assert gradient.interpolate(0.5) == Rgb((0.5, 0.5, 0.5))


def test_control_point_segments(three_stops):
    assert three_stops.interpolate(0.25) == Rgb((0.5, 0.0, 0.0))
    assert three_stops.interpolate(0.75) == Rgb((1.0, 0.5, 0.5))
    assert three_stops.interpolate(0.5) == Rgb((1.0, 0.0, 0.0))


def test_coincident_points_earlier_wins(black, white, red, blue):
    gradient = Linear(black, white, middle=[(0.5, red), (0.5, blue)])
    # Exactly at 0.5 the first declared point is reached.
    assert gradient.interpolate(0.5) == red
    # Just after, the zero-length segment is skipped and blue leads to white.
    assert gradient.interpolate(0.75).value == pytest.approx((0.5, 0.5, 1.0))


def test_point_at_zero(black, white, red):
    gradient = Linear(black, white, middle=[(0.0, red)])
    assert gradient.interpolate(0.5).value == pytest.approx((1.0, 0.5, 0.5))


def test_nan_raises(three_stops):
    with pytest.raises(InvalidPosition) as excinfo:
        three_stops.interpolate(math.nan)
    assert isinstance(excinfo.value, ValueError)
    assert math.isnan(excinfo.value.position)


def test_points_includes_endpoints(three_stops, black, red, white):
    points = list(three_stops.points())
    assert points == [(0.0, black), (0.5, red), (1.0, white)]


@pytest.mark.parametrize("positions", [[], [0.5], [0.0, 0.2, 0.2, 1.0], [0.1, 0.3, 0.6, 0.9]])
def test_points_shape(black, white, red, positions):
    gradient = Linear(black, white, middle=[(p, red) for p in positions])
    points = list(gradient.points())
    assert len(points) == len(positions) + 2
    assert points[0][0] == 0.0
    assert points[-1][0] == 1.0
    xs = [p for p, _ in points]
    assert xs == sorted(xs)


def test_points_is_restartable(three_stops):
    assert list(three_stops.points()) == list(three_stops.points())


def test_colors_are_coerced():
    gradient = Linear((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), middle=[(0.5, (1.0, 0.0, 0.0))])
    assert isinstance(gradient.start, Rgb)
    assert isinstance(gradient.end, Rgb)
    assert isinstance(gradient.middle[0][1], Rgb)
    assert isinstance(gradient.middle, tuple)


def test_unsorted_middle_rejected(black, white, red):
    with pytest.raises(ValueError):
        Linear(black, white, middle=[(0.6, red), (0.4, red)])


@pytest.mark.parametrize("position", [-0.1, 1.5])
def test_out_of_range_middle_rejected(black, white, red, position):
    with pytest.raises(ValueError):
        Linear(black, white, middle=[(position, red)])


def test_frozen(three_stops, red):
    with pytest.raises(AttributeError):
        three_stops.start = red


def test_from_colors(black, red, white):
    gradient = Linear.from_colors(black, red, white)
    assert gradient == Linear(black, white, middle=[(0.5, red)])

    gradient = Linear.from_colors(black, red, white, red)
    assert [p for p, _ in gradient.points()] == pytest.approx([0.0, 1 / 3, 2 / 3, 1.0])

    with pytest.raises(ValueError):
        Linear.from_colors(black)


def test_sample(black, white):
    samples = Linear(black, white).sample(5)
    assert samples.shape == (5, 3)
    assert samples.dtype == np.float32
    assert np.allclose(samples[:, 0], [0.0, 0.25, 0.5, 0.75, 1.0])

    samples_int = Linear(black, white).sample(3, FormatType.INT)
    assert np.array_equal(samples_int, [[0, 0, 0], [128, 128, 128], [255, 255, 255]])

    with pytest.raises(ValueError):
        Linear(black, white).sample(0)


def test_middle_positions_stored_as_floats(black, red, white):
    gradient = Linear(black, white, middle=((np.float32(0.5), red), (1, white)))
    assert all(type(pos) is float for pos, _ in gradient.middle)
    assert [pos for pos, _ in gradient.points()] == [0.0, 0.5, 1.0, 1.0]
