import pytest

from chromagrad import Rgb


@pytest.fixture
def black():
    return Rgb((0.0, 0.0, 0.0))


@pytest.fixture
def white():
    return Rgb((1.0, 1.0, 1.0))


@pytest.fixture
def red():
    return Rgb((1.0, 0.0, 0.0))


@pytest.fixture
def blue():
    return Rgb((0.0, 0.0, 1.0))
