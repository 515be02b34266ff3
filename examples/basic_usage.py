"""Basic Chromagrad usage examples.

Run directly with:
    python examples/basic_usage.py

Writes one PNG per gradient kind in the current directory.
"""
import logging
import math

from PIL import Image

from chromagrad import Angled, Bilinear, Linear, Radial, Rgb
from chromagrad.logger import LogBuffer, init
from chromagrad.types.format_type import FormatType

SIZE = (320, 200)


def save(name: str, gradient) -> None:
    pixels = gradient.sample(SIZE, FormatType.INT)
    Image.fromarray(pixels).save(f"{name}.png")


def demonstrate_linear() -> None:
    sunset = Linear(
        Rgb.from_hex("#1b1b3a"),
        Rgb.from_hex("#ffd166"),
        middle=[(0.4, Rgb.from_hex("#693668")), (0.7, Rgb.from_hex("#ef476f"))],
    )
    print("Linear samples:", sunset.sample(5, FormatType.INT).tolist())

    save("angled", Angled(angle_rad=math.pi / 3, gradient=sunset))
    save("radial", Radial(center=(0.3, 0.4), gradient=sunset))


def demonstrate_bilinear() -> None:
    corners = Bilinear(
        top_left=Rgb((1.0, 0.0, 0.0)),
        bottom_left=Rgb((0.0, 1.0, 0.0)),
        top_right=Rgb((0.0, 0.0, 1.0)),
        bottom_right=Rgb((1.0, 1.0, 1.0)),
    )
    save("bilinear", corners)


if __name__ == "__main__":
    buffer = LogBuffer()
    init(buffer, logging.getLogger("chromagrad"))

    demonstrate_linear()
    demonstrate_bilinear()

    for record in buffer.records():
        print(f"[{record.level_name}] {record.message}")
