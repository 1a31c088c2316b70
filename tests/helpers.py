import numpy as np
from PIL import Image as PILImage

from pngcrop.models.image import Image


def rgba_canvas(width, height, fill=(0, 0, 0, 0)):
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, :] = fill
    return pixels


def as_image(pixels):
    return Image(pixels=np.asarray(pixels, dtype=np.uint8))


def write_broken_png(path):
    """
    Write a PNG that opens fine but fails while decoding: the type of its
    second IDAT chunk is overwritten with garbage.
    """
    noise = np.random.default_rng(0).integers(0, 256, (400, 400, 4), dtype=np.uint8)
    PILImage.fromarray(noise).save(path)
    data = bytearray(path.read_bytes())
    second = data.index(b"IDAT", data.index(b"IDAT") + 4)
    data[second:second + 4] = b"\x00\x01\x02\x03"
    path.write_bytes(bytes(data))
    return path
