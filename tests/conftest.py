import numpy as np
import pytest
from PIL import Image as PILImage

from .helpers import rgba_canvas


@pytest.fixture
def write_image(tmp_path):
    """Write an (H, W, 4) array to tmp_path/<name>, optionally converted to *mode*."""
    def _write(pixels, name="in.png", mode=None):
        pil_img = PILImage.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
        if mode is not None:
            pil_img = pil_img.convert(mode)
        path = tmp_path / name
        pil_img.save(path)
        return path
    return _write


@pytest.fixture
def two_dots():
    """4x4 transparent canvas with content at (1,1) and (2,2)."""
    pixels = rgba_canvas(4, 4)
    pixels[1, 1] = (255, 0, 0, 255)
    pixels[2, 2] = (0, 255, 0, 255)
    return pixels


@pytest.fixture
def framed_dot():
    """3x3 opaque grey frame around a single darker-grey pixel."""
    pixels = rgba_canvas(3, 3, fill=(10, 10, 10, 255))
    pixels[1, 1] = (20, 20, 20, 255)
    return pixels