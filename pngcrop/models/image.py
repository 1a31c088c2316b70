from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple
import numpy as np

Pixel = Tuple[int, int, int, int]  # (r, g, b, a)


@dataclass
class Image:
    """
    Simple data object: RGBA pixels (+ optional source path for bookkeeping).
    No Pillow logic outside the repository.
    """
    pixels: np.ndarray # Shape (H, W, 4), dtype uint8, RGBA order.
    path: Path | None = None # Source of the image.
    has_alpha: bool = True # Decoded colour model carried alpha/transparency.
    source_mode: str = "RGBA" # Pillow mode before conversion.

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def pixel_at(self, x: int, y: int) -> Pixel:
        return tuple(int(c) for c in self.pixels[y, x])
