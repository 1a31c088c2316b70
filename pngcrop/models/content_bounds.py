from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ContentBounds:
    """
    Inclusive bounding box of the content pixels of one image.
    An empty result keeps the inverted sentinel (min_x > max_x).
    """
    min_x: int
    max_x: int
    min_y: int
    max_y: int
    image_width: int
    image_height: int

    @classmethod
    def full(cls, width: int, height: int) -> "ContentBounds":
        return cls(0, width - 1, 0, height - 1, width, height)

    @classmethod
    def empty(cls, width: int, height: int) -> "ContentBounds":
        return cls(width, 0, height, 0, width, height)

    @property
    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_y > self.max_y

    @property
    def is_full(self) -> bool:
        return (self.min_x == 0 and self.min_y == 0
                and self.max_x == self.image_width - 1
                and self.max_y == self.image_height - 1)

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def as_box(self) -> Tuple[int, int, int, int]:
        """
        Returns the half-open (left, upper, right, lower) box Pillow expects.
        """
        if self.is_empty:
            raise ValueError(f"Cannot crop to empty bounds {self}")
        return self.min_x, self.min_y, self.max_x + 1, self.max_y + 1
