import logging

import numpy as np

from ..models.content_bounds import ContentBounds
from ..models.image import Image
from .pixel_classifier import PixelClassifier

logger = logging.getLogger(__name__)

# Upper bound on pixels classified at once.
BLOCK_PIXELS = 1 << 20


class BoundsAccumulator:
    """
    Finds the smallest axis-aligned rectangle enclosing all content pixels.
    Holds no state between calls.

    The image is classified in blocks of whole rows so the temporary mask
    never exceeds ``block_pixels``; the only state carried across blocks is
    the row range found so far and one flag per column.
    """

    def __init__(self, block_pixels: int = BLOCK_PIXELS):
        self.block_pixels = block_pixels

    @staticmethod
    def _first_last(flags: np.ndarray):
        idx = np.flatnonzero(flags)
        if idx.size == 0:
            return None
        return int(idx[0]), int(idx[-1])

    def compute(self, image: Image, classifier: PixelClassifier) -> ContentBounds:
        height, width = image.height, image.width

        # ambiguous background: no crop, skip the scan entirely
        if classifier.ambiguous:
            return ContentBounds.full(width, height)

        block_rows = max(1, self.block_pixels // width)
        content_cols = np.zeros(width, dtype=bool)
        min_y = max_y = None

        for top in range(0, height, block_rows):
            mask = classifier.content_mask(image.pixels[top:top + block_rows])
            rows = self._first_last(mask.any(axis=1))
            if rows is None:
                # no content in this block
                continue
            first, last = rows
            if min_y is None:
                min_y = top + first
            max_y = top + last
            content_cols |= mask[first:last + 1].any(axis=0)

        if min_y is None:
            return ContentBounds.empty(width, height)
        min_x, max_x = self._first_last(content_cols)

        bounds = ContentBounds(min_x, max_x, min_y, max_y, width, height)
        logger.debug(f"Content bounds: x={min_x}..{max_x} y={min_y}..{max_y}")
        return bounds
