# services/pixel_classifier.py
from __future__ import annotations
import logging

import numpy as np

from ..models.classification import (
    BackgroundSample,
    ClassificationMode,
    PixelClass,
    SampleOutcome,
)
from ..models.image import Image, Pixel

logger = logging.getLogger(__name__)

ALPHA_IDX = 3


class PixelClassifier:
    """
    Decides per pixel whether it is background (cropped) or content (kept).

    ``classify`` answers for one pixel, ``content_mask`` answers for a whole
    (H, W, 4) array at once with the same rule.
    """
    requires_alpha: bool = False
    ambiguous: bool = False

    def classify(self, pixel: Pixel) -> PixelClass:
        raise NotImplementedError

    def content_mask(self, pixels: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class AlphaOnlyClassifier(PixelClassifier):
    """Any non-zero opacity counts as content."""
    requires_alpha = True

    def classify(self, pixel: Pixel) -> PixelClass:
        return PixelClass.BACKGROUND if pixel[ALPHA_IDX] == 0 else PixelClass.CONTENT

    def content_mask(self, pixels: np.ndarray) -> np.ndarray:
        return pixels[:, :, ALPHA_IDX] != 0


class SampleBackgroundClassifier(PixelClassifier):
    """Content is every pixel not exactly equal to the background sample."""

    def __init__(self, sample: BackgroundSample):
        self.sample = sample
        self.ambiguous = sample.is_ambiguous
        # RGBA packed into one uint32 so comparisons need no (H, W, 4) temporary
        self._sample_packed = (
            None if self.ambiguous
            else np.array(sample.pixel, dtype=np.uint8).view(np.uint32)[0]
        )

    def classify(self, pixel: Pixel) -> PixelClass:
        if self.ambiguous:
            return PixelClass.CONTENT
        if tuple(int(c) for c in pixel) == self.sample.pixel:
            return PixelClass.BACKGROUND
        return PixelClass.CONTENT

    def content_mask(self, pixels: np.ndarray) -> np.ndarray:
        if self.ambiguous:
            return np.ones(pixels.shape[:2], dtype=bool)
        packed = np.ascontiguousarray(pixels, dtype=np.uint8).view(np.uint32)[..., 0]
        return packed != self._sample_packed


def resolve_background_sample(image: Image) -> BackgroundSample:
    """
    Pick the background colour from the corner pixels.

    The top-left and bottom-right pixels are the only ones that cannot be
    enclosed by content in a bordered image:
        1) both corners equal    → that colour
        2) top-left transparent  → top-left
        3) bottom-right transp.  → bottom-right
        4) otherwise             → ambiguous, nothing can be cropped
    """
    topleft = image.pixel_at(0, 0)
    botright = image.pixel_at(image.width - 1, image.height - 1)

    if topleft == botright:
        return BackgroundSample(SampleOutcome.MATCHING_CORNERS, topleft)
    if topleft[ALPHA_IDX] == 0:
        return BackgroundSample(SampleOutcome.TRANSPARENT_TOP_LEFT, topleft)
    if botright[ALPHA_IDX] == 0:
        return BackgroundSample(SampleOutcome.TRANSPARENT_BOTTOM_RIGHT, botright)
    return BackgroundSample(SampleOutcome.AMBIGUOUS)


def build_classifier(mode: ClassificationMode, image: Image) -> PixelClassifier:
    mode = ClassificationMode(mode)
    if mode is ClassificationMode.ALPHA_ONLY:
        return AlphaOnlyClassifier()

    sample = resolve_background_sample(image)
    logger.debug(f"Background sample: {sample.outcome.value} {sample.pixel}")
    return SampleBackgroundClassifier(sample)
