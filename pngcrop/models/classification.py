from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .image import Pixel


class ClassificationMode(str, Enum):
    ALPHA_ONLY = "alpha"
    SAMPLE_BACKGROUND = "sample"


class PixelClass(Enum):
    CONTENT = "content"
    BACKGROUND = "background"


class SampleOutcome(Enum):
    """How the background sample was picked from the corner pixels."""
    MATCHING_CORNERS = "matching_corners"
    TRANSPARENT_TOP_LEFT = "transparent_top_left"
    TRANSPARENT_BOTTOM_RIGHT = "transparent_bottom_right"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class BackgroundSample:
    outcome: SampleOutcome
    pixel: Optional[Pixel] = None # None iff outcome is AMBIGUOUS

    @property
    def is_ambiguous(self) -> bool:
        return self.outcome is SampleOutcome.AMBIGUOUS
