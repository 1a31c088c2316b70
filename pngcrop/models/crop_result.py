from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .content_bounds import ContentBounds


class CropStatus(Enum):
    CROPPED = "cropped"
    UNCHANGED = "unchanged"                       # content already fills the image
    NO_CONTENT = "no_content"                     # every pixel was background
    AMBIGUOUS_BACKGROUND = "ambiguous_background"
    SKIPPED_NO_ALPHA = "skipped_no_alpha"         # nothing written


@dataclass
class CropResult:
    """
    Data object describing what happened to a single input file.
    """
    source: str
    destination: str
    status: CropStatus
    original_size: Tuple[int, int]                # (width, height)
    bounds: Optional[ContentBounds] = None

    @property
    def written(self) -> bool:
        return self.status is not CropStatus.SKIPPED_NO_ALPHA

    @property
    def cropped_size(self) -> Tuple[int, int]:
        if self.bounds is None or self.bounds.is_empty:
            return self.original_size
        return self.bounds.width, self.bounds.height
