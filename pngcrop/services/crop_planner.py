from __future__ import annotations
from pathlib import Path
from typing import Union
import logging

from ..models.classification import ClassificationMode
from ..models.content_bounds import ContentBounds
from ..models.crop_result import CropResult, CropStatus
from ..repositories.image_repository import ImageRepository
from .bounds_service import BoundsAccumulator
from .pixel_classifier import build_classifier

logger = logging.getLogger(__name__)


class CropPlanner:
    """
    decode → classify → accumulate bounds → crop → encode, for one file.

    Degenerate scans never reach the encoder as an invalid rectangle:
    an ambiguous background or an image with no content is written back
    uncropped, same as an image whose content already fills it.
    """

    def __init__(self,
                 image_repository: ImageRepository = None,
                 bounds_accumulator: BoundsAccumulator = None):
        self.image_repository = image_repository or ImageRepository()
        self.bounds_accumulator = bounds_accumulator or BoundsAccumulator()

    def run(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
        mode: ClassificationMode = ClassificationMode.SAMPLE_BACKGROUND,
    ) -> CropResult:
        """
        Crop *input_path* into *output_path*.

        Raises:
            CropError: the input cannot be read/decoded or the output cannot be written.
        """
        logger.info(f"Processing {input_path}")
        image = self.image_repository.load(input_path)
        original_size = (image.width, image.height)

        classifier = build_classifier(mode, image)
        if classifier.requires_alpha and not image.has_alpha:
            logger.info(f"{input_path} has no alpha channel ({image.source_mode}), skipping")
            return CropResult(str(input_path), str(output_path),
                              CropStatus.SKIPPED_NO_ALPHA, original_size)

        bounds = self.bounds_accumulator.compute(image, classifier)

        if classifier.ambiguous:
            logger.info(f"{input_path}: corner pixels disagree, background is ambiguous")
            status = CropStatus.AMBIGUOUS_BACKGROUND
        elif bounds.is_empty:
            logger.warning(f"{input_path}: no content pixels found, keeping full image")
            bounds = ContentBounds.full(image.width, image.height)
            status = CropStatus.NO_CONTENT
        elif bounds.is_full:
            status = CropStatus.UNCHANGED
        else:
            status = CropStatus.CROPPED

        self.image_repository.save_cropped(image, bounds, output_path)

        result = CropResult(str(input_path), str(output_path), status, original_size, bounds)
        logger.info(
            f"{input_path} → {output_path}: {original_size[0]}x{original_size[1]}"
            f" → {bounds.width}x{bounds.height} ({status.value})"
        )
        return result
