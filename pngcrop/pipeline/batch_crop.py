# pipeline/batch_crop.py
from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Optional, Union
import logging

from tqdm import tqdm

from ..errors import CropError
from ..models.classification import ClassificationMode
from ..models.crop_result import CropResult
from ..repositories.image_repository import ImageRepository
from ..services.crop_planner import CropPlanner
from ..services.path_resolver import PathResolver

logger = logging.getLogger(__name__)


def expand_sources(
    sources: Iterable[Union[str, Path]],
    *,
    image_repository: ImageRepository,
    recursive: bool = False,
) -> List[str]:
    """
    Replace directory arguments with the image files inside them.
    Anything else is passed through untouched, missing files included,
    so they get reported by the planner.
    """
    expanded = []
    for src in sources:
        if Path(src).is_dir():
            found = [str(p) for p in image_repository.iter_dir(src, recursive=recursive)]
            if not found:
                logger.warning(f"No images found in {src}")
            expanded.extend(found)
        else:
            expanded.append(str(src))
    return expanded


def crop_files(
    sources: Iterable[Union[str, Path]],
    *,
    mode: ClassificationMode = ClassificationMode.SAMPLE_BACKGROUND,
    explicit_output: Optional[Union[str, Path]] = None,
    planner: CropPlanner = None,
    resolver: PathResolver = None,
    recursive: bool = False,
    show_progress: bool = True,
) -> List[CropResult]:
    """
    For every source:
        • resolve its destination
        • crop it (one file at a time, to completion)
        • report failures and move on to the next file
    Returns the results of the files that succeeded.
    """
    planner = planner or CropPlanner()
    resolver = resolver or PathResolver()

    paths = expand_sources(sources, image_repository=planner.image_repository,
                           recursive=recursive)
    if explicit_output is not None and len(paths) != 1:
        raise ValueError(f"An explicit output needs exactly one source, got {len(paths)}")

    results = []
    for path in tqdm(paths, desc="Cropping", unit="file",
                     disable=not show_progress or len(paths) < 2):
        dest = resolver.resolve(path, explicit_output)
        try:
            results.append(planner.run(path, dest, mode))
        except CropError as err:
            tqdm.write(f"{path} does not exist or is not a valid PNG: {err}")
    return results
