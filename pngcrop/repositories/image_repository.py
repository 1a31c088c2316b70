from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, Union
import logging

import numpy as np
from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from .. import settings
from ..errors import DecodeError, EncodeError, InputNotFoundError
from ..models.content_bounds import ContentBounds
from ..models.image import Image

logger = logging.getLogger(__name__)

# Pillow modes that carry an alpha channel of their own.
_ALPHA_MODES = {"RGBA", "RGBa", "LA", "La", "PA"}
# Modes an RGBA crop converts back to without losing anything.
_RESTORABLE_MODES = {"RGB", "L", "LA"}


class ImageRepository:
    """
    Handles file I/O for Image entities. The only place Pillow is touched.
    """
    def __init__(self, valid_exts: Iterable[str] | None = None):
        self.VALID_EXTS = {e.lower() for e in (valid_exts or settings.VALID_EXTENSIONS)}

    @staticmethod
    def _has_alpha(pil_img: PILImage.Image) -> bool:
        return pil_img.mode in _ALPHA_MODES or "transparency" in pil_img.info

    @classmethod
    def load(cls, path: Union[str, Path]) -> Image:
        """
        Decode any Pillow-readable file into an RGBA Image.
        """
        path = Path(path)
        try:
            with PILImage.open(path) as pil_img:
                pil_img.load()
                source_mode = pil_img.mode
                has_alpha = cls._has_alpha(pil_img)
                rgba = pil_img.convert("RGBA")
        except UnidentifiedImageError as err:
            raise DecodeError(path, err) from err
        except (FileNotFoundError, IsADirectoryError, PermissionError) as err:
            raise InputNotFoundError(path, err) from err
        except (OSError, SyntaxError, ValueError, PILImage.DecompressionBombError) as err:
            # truncated or corrupt data; Pillow raises SyntaxError for broken chunks
            raise DecodeError(path, err) from err

        pixels = np.asarray(rgba, dtype=np.uint8)
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise DecodeError(path, f"image has no pixels: {pixels.shape[1]}x{pixels.shape[0]}")
        return Image(pixels=pixels, path=path, has_alpha=has_alpha, source_mode=source_mode)

    @staticmethod
    def save_cropped(image: Image, bounds: ContentBounds, destination: Union[str, Path]) -> None:
        """
        Crop *image* to *bounds* and encode it to *destination*.
        The format follows the destination's extension.
        """
        pil_img = PILImage.fromarray(np.ascontiguousarray(image.pixels))
        cropped = pil_img.crop(bounds.as_box())
        if (image.source_mode in _RESTORABLE_MODES
                and image.has_alpha == (image.source_mode in _ALPHA_MODES)):
            # no tRNS colour key that the source mode could not carry
            cropped = cropped.convert(image.source_mode)
        elif not image.has_alpha:
            # keep opaque sources opaque so formats like JPEG can be written
            cropped = cropped.convert("RGB")
        try:
            cropped.save(destination)
        except (OSError, ValueError, KeyError) as err:
            raise EncodeError(destination, err) from err

    def iter_dir(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> Iterator[Path]:
        """
        Yield image file paths found in *folder*, sorted.
        """
        folder = Path(folder)
        if not folder.is_dir():
            raise NotADirectoryError(folder)

        allowed = {e.lower() for e in (exts or self.VALID_EXTS)}
        pattern = "**/*" if recursive else "*"

        for p in sorted(folder.glob(pattern)):
            if not p.is_file():
                continue
            if p.suffix.lower() not in allowed:
                logger.debug(f"Skipping due to extension: {p}")
                continue
            yield p
