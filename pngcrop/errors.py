from __future__ import annotations
from pathlib import Path
from typing import Union


class CropError(Exception):
    """
    Terminal failure for a single file, tagged with the offending path.
    The underlying exception is kept in ``cause`` (and chained).
    """

    def __init__(self, path: Union[str, Path], cause: BaseException | str):
        self.path = str(path)
        self.cause = cause
        super().__init__(str(cause))


class InputNotFoundError(CropError):
    """The source path does not exist or cannot be opened."""


class DecodeError(CropError):
    """The bytes at the source path are not a decodable image."""


class EncodeError(CropError):
    """The cropped image could not be serialized or written."""
