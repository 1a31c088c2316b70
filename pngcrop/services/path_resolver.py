from __future__ import annotations
from pathlib import Path
from typing import Optional, Union

from .. import settings
from ..models.naming_policy import NamingPolicy


class PathResolver:
    """
    Derives the destination of a crop from its source path.
    """

    def __init__(self,
                 default_policy: NamingPolicy = None,
                 prefix: str = None):
        self.default_policy = NamingPolicy(default_policy or settings.DEFAULT_NAMING)
        self.prefix = settings.DEFAULT_PREFIX if prefix is None else prefix

    def resolve(
        self,
        input_path: Union[str, Path],
        explicit_output: Optional[Union[str, Path]] = None,
        policy: Optional[NamingPolicy] = None,
    ) -> str:
        if policy is None:
            policy = NamingPolicy.EXPLICIT if explicit_output is not None else self.default_policy
        policy = NamingPolicy(policy)

        if policy is NamingPolicy.IDENTITY:
            return str(input_path)
        if policy is NamingPolicy.EXPLICIT:
            if explicit_output is None:
                raise ValueError("Explicit naming policy needs an output path")
            return str(explicit_output)
        # plain concatenation: "cropped_" + "a/b.png" == "cropped_a/b.png"
        return f"{self.prefix}{input_path}"
