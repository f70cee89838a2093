"""Image files associated with a movie."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_NORMAL_PATH = Path("./assets/default_normal.jpg")
DEFAULT_SQUARE_PATH = Path("./assets/default_square.jpg")

_PATH_FIELDS = frozenset({"normal_path", "square_path"})


@dataclass
class Cover:
    """A movie cover: a standard poster image and a square thumbnail.

    Both paths are always stored as :class:`pathlib.Path`, whether they are
    given to the constructor or assigned later.
    """

    normal_path: Path = DEFAULT_NORMAL_PATH
    square_path: Path = DEFAULT_SQUARE_PATH

    def __setattr__(self, name: str, value: object) -> None:
        if name in _PATH_FIELDS:
            value = Path(value)  # type: ignore[arg-type]
        super().__setattr__(name, value)

    def __str__(self) -> str:
        return f"Cover : {self.normal_path.as_posix()} | {self.square_path.as_posix()}"