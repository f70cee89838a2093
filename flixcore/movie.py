"""Movie metadata, with the synopsis held in memory or in a CSV file."""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Optional, Union

from flixcore import csvio
from flixcore.cover import Cover

__all__ = ["Movie", "FullMovie", "LazyMovie"]

PathLike = Union[str, "os.PathLike[str]"]

_SUMMARY_PREVIEW = 100


def _quoted(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class Movie(ABC):
    """Common metadata of a movie; subclasses decide where the synopsis lives.

    Two movies are equal when their titles are equal.
    """

    def __init__(
        self,
        title: str,
        year: int,
        producer: str,
        category: str,
        cover: Cover,
        director: str,
        actors: str,
        duration: int,
        video_file: PathLike,
    ) -> None:
        self._title = title
        self.year = year
        self.producer = producer
        self.category = category
        self.cover = cover
        self.director = director
        self.actors = actors
        self.duration = duration
        self.video_file = video_file  # type: ignore[assignment]

    @property
    def title(self) -> str:
        """The movie title; it identifies the movie and cannot change."""
        return self._title

    @property
    def video_file(self) -> Path:
        """Path to the video file; its existence is not checked."""
        return self._video_file

    @video_file.setter
    def video_file(self, path: PathLike) -> None:
        self._video_file = Path(path)

    @property
    @abstractmethod
    def synopsis(self) -> Optional[str]:
        """Short description of the movie, or None when unknown."""

    def duration_str(self) -> str:
        """Duration formatted as ``"Hh Mmin"``, hours omitted when zero."""
        sign = -1 if self.duration < 0 else 1
        hours, minutes = divmod(abs(self.duration), 60)
        hours *= sign
        minutes *= sign
        text = f"{hours}h " if hours else ""
        return f"{text}{minutes}min"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Movie):
            return NotImplemented
        return self._title == other._title

    def __hash__(self) -> int:
        return hash(self._title)

    def __str__(self) -> str:
        parts = [self._title]
        parts.extend(
            part
            for part in (self.director, self.producer, self.category, self.actors)
            if part
        )
        parts.append(str(self.year))
        return " - ".join(parts)

    def print_full(self, file: Optional[IO[str]] = None) -> None:
        """Print every piece of metadata, to standard output by default."""
        out = sys.stdout if file is None else file
        print(f"titre: {self._title}", file=out)
        print(f"date: {self.year}", file=out)
        print(f"duration: {self.duration} ({self.duration_str()})", file=out)
        print(f"category: {self.category}", file=out)
        print(f"director: {self.director}", file=out)
        print(f"producer: {self.producer}", file=out)
        print(f"actors: {self.actors}", file=out)
        print(self.cover, file=out)
        print(f"file: {_quoted(str(self.video_file))}", file=out)

        summary = self.synopsis
        if summary is not None:
            print(f"synopsis: {summary[:_SUMMARY_PREVIEW]}...", file=out)


class FullMovie(Movie):
    """A movie whose synopsis is kept in memory."""

    def __init__(
        self,
        title: str,
        year: int,
        producer: str,
        category: str,
        cover: Cover,
        director: str,
        actors: str,
        synopsis: str,
        duration: int,
        video_file: PathLike,
    ) -> None:
        super().__init__(
            title, year, producer, category, cover, director, actors, duration, video_file
        )
        self._synopsis = synopsis

    @property
    def synopsis(self) -> Optional[str]:
        """The stored synopsis."""
        return self._synopsis

    @synopsis.setter
    def synopsis(self, value: str) -> None:
        self._synopsis = value


class LazyMovie(Movie):
    """A movie whose synopsis is read from and written to a CSV file.

    The file needs at least the columns ``title`` and ``synopsis``. Every
    access to :attr:`synopsis` reads the file, and every assignment rewrites it.
    """

    def __init__(
        self,
        title: str,
        year: int,
        producer: str,
        category: str,
        cover: Cover,
        director: str,
        actors: str,
        csv_file: PathLike,
        duration: int,
        video_file: PathLike,
    ) -> None:
        super().__init__(
            title, year, producer, category, cover, director, actors, duration, video_file
        )
        self.csv_file = Path(csv_file)

    @property
    def synopsis(self) -> Optional[str]:
        """The synopsis found in the CSV file, or None if this title is absent.

        Raises OSError if the file cannot be opened.
        """
        with open(self.csv_file, encoding="utf-8", newline="") as stream:
            return csvio.get_field(stream, self._title, "title", "synopsis")

    @synopsis.setter
    def synopsis(self, value: str) -> None:
        temp_file = self.csv_file.with_name(self.csv_file.name + ".tmp")
        with open(self.csv_file, encoding="utf-8", newline="") as instream, open(
            temp_file, "w", encoding="utf-8", newline=""
        ) as outstream:
            csvio.edit_field(instream, outstream, self._title, value, "title", "synopsis")
        os.replace(temp_file, self.csv_file)