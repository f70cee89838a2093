"""Filtering of movie lists by a single criterion, keeping the input order."""

from __future__ import annotations

from typing import Iterable, List

from flixcore.movie import Movie

__all__ = [
    "select_by_title",
    "select_by_year",
    "select_by_category",
    "select_by_director",
    "select_by_duration",
]


def select_by_title(movies: Iterable[Movie], value: str) -> List[Movie]:
    """Movies whose title equals ``value``."""
    return [movie for movie in movies if movie.title == value]


def select_by_year(movies: Iterable[Movie], value: int, delta: int = 0) -> List[Movie]:
    """Movies released within ``[value - delta, value + delta]``."""
    return [movie for movie in movies if value - delta <= movie.year <= value + delta]


def select_by_category(movies: Iterable[Movie], value: str) -> List[Movie]:
    """Movies whose category equals ``value``."""
    return [movie for movie in movies if movie.category == value]


def select_by_director(movies: Iterable[Movie], value: str) -> List[Movie]:
    """Movies directed by ``value``."""
    return [movie for movie in movies if movie.director == value]


def select_by_duration(movies: Iterable[Movie], value: int, delta: int) -> List[Movie]:
    """Movies lasting within ``[value - delta, value + delta]`` minutes."""
    return [movie for movie in movies if value - delta <= movie.duration <= value + delta]