"""Ordering of movie lists by title, year, category, director or duration.

Each ``sort_by_*`` function returns a strict "comes before" predicate taking
two movies. Except when sorting by title, ties are broken by ascending title.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, List

from flixcore.movie import Movie

__all__ = [
    "Comparator",
    "sort",
    "sort_by_title",
    "sort_by_year",
    "sort_by_category",
    "sort_by_director",
    "sort_by_duration",
]

Comparator = Callable[[Movie, Movie], bool]


def sort(movies: List[Movie], key: Comparator) -> None:
    """Sort ``movies`` in place so that ``key(a, b)`` holds when a precedes b."""

    def compare(first: Movie, second: Movie) -> int:
        if key(first, second):
            return -1
        if key(second, first):
            return 1
        return 0

    movies.sort(key=cmp_to_key(compare))


def sort_by_title(ascending: bool = True) -> Comparator:
    """Order by title."""
    if ascending:
        return lambda first, second: first.title < second.title
    return lambda first, second: second.title < first.title


def _by_field(field: str, ascending: bool) -> Comparator:
    def precedes(first: Movie, second: Movie) -> bool:
        left, right = getattr(first, field), getattr(second, field)
        if left != right:
            return left < right if ascending else left > right
        return first.title < second.title

    return precedes


def sort_by_year(ascending: bool = False) -> Comparator:
    """Order by release year, newest first by default."""
    return _by_field("year", ascending)


def sort_by_category(ascending: bool = True) -> Comparator:
    """Order by category."""
    return _by_field("category", ascending)


def sort_by_director(ascending: bool = True) -> Comparator:
    """Order by director."""
    return _by_field("director", ascending)


def sort_by_duration(ascending: bool = True) -> Comparator:
    """Order by duration."""
    return _by_field("duration", ascending)