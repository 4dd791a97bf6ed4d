"""
Adjacency windowing: a 3-slot sliding window over an ascending sequence,
including the partial windows at both ends.
"""
from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

_EMPTY = object()


class Triple:
    """Base class of the window variants."""
    pass


@dataclass(frozen=True)
class Right(Triple):
    right: Any


@dataclass(frozen=True)
class MiddleRight(Triple):
    middle: Any
    right: Any


@dataclass(frozen=True)
class Full(Triple):
    left: Any
    middle: Any
    right: Any


@dataclass(frozen=True)
class LeftMiddle(Triple):
    left: Any
    middle: Any


@dataclass(frozen=True)
class Left(Triple):
    left: Any


@dataclass(frozen=True)
class Middle(Triple):
    middle: Any


def _window(left: Any, middle: Any, right: Any) -> Triple:
    has_left, has_middle, has_right = left is not _EMPTY, middle is not _EMPTY, right is not _EMPTY
    if has_left and has_middle and has_right:
        return Full(left, middle, right)
    if has_left and has_middle:
        return LeftMiddle(left, middle)
    if has_middle and has_right:
        return MiddleRight(middle, right)
    if has_middle:
        return Middle(middle)
    if has_left and not has_right:
        return Left(left)
    if has_right and not has_left:
        return Right(right)
    raise AssertionError("a window cannot skip its middle slot")


def triples(values: Iterable[Any]) -> Iterator[Triple]:
    """
    Slide a window of three over `values`.

    Values are shifted in one at a time from the right, followed by two empty
    slots, so `n` values produce `n + 2` windows and every value is the middle
    of exactly one of them:

        [1, 2] -> Right(1), MiddleRight(1, 2), LeftMiddle(1, 2), Left(2)

    Args:
        values: Ascending values. Any iterable; it is consumed once.

    Yields:
        The window variants, nothing at all for an empty input.
    """
    left = middle = right = _EMPTY
    for incoming in itertools.chain(values, (_EMPTY, _EMPTY)):
        left, middle, right = middle, right, incoming
        if left is _EMPTY and middle is _EMPTY and right is _EMPTY:
            return
        yield _window(left, middle, right)
