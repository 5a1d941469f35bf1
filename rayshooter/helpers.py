"""Conversions between flat sequences and fixed-size groups."""

from itertools import chain
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


def as_arrays(seq: Iterable[T], length: int) -> list[tuple[T, ...]]:
    """Group a flat sequence into tuples of ``length`` items.

    Trailing items that do not fill a whole group are dropped.
    """
    if length <= 0:
        raise ValueError("group length must be positive")
    iterator = iter(seq)
    return list(zip(*[iterator] * length))


def flat_arrays(arrays: Iterable[Sequence[T]]) -> list[T]:
    """Flatten a sequence of groups into one list."""
    return list(chain.from_iterable(arrays))