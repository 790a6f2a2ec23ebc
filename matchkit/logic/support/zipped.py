"""Paired sequence iterator.

Zips two iterables by index without stopping at the shorter one. Once a
side is exhausted, ABSENT is yielded in its place, so the consumer can
point at the exact index where the lengths diverge.
"""

from typing import Generic, Iterable, Iterator, TypeVar

L = TypeVar("L")
R = TypeVar("R")


class _Absent:
    """Marker for the exhausted side of a pair."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


class ZippedIterator(Generic[L, R]):
    """Single-pass iterator of (index, left, right) triples.

    Both inputs are consumed lazily. After exhaustion, left_size and
    right_size hold the lengths of the two inputs.
    """

    def __init__(self, left: Iterable[L], right: Iterable[R]):
        self._left = iter(left)
        self._right = iter(right)
        self._index = 0
        self._left_size: int | None = None
        self._right_size: int | None = None

    def __iter__(self) -> "ZippedIterator[L, R]":
        return self

    def __next__(self) -> tuple[int, "L | _Absent", "R | _Absent"]:
        left = self._advance_left()
        right = self._advance_right()
        if left is ABSENT and right is ABSENT:
            raise StopIteration
        index = self._index
        self._index += 1
        return index, left, right

    def _advance_left(self) -> "L | _Absent":
        if self._left_size is not None:
            return ABSENT
        try:
            return next(self._left)
        except StopIteration:
            self._left_size = self._index
            return ABSENT

    def _advance_right(self) -> "R | _Absent":
        if self._right_size is not None:
            return ABSENT
        try:
            return next(self._right)
        except StopIteration:
            self._right_size = self._index
            return ABSENT

    @property
    def left_size(self) -> int | None:
        """Length of the left input, known once it is exhausted."""
        return self._left_size

    @property
    def right_size(self) -> int | None:
        """Length of the right input, known once it is exhausted."""
        return self._right_size

    def has_size_mismatch(self) -> bool:
        """True once iteration has shown the inputs have different lengths."""
        if self._left_size is None and self._right_size is None:
            return False
        return self._left_size != self._right_size


def zip_sequences(left: Iterable[L], right: Iterable[R]) -> ZippedIterator[L, R]:
    """Pair two iterables by index, marking the exhausted side with ABSENT.

    Example:
        >>> list(zip_sequences([1, 2], ["a"]))
        [(0, 1, 'a'), (1, 2, ABSENT)]
    """
    return ZippedIterator(left, right)
