from collections.abc import Iterable, Iterator
from typing import cast, final, override

from combiter.utils.types import MISSING, known_length


@final
class ZipLongest[T, U](Iterator[tuple[T, U]]):
    """
    streaming [...T], [...U] -> [... (T,U) ]

    Runs until both sources are exhausted, padding whichever side ran out
    first with its fill value. Neither source is restarted, so single-pass
    sources are fine.
    """

    def __init__(
        self, first: Iterable[T], second: Iterable[U], first_fill: T, second_fill: U
    ):
        self.first = first
        self.second = second
        self.first_fill = first_fill
        self.second_fill = second_fill

        self._first_iter: Iterator[T] | None = iter(first)
        self._second_iter: Iterator[U] | None = iter(second)
        self._produced = 0

    @override
    def __iter__(self) -> Iterator[tuple[T, U]]:
        return self

    @override
    def __next__(self) -> tuple[T, U]:
        # a side is dropped (set to None) once exhausted and never advanced again
        a = MISSING if self._first_iter is None else next(self._first_iter, MISSING)
        b = MISSING if self._second_iter is None else next(self._second_iter, MISSING)

        if a is MISSING:
            self._first_iter = None
        if b is MISSING:
            self._second_iter = None

        if a is MISSING and b is MISSING:
            raise StopIteration

        self._produced += 1
        return (
            self.first_fill if a is MISSING else cast(T, a),
            self.second_fill if b is MISSING else cast(U, b),
        )

    def __length_hint__(self) -> int:
        if self._first_iter is None and self._second_iter is None:
            return 0

        first_len = known_length(self.first)
        second_len = known_length(self.second)

        if first_len is None or second_len is None:
            return NotImplemented
        return max(first_len, second_len) - self._produced


def zip_longest[T, U](
    first: Iterable[T], second: Iterable[U], first_fill: T, second_fill: U
) -> ZipLongest[T, U]:
    """
    Pairs two iterables until both are exhausted.

    >>> list(zip_longest([1, 2, 3], "ab", 0, "z"))
    [(1, 'a'), (2, 'b'), (3, 'z')]

    Unlike itertools.zip_longest, each side gets its own fill value.
    """
    return ZipLongest(first, second, first_fill, second_fill)
