import math
from collections.abc import Iterable, Iterator
from logging import warning
from typing import cast, final, override

from combiter.utils.reiterable import check_reiterable
from combiter.utils.types import MISSING, known_length


@final
class CartesianProduct[T](Iterator[tuple[T, ...]]):
    """
    streaming [...T] x [...T] x ... -> [... (T, T, ...) ]

    Enumerates the product in odometer order: the last source varies fastest.
    Nothing is materialized; one cursor is held per source and every source
    but the first is restarted (via a fresh iter()) each time it runs out, so
    those sources must be re-iterable. The first source is traversed once.

    Zero sources, or any empty source, yields nothing.
    """

    def __init__(self, sequences: Iterable[Iterable[T]]):
        self.sequences: list[Iterable[T]] = list(sequences)
        self._iterators: list[Iterator[T]] = [iter(seq) for seq in self.sequences]
        self._current: list[T] = []
        self._started = False
        self._exhausted = not self.sequences
        self._produced = 0

        for i, seq in enumerate(self.sequences[1:], start=1):
            check_reiterable(seq, f"product source #{i}")

    @override
    def __iter__(self) -> Iterator[tuple[T, ...]]:
        return self

    @override
    def __next__(self) -> tuple[T, ...]:
        if self._exhausted:
            raise StopIteration

        if not self._started:
            self._started = True
            first = [next(it, MISSING) for it in self._iterators]

            if any(value is MISSING for value in first):
                self._exhausted = True
                raise StopIteration

            self._current = cast(list[T], first)
            return self._emit()

        # odometer: find the rightmost dimension that can still advance
        for index in reversed(range(len(self._iterators))):
            value = next(self._iterators[index], MISSING)

            if value is not MISSING:
                self._current[index] = cast(T, value)
                self._restart_after(index)

                if self._exhausted:
                    raise StopIteration
                return self._emit()

        # the leftmost dimension ran out
        self._exhausted = True
        raise StopIteration

    def __length_hint__(self) -> int:
        if self._exhausted:
            return 0

        lengths = [known_length(seq) for seq in self.sequences]

        if any(length is None for length in lengths):
            return NotImplemented
        return math.prod(cast(list[int], lengths)) - self._produced

    def _restart_after(self, index: int):
        """rewinds every dimension to the right of index to its first element"""
        for j in range(index + 1, len(self._iterators)):
            self._iterators[j] = iter(self.sequences[j])
            value = next(self._iterators[j], MISSING)

            if value is MISSING:
                # only reachable with a single-pass (or mutated) source
                warning(
                    f"product source #{j} was empty when restarted; "
                    "stopping the product early"
                )
                self._exhausted = True
                return

            self._current[j] = cast(T, value)

    def _emit(self) -> tuple[T, ...]:
        self._produced += 1
        return tuple(self._current)


@final
class PairProduct[T, U](Iterator[tuple[T, U]]):
    """
    streaming [...T] x [...U] -> [... (T,U) ]

    The product of two sources of possibly different types, in odometer order
    (the second source varies fastest). Only the second source is ever
    restarted, so the first may be infinite or single-pass. The second must
    be re-iterable and finite.
    """

    def __init__(self, first: Iterable[T], second: Iterable[U]):
        self.first = first
        self.second = second
        check_reiterable(second, "second product source")

        self._first_iter: Iterator[T] = iter(first)
        self._second_iter: Iterator[U] = iter(second)
        # cheap emptiness probe; None when the second source is unsized
        self._second_len: int | None = known_length(second)
        self._current_first = next(self._first_iter, MISSING)
        self._pass_yielded = False
        self._exhausted = False
        self._produced = 0

    @override
    def __iter__(self) -> Iterator[tuple[T, U]]:
        return self

    @override
    def __next__(self) -> tuple[T, U]:
        # an empty second source would otherwise spin through an infinite first
        if self._exhausted or self._second_len == 0:
            self._exhausted = True
            raise StopIteration

        while self._current_first is not MISSING:
            value = next(self._second_iter, MISSING)

            if value is not MISSING:
                self._pass_yielded = True
                self._produced += 1
                return cast(T, self._current_first), cast(U, value)

            if not self._pass_yielded:
                # a whole pass produced nothing: the second source is empty
                break

            self._current_first = next(self._first_iter, MISSING)

            if self._current_first is not MISSING:
                self._second_iter = iter(self.second)
                self._pass_yielded = False

        self._exhausted = True
        raise StopIteration

    def __length_hint__(self) -> int:
        if self._exhausted:
            return 0

        first_len = known_length(self.first)

        if first_len is None or self._second_len is None:
            return NotImplemented
        return first_len * self._second_len - self._produced


def product[T](*sequences: Iterable[T]) -> CartesianProduct[T]:
    """
    Lazy Cartesian product of any number of same-typed iterables.

    >>> list(product([1, 2], [3, 4]))
    [(1, 3), (1, 4), (2, 3), (2, 4)]

    Unlike itertools.product, no input is buffered, and product() with no
    arguments yields nothing rather than a single empty tuple.
    """
    return CartesianProduct(sequences)


def product_pair[T, U](
    first: Iterable[T], second: Iterable[U]
) -> PairProduct[T, U]:
    """
    Lazy Cartesian product of two iterables of possibly different types.

    >>> list(product_pair("ab", [1, 2]))
    [('a', 1), ('a', 2), ('b', 1), ('b', 2)]
    """
    return PairProduct(first, second)
