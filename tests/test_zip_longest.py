import itertools
import operator

from combiter.iter_utils import ZipLongest, zip_longest


def test_matching_length():
    got = list(zip_longest([1, 2, 3], ["a", "b", "c"], 0, "z"))
    assert got == [(1, "a"), (2, "b"), (3, "c")]
    assert got == list(zip([1, 2, 3], ["a", "b", "c"]))


def test_first_longer():
    got = list(zip_longest([1, 2, 3, 4], ["a", "b"], 0, "z"))
    assert got == [(1, "a"), (2, "b"), (3, "z"), (4, "z")]


def test_second_longer():
    got = list(zip_longest([1, 2], ["a", "b", "c", "d"], 0, "z"))
    assert got == [(1, "a"), (2, "b"), (0, "c"), (0, "d")]


def test_empty():
    assert list(zip_longest([], [], 0, "a")) == []


def test_one_side_empty():
    assert list(zip_longest([], "ab", 0, "z")) == [(0, "a"), (0, "b")]
    assert list(zip_longest([1], "", 0, "z")) == [(1, "z")]


def test_none_elements():
    got = list(zip_longest([None], [None, None], 0, "z"))
    assert got == [(None, None), (0, None)]


def test_single_pass_sources():
    first = (x for x in range(3))
    second = map(str.upper, "ab")
    assert list(zip_longest(first, second, -1, "")) == [(0, "A"), (1, "B"), (2, "")]


def test_infinite_side():
    zipped = zip_longest(itertools.count(), "ab", -1, "?")
    got = list(itertools.islice(zipped, 4))
    assert got == [(0, "a"), (1, "b"), (2, "?"), (3, "?")]


class _Flaky:
    """an ill-behaved iterator that yields again after signalling exhaustion"""

    def __init__(self):
        self.calls = 0

    def __iter__(self):
        return self

    def __next__(self):
        self.calls += 1
        if self.calls == 1:
            raise StopIteration
        return self.calls


def test_exhausted_side_not_advanced_again():
    flaky = _Flaky()
    got = list(zip_longest(flaky, [1, 2, 3], 0, 0))

    assert got == [(0, 1), (0, 2), (0, 3)]
    assert flaky.calls == 1


def test_no_resurrection():
    zipped = ZipLongest([1], ["a"], 0, "z")
    assert next(zipped) == (1, "a")

    for _ in range(3):
        assert next(zipped, "done") == "done"


def test_length_hint():
    zipped = zip_longest([1, 2, 3], "a", 0, "z")
    assert operator.length_hint(zipped) == 3

    next(zipped)
    assert operator.length_hint(zipped) == 2

    list(zipped)
    assert operator.length_hint(zipped) == 0


def test_length_hint_unsized():
    zipped = zip_longest(itertools.count(), "a", 0, "z")
    assert operator.length_hint(zipped, -1) == -1
