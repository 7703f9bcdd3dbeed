from collections.abc import Iterable, Iterator, Sized

MISSING = object()  # passed as next()'s default; distinguishes exhaustion from None


def is_single_pass(source: Iterable[object]) -> bool:
    """
    An iterable is single-pass when it is its own iterator, as with
    generators, map/filter objects and open files. Opening another cursor on
    such a source continues where the previous one stopped.

    Checked structurally so that no cursor is opened on the source.
    """
    return isinstance(source, Iterator)


def known_length(source: Iterable[object]) -> int | None:
    """len() for sized sources, None for everything else (possibly infinite)"""
    if isinstance(source, Sized):
        return len(source)
    return None
