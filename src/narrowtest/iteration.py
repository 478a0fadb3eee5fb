"""Loops for tests that fail instead of passing vacuously when there is nothing to loop over.

Assertions inside a loop prove nothing if the loop body never runs::

    for row in load_rows():  # returns [] after a regression
        expect_equal(row.status, "ok")  # never executed, test passes

Both helpers here raise :class:`~narrowtest.errors.ExpectationFailure` when the
input has no elements.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Sequence, TypeVar

from narrowtest.errors import ExpectationFailure

T = TypeVar("T")

logger = logging.getLogger(__name__)


def for_each_at_least_once(
    sequence: Sequence[T],
    callback: Callable[[T, int, Sequence[T]], object],
) -> None:
    """Call ``callback(element, index, sequence)`` for each element, failing on an empty sequence.

    Elements are visited in index order before the function returns. The
    callback's return value is ignored. Lists may be mutated by the callback
    with the usual ``enumerate`` semantics.

    Example::

        total = 0

        def add(n: int, index: int, numbers: Sequence[int]) -> None:
            nonlocal total
            total += n

        for_each_at_least_once([1, 2, 3], add)
    """
    __tracebackhide__ = True
    if len(sequence) == 0:
        logger.debug(f"for_each_at_least_once got an empty {type(sequence).__name__}")
        raise ExpectationFailure(
            "for_each_at_least_once did not iterate at least once",
            predicate="for_each_at_least_once",
            actual=sequence,
        )

    for index, element in enumerate(sequence):
        callback(element, index, sequence)


def iterate_at_least_once(iterable: Iterable[T]) -> Iterator[T]:
    """Yield every element of ``iterable``, failing at exhaustion if there were none.

    Works with iterables of unknown length such as generators. Breaking out of
    the loop after the first element never fails.

    Example::

        for row in iterate_at_least_once(load_rows()):
            expect_equal(row.status, "ok")
    """
    __tracebackhide__ = True
    iterated = False
    for element in iterable:
        iterated = True
        yield element

    if not iterated:
        logger.debug(f"iterate_at_least_once got an empty {type(iterable).__name__}")
        raise ExpectationFailure(
            "iterate_at_least_once did not iterate at least once",
            predicate="iterate_at_least_once",
            actual=iterable,
        )
