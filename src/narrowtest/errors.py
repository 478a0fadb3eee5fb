"""Error raised when an expectation does not hold."""

from __future__ import annotations

from typing import Any

from narrowtest.sentinel import UNDEFINED


class ExpectationFailure(AssertionError):
    """A failed narrowing assertion or iteration guard.

    Subclasses :class:`AssertionError` so test runners report it as a plain
    test failure.

    Attributes:
        predicate: Name of the helper whose check failed (e.g. "expect_is").
        actual: The checked value, or UNDEFINED when there is none.
        expected: The expected value or sentinel, or UNDEFINED when there is none.
    """

    def __init__(
        self,
        message: str,
        *,
        predicate: str,
        actual: Any = UNDEFINED,
        expected: Any = UNDEFINED,
    ) -> None:
        super().__init__(message)
        self.predicate = predicate
        self.actual = actual
        self.expected = expected
