"""Test assertions that narrow static types, and loop guards for tests."""

import logging

from narrowtest.errors import ExpectationFailure
from narrowtest.expect import (
    expect_defined,
    expect_equal,
    expect_is,
    expect_none,
    expect_not_none,
    expect_undefined,
)
from narrowtest.iteration import for_each_at_least_once, iterate_at_least_once
from narrowtest.sentinel import UNDEFINED, UndefinedType

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ExpectationFailure",
    "UNDEFINED",
    "UndefinedType",
    "expect_defined",
    "expect_equal",
    "expect_is",
    "expect_none",
    "expect_not_none",
    "expect_undefined",
    "for_each_at_least_once",
    "iterate_at_least_once",
]
