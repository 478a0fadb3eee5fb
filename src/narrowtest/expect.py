"""Assertions that also narrow the static type of the value they check.

A type checker cannot narrow a variable through a call whose result is thrown
away, so every helper returns the checked object itself, typed as the narrowed
type. Rebind the name to keep the narrowing::

    value: int | None = lookup()
    value = expect_not_none(value)
    value + 1  # value is int here

The runtime checks are delegated to :class:`unittest.TestCase` assertion
methods. They produce the usual actual/expected messages and diffs, and they
still run under ``python -O``, unlike the ``assert`` statement.
"""

from __future__ import annotations

import logging
import math
import unittest
from typing import Any, Callable, TypeVar, cast

from narrowtest.config import get_config
from narrowtest.errors import ExpectationFailure
from narrowtest.sentinel import UNDEFINED, UndefinedType

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Immutable scalars that expect_is compares by value instead of by reference.
_VALUE_TYPES = (bool, int, float, complex, str, bytes)

_DESCRIPTIONS = {
    "expect_defined": "expected value to be defined",
    "expect_undefined": "expected value to be UNDEFINED",
    "expect_not_none": "expected value to be non-None",
    "expect_none": "expected value to be None",
    "expect_is": "expected value to be identical",
    "expect_equal": "expected value to be equal",
}


def _check(
    predicate: str,
    method_name: str,
    *args: Any,
    actual: Any,
    expected: Any = UNDEFINED,
) -> None:
    """Run one TestCase assertion method, re-raising its failure as ExpectationFailure."""
    __tracebackhide__ = True
    config = get_config()
    case = unittest.TestCase()
    case.maxDiff = config.max_diff
    method: Callable[..., None] = getattr(case, method_name)
    description = _DESCRIPTIONS[predicate] if config.long_message else None
    try:
        method(*args, msg=description)
    except AssertionError as exc:
        logger.debug(f"{predicate} failed: {exc}")
        raise ExpectationFailure(
            f"{predicate}: {exc}",
            predicate=predicate,
            actual=actual,
            expected=expected,
        ) from None


def _same_float(arg: float, expected: float) -> bool:
    # NaN matches NaN; 0.0 and -0.0 differ.
    if math.isnan(arg) or math.isnan(expected):
        return math.isnan(arg) and math.isnan(expected)
    return arg == expected and math.copysign(1.0, arg) == math.copysign(1.0, expected)


def _same_value(arg: object, expected: object) -> bool:
    if arg is expected:
        return True
    if type(arg) is not type(expected) or not isinstance(arg, _VALUE_TYPES):
        return False
    if isinstance(arg, float):
        return _same_float(arg, cast(float, expected))
    if isinstance(arg, complex):
        other = cast(complex, expected)
        return _same_float(arg.real, other.real) and _same_float(arg.imag, other.imag)
    return arg == expected


def expect_defined(arg: T | UndefinedType) -> T:
    """Equivalent to ``assertIsNot(arg, UNDEFINED)``, returning ``arg`` without UndefinedType.

    Example::

        value = mapping.get("key", UNDEFINED)  # int | UndefinedType
        value = expect_defined(value)          # int
    """
    __tracebackhide__ = True
    _check("expect_defined", "assertIsNot", arg, UNDEFINED, actual=arg, expected=UNDEFINED)
    return cast(T, arg)


def expect_undefined(arg: object) -> UndefinedType:
    """Equivalent to ``assertIs(arg, UNDEFINED)``, returning ``arg`` typed as UndefinedType."""
    __tracebackhide__ = True
    _check("expect_undefined", "assertIs", arg, UNDEFINED, actual=arg, expected=UNDEFINED)
    return cast(UndefinedType, arg)


def expect_not_none(arg: T | None) -> T:
    """Equivalent to ``assertIsNotNone(arg)``, returning ``arg`` without None.

    Example::

        match = re.match(r"(\\d+)", text)  # re.Match[str] | None
        match = expect_not_none(match)    # re.Match[str]
    """
    __tracebackhide__ = True
    _check("expect_not_none", "assertIsNotNone", arg, actual=arg, expected=None)
    return cast(T, arg)


def expect_none(arg: object) -> None:
    """Equivalent to ``assertIsNone(arg)``."""
    __tracebackhide__ = True
    _check("expect_none", "assertIsNone", arg, actual=arg, expected=None)


def expect_is(arg: object, expected: T) -> T:
    """Check that ``arg`` is ``expected`` and return ``arg`` typed as ``expected``.

    Objects match when they are the same reference. Immutable scalars (bool,
    int, float, complex, str, bytes) also match when they have exactly the same
    type and compare equal, so the outcome does not depend on interpreter
    caching of small ints or interned strings. NaN matches NaN, while ``0.0``
    and ``-0.0`` do not match (also for the parts of a complex). Anything else
    fails through ``assertIs``, e.g. two equal but distinct lists, or ``10``
    against ``"10"``.

    Example::

        results = [parse(text) for text in inputs]  # list[object]
        for result, want in zip(results, (10, 100)):
            number = expect_is(result, want)        # int
    """
    __tracebackhide__ = True
    if not _same_value(arg, expected):
        _check("expect_is", "assertIs", arg, expected, actual=arg, expected=expected)
    return cast(T, arg)


def expect_equal(arg: object, expected: T) -> T:
    """Equivalent to ``assertEqual(arg, expected)``, returning ``arg`` typed as ``expected``.

    Comparison is Python ``==``: nested containers are compared recursively,
    dicts and sets without regard to order, lists and tuples in order. On
    failure the message carries unittest's diff of the two values.

    An object always equals itself, so anything that passes expect_is with
    the same reference passes here too, including a NaN compared with itself.
    Two distinct NaN objects are not equal, as with ``==``.

    Example::

        parsed = json.loads('{"key": "val"}')  # Any
        parsed = expect_equal(parsed, {"key": "val"})  # dict[str, str]
    """
    __tracebackhide__ = True
    if arg is expected:
        return cast(T, arg)
    _check("expect_equal", "assertEqual", arg, expected, actual=arg, expected=expected)
    return cast(T, arg)
