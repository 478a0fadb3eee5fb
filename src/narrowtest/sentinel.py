"""The missing-value sentinel checked by expect_defined and expect_undefined."""

from __future__ import annotations

from enum import Enum
from typing import Final, Literal


class UndefinedType(Enum):
    """Type of :data:`UNDEFINED`.

    A single-member enum so type checkers can remove it from a union such as
    ``int | UndefinedType``. It is distinct from ``None``, which stays available
    as an ordinary value.
    """

    UNDEFINED = "UNDEFINED"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> Literal[False]:
        return False


UNDEFINED: Final = UndefinedType.UNDEFINED
