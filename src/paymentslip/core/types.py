"""Type aliases and sentinels used across the payment slip package."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Literal


class Unavailable(Enum):
    """Value of a field whose presence flag is switched off.

    Distinct from the empty string: an empty field was offered but not
    filled in, an unavailable one is not part of this slip at all.
    """

    UNAVAILABLE = "unavailable"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNAVAILABLE"


UNAVAILABLE = Unavailable.UNAVAILABLE

MaybeText = str | Literal[Unavailable.UNAVAILABLE]
MaybeAmount = Decimal | str | Literal[Unavailable.UNAVAILABLE]
MaybeWholeUnits = int | str | Literal[Unavailable.UNAVAILABLE]
