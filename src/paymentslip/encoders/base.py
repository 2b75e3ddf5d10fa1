"""Base code-line encoder with common dependency wiring."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from paymentslip.core.config import AppSettings
from paymentslip.core.exceptions import EncodingError
from paymentslip.core.types import UNAVAILABLE
from paymentslip.models.layout import SegmentLayout
from paymentslip.models.slip_data import SlipData
from paymentslip.services.checksum import modulo10

REDACTED_CHECK_DIGIT = "X"


class BaseCodeLineEncoder(ABC):
    """Common base for all code-line encoders.

    The slip data, the variant's segment layout and settings are injected
    at construction time. Subclasses assemble segments in ``code_line``.
    """

    def __init__(
        self,
        slip: SlipData,
        layout: SegmentLayout,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        self._slip = slip
        self._layout = layout
        self._settings = settings or AppSettings()

    @property
    def slip(self) -> SlipData:
        return self._slip

    @property
    def layout(self) -> SegmentLayout:
        return self._layout

    @property
    def variant(self) -> str:
        return self._layout.variant.value

    @abstractmethod
    def code_line(self, fill_zeros: bool | None = None) -> str:
        """Return the complete code line for the bound slip.

        Raises:
            EncodingError: If a required segment cannot be built.
        """

    def _fill_zeros(self, fill_zeros: bool | None) -> bool:
        if fill_zeros is None:
            return self._settings.encoding.fill_zeros
        return fill_zeros

    def _require(self, value: Any, segment: str, reason: str) -> Any:
        if value is UNAVAILABLE:
            raise EncodingError(self.variant, segment, reason)
        return value

    def _pad(self, digits: str, width: int, fill_zeros: bool, segment: str) -> str:
        if len(digits) > width:
            raise EncodingError(
                self.variant, segment, f"{len(digits)} digits do not fit a width of {width}"
            )
        return digits.rjust(width, "0") if fill_zeros else digits

    def _check_digit(self, digits: str) -> str:
        if self._slip.not_for_payment:
            return REDACTED_CHECK_DIGIT
        return str(modulo10(digits))

    def _require_digits(self, value: str, segment: str) -> str:
        if not value.isascii() or not value.isdigit():
            raise EncodingError(self.variant, segment, f"expected digits only, got {value!r}")
        return value
