"""Code line of orange reference slips (VESR, BESR, ESR+).

Layout, with ``fill_zeros``::

    0100003949753>120000000000234478943216899+ 010001628>
    |  amount   | |       reference         |  |participant|

The amount segment is ``042`` instead when an ESR+ slip has no amount.
"""

from __future__ import annotations

import logging

from paymentslip.core.config import AppSettings
from paymentslip.core.exceptions import EncodingError, MalformedAccountNumberError
from paymentslip.core.types import UNAVAILABLE
from paymentslip.encoders.base import REDACTED_CHECK_DIGIT, BaseCodeLineEncoder
from paymentslip.models.layout import SegmentLayout
from paymentslip.models.slip_data import ACCOUNT_SEPARATOR, SlipData
from paymentslip.services.blocks import group_into_blocks

logger = logging.getLogger(__name__)


class ReferenceCodeLineEncoder(BaseCodeLineEncoder):
    """Encodes a slip plus its reference number into the reference-slip code line."""

    def __init__(
        self,
        slip: SlipData,
        layout: SegmentLayout,
        *,
        reference_number: str,
        banking_customer_id: str = "",
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__(slip, layout, settings=settings)
        self._reference_number = reference_number
        self._banking_customer_id = banking_customer_id

    def code_line(self, fill_zeros: bool | None = None) -> str:
        fill_zeros = self._fill_zeros(fill_zeros)
        amount = self.amount_segment(fill_zeros)
        reference = self.complete_reference_number(fill_zeros)
        participant = self.participant_number(fill_zeros)

        line = f"{amount}>{reference}+ {participant}>"
        logger.debug("Encoded %s code line (%d chars)", self.variant, len(line))
        return line

    def amount_segment(self, fill_zeros: bool | None = None) -> str:
        """Prefix, francs, cents and check digit."""
        fill_zeros = self._fill_zeros(fill_zeros)
        layout = self._layout

        francs = self._slip.amount_whole_units()
        if francs is UNAVAILABLE:
            if not layout.allow_open_amount:
                raise EncodingError(self.variant, "amount", "amount is required but unavailable")
            return layout.open_amount_prefix + self._check_digit(layout.open_amount_prefix)

        francs = str(francs)
        cents = self._slip.amount_fractional_units()
        if not self._slip.not_for_payment:
            # Markers left over from an earlier redaction are not an amount.
            self._require_digits(francs, "amount")
            self._require_digits(cents, "amount")

        francs = self._pad(francs, layout.francs_width, fill_zeros, "amount")
        cents = self._pad(cents, layout.cents_width, fill_zeros, "amount")
        digits = f"{layout.amount_prefix}{francs}{cents}"
        return digits + self._check_digit(digits)

    def complete_reference_number(self, fill_zeros: bool | None = None) -> str:
        """Banking customer ID, reference number and check digit."""
        fill_zeros = self._fill_zeros(fill_zeros)
        layout = self._layout

        if self._slip.not_for_payment:
            return REDACTED_CHECK_DIGIT * layout.reference_width

        reference = self._require_digits(self._reference_number, "reference")

        customer_id = ""
        if layout.customer_id_width:
            customer_id = self._require_digits(self._banking_customer_id, "reference")
            if len(customer_id) != layout.customer_id_width:
                raise EncodingError(
                    self.variant,
                    "reference",
                    f"banking customer ID must have {layout.customer_id_width} digits",
                )
        elif self._banking_customer_id:
            raise EncodingError(self.variant, "reference", "variant takes no banking customer ID")

        body_width = layout.reference_width - 1
        reference = self._pad(reference, body_width - len(customer_id), fill_zeros, "reference")
        body = customer_id + reference
        return body + self._check_digit(body)

    def formatted_reference_number(self, fill_zeros: bool | None = None) -> str:
        """Reference number in blocks for printing, e.g. ``12 00000 00000 23447 89432 16899``."""
        encoding = self._settings.encoding
        return group_into_blocks(
            self.complete_reference_number(fill_zeros),
            encoding.block_size,
            encoding.align_from_right,
        )

    def participant_number(self, fill_zeros: bool | None = None) -> str:
        """Account number as prefix, zero-padded serial and check digit."""
        fill_zeros = self._fill_zeros(fill_zeros)

        if self._slip.not_for_payment:
            return self._slip.account_digits_only()

        number = self._require(
            self._slip.account_number, "participant", "account number is unavailable"
        )
        if self._slip.account_digits_only() is UNAVAILABLE:
            raise MalformedAccountNumberError(self.variant, number)

        prefix, serial, check = (
            self._require_digits(part, "participant") for part in number.split(ACCOUNT_SEPARATOR)
        )
        layout = self._layout
        if len(prefix) != layout.participant_prefix_width:
            raise EncodingError(
                self.variant,
                "participant",
                f"prefix {prefix!r} must have {layout.participant_prefix_width} digits",
            )
        if len(check) != layout.participant_check_width:
            raise EncodingError(
                self.variant,
                "participant",
                f"check digit {check!r} must have {layout.participant_check_width} digits",
            )

        serial_width = layout.participant_width - len(prefix) - len(check)
        serial = self._pad(serial, serial_width, fill_zeros, "participant")
        return f"{prefix}{serial}{check}"
