"""Fixed segment widths of each reference slip variant."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class SlipVariant(StrEnum):
    VESR = "vesr"  # reference slip, postal account
    BESR = "besr"  # reference slip, bank with banking customer ID
    ESR_PLUS = "esr_plus"  # reference slip without a predefined amount


class SegmentLayout(BaseModel):
    """Code-line segment table for one slip variant.

    The amount segment is ``amount_prefix`` + francs + cents + check digit.
    The reference segment is the banking customer ID (if any) followed by
    the reference number, padded to ``reference_width - 1`` and closed by a
    check digit. The participant segment is the account number without
    separators: a fixed-width prefix, the serial padded so the whole is
    ``participant_width``, and a fixed-width check digit.
    """

    model_config = {"frozen": True}

    variant: SlipVariant
    amount_prefix: str = "01"
    open_amount_prefix: str = "04"
    allow_open_amount: bool = False
    francs_width: int = 8
    cents_width: int = 2
    reference_width: int = 27
    customer_id_width: int = 0
    participant_width: int = 9
    participant_prefix_width: int = 2
    participant_check_width: int = 1


LAYOUTS: dict[SlipVariant, SegmentLayout] = {
    SlipVariant.VESR: SegmentLayout(variant=SlipVariant.VESR),
    SlipVariant.BESR: SegmentLayout(variant=SlipVariant.BESR, customer_id_width=6),
    SlipVariant.ESR_PLUS: SegmentLayout(variant=SlipVariant.ESR_PLUS, allow_open_amount=True),
}
