"""Shared test builders for slip data."""

from __future__ import annotations

from decimal import Decimal

from paymentslip.models.slip_data import SlipData

ACCOUNT_NUMBER = "01-162-8"
REFERENCE_NUMBER = "12000000000023447894321689"


def populated_slip(amount: Decimal | str = Decimal("3949.75")) -> SlipData:
    """A slip with every group filled in."""
    slip = SlipData()
    slip.set_bank_data("Seldwyla Bank", "8001 Zürich")
    slip.set_account_number(ACCOUNT_NUMBER)
    slip.set_recipient_data("Muster AG", "Bahnhofstrasse 5", "8001 Zürich")
    slip.set_payer_data("Hans Mustermann", "Hauptstrasse 11", "8000 Zürich")
    slip.set_amount(amount)
    return slip


__all__ = ["ACCOUNT_NUMBER", "REFERENCE_NUMBER", "populated_slip"]
