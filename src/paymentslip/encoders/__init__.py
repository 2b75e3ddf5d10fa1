"""Code-line encoders, one layout per slip variant."""

from __future__ import annotations

from paymentslip.core.config import AppSettings
from paymentslip.encoders.base import BaseCodeLineEncoder
from paymentslip.encoders.reference import ReferenceCodeLineEncoder
from paymentslip.models.layout import LAYOUTS, SlipVariant
from paymentslip.models.slip_data import SlipData


def create_encoder(
    slip: SlipData,
    variant: SlipVariant | str | None = None,
    *,
    reference_number: str,
    banking_customer_id: str = "",
    settings: AppSettings | None = None,
) -> ReferenceCodeLineEncoder:
    """Create the encoder for ``variant`` bound to ``slip``.

    The variant defaults to ``settings.encoding.default_variant``.
    """
    if settings is None:
        settings = AppSettings()

    layout = LAYOUTS[SlipVariant(variant or settings.encoding.default_variant)]
    return ReferenceCodeLineEncoder(
        slip,
        layout,
        reference_number=reference_number,
        banking_customer_id=banking_customer_id,
        settings=settings,
    )


__all__ = ["BaseCodeLineEncoder", "ReferenceCodeLineEncoder", "create_encoder"]
