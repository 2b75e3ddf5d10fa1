"""Swiss payment slip data and code-line encoding."""

from __future__ import annotations

from paymentslip.core.exceptions import (
    EncodingError,
    InvalidAmountError,
    InvalidDigitsError,
    InvalidPresenceValueError,
    MalformedAccountNumberError,
    PaymentSlipError,
)
from paymentslip.core.types import UNAVAILABLE, Unavailable
from paymentslip.encoders import ReferenceCodeLineEncoder, create_encoder
from paymentslip.models import FieldGroup, SlipData, SlipVariant
from paymentslip.services.blocks import group_into_blocks
from paymentslip.services.checksum import modulo10

__all__ = [
    "UNAVAILABLE",
    "EncodingError",
    "FieldGroup",
    "InvalidAmountError",
    "InvalidDigitsError",
    "InvalidPresenceValueError",
    "MalformedAccountNumberError",
    "PaymentSlipError",
    "ReferenceCodeLineEncoder",
    "SlipData",
    "SlipVariant",
    "Unavailable",
    "create_encoder",
    "group_into_blocks",
    "modulo10",
]
