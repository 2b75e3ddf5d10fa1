"""Payment slip exception hierarchy."""

from __future__ import annotations

from typing import Any


class PaymentSlipError(Exception):
    """Base exception for all payment slip errors."""


class InvalidPresenceValueError(PaymentSlipError, TypeError):
    """A presence toggle received something other than a bool."""

    def __init__(self, group: str, value: Any) -> None:
        self.group = group
        self.value = value
        super().__init__(f"Presence flag for {group!r} must be a bool, got {type(value).__name__}")


class InvalidAmountError(PaymentSlipError, ValueError):
    """Amount is negative, not finite or not a number."""

    def __init__(self, amount: Any, message: str) -> None:
        self.amount = amount
        super().__init__(f"Invalid amount {amount!r}: {message}")


class InvalidDigitsError(PaymentSlipError, ValueError):
    """Checksum input contains characters other than ASCII digits."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Expected ASCII digits only, got {value!r}")


class EncodingError(PaymentSlipError):
    """A code-line segment could not be built."""

    def __init__(self, variant: str, segment: str, message: str) -> None:
        self.variant = variant
        self.segment = segment
        super().__init__(f"{variant} code line, {segment} segment: {message}")


class MalformedAccountNumberError(EncodingError):
    """Account number does not have exactly two separators."""

    def __init__(self, variant: str, account_number: str) -> None:
        self.account_number = account_number
        super().__init__(
            variant,
            "participant",
            f"account number {account_number!r} must contain exactly two separators",
        )
