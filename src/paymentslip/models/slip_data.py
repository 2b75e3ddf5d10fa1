"""Payment slip data: the field groups printed on a slip and their presence flags.

Every field belongs to one group (bank, account, recipient, amount, payer).
A group can be switched off for slips that do not carry it, e.g. slips with
a pre-printed recipient. Switched-off groups are cleared, ignore writes and
read as ``UNAVAILABLE``.

Marking a slip "not for payment" overwrites every group with redaction
markers so the slip can only serve as a specimen.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from paymentslip.core.exceptions import InvalidAmountError, InvalidPresenceValueError
from paymentslip.core.types import (
    UNAVAILABLE,
    MaybeAmount,
    MaybeText,
    MaybeWholeUnits,
)

logger = logging.getLogger(__name__)

REDACTED_TEXT = "XXXXXX"
REDACTED_AMOUNT = "XXXXXXXX.XX"
REDACTED_WHOLE_UNITS = "XXXXXXXX"
REDACTED_FRACTIONAL_UNITS = "XX"
REDACTED_ACCOUNT_DIGITS = "XXXXXXXXX"

ACCOUNT_SEPARATOR = "-"
ACCOUNT_SEPARATOR_COUNT = 2

CENT = Decimal("0.01")


class FieldGroup(StrEnum):
    BANK = "bank"
    ACCOUNT = "account"
    RECIPIENT = "recipient"
    AMOUNT = "amount"
    PAYER = "payer"


# --- Field groups ---


class BankFields(BaseModel):
    """Name and city of the bank the payment goes through."""

    model_config = {"frozen": True}

    name: str = ""
    city: str = ""


class AccountFields(BaseModel):
    """Account number in ``PP-SSSSSS-C`` form."""

    model_config = {"frozen": True}

    number: str = ""


class AddressFields(BaseModel):
    """Four free-text address lines (recipient or payer)."""

    model_config = {"frozen": True}

    line1: str = ""
    line2: str = ""
    line3: str = ""
    line4: str = ""

    @property
    def lines(self) -> tuple[str, str, str, str]:
        return (self.line1, self.line2, self.line3, self.line4)


class AmountFields(BaseModel):
    """Amount in francs, held to the cent."""

    model_config = {"frozen": True}

    value: Decimal = Field(default=Decimal("0"), ge=0, allow_inf_nan=False)
    redacted: bool = False  # value is meaningless, read as REDACTED_AMOUNT

    @field_validator("value")
    @classmethod
    def _round_to_cents(cls, value: Decimal) -> Decimal:
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


_EMPTY_FIELDS: dict[FieldGroup, BaseModel] = {
    FieldGroup.BANK: BankFields(),
    FieldGroup.ACCOUNT: AccountFields(),
    FieldGroup.RECIPIENT: AddressFields(),
    FieldGroup.AMOUNT: AmountFields(),
    FieldGroup.PAYER: AddressFields(),
}

_REDACTED_ADDRESS = AddressFields(
    line1=REDACTED_TEXT, line2=REDACTED_TEXT, line3=REDACTED_TEXT, line4=REDACTED_TEXT,
)

_REDACTED_FIELDS: dict[FieldGroup, BaseModel] = {
    FieldGroup.BANK: BankFields(name=REDACTED_TEXT, city=REDACTED_TEXT),
    FieldGroup.ACCOUNT: AccountFields(number=REDACTED_TEXT),
    FieldGroup.RECIPIENT: _REDACTED_ADDRESS,
    FieldGroup.AMOUNT: AmountFields(redacted=True),
    FieldGroup.PAYER: _REDACTED_ADDRESS,
}


class SlipState(BaseModel):
    """Immutable snapshot of a slip.

    Transitions return a new state, so a cascade (clearing a group,
    redacting everything) is applied in one assignment.
    """

    model_config = {"frozen": True}

    enabled: frozenset[FieldGroup] = frozenset(FieldGroup)
    bank: BankFields = BankFields()
    account: AccountFields = AccountFields()
    recipient: AddressFields = AddressFields()
    amount: AmountFields = AmountFields()
    payer: AddressFields = AddressFields()
    not_for_payment: bool = False

    def fields_for(self, group: FieldGroup) -> Any:
        return getattr(self, group.value)

    def with_group(self, group: FieldGroup, fields: BaseModel) -> SlipState:
        return self.model_copy(update={group.value: fields})

    def toggled(self, group: FieldGroup, enabled: bool) -> SlipState:
        if enabled:
            return self.model_copy(update={"enabled": self.enabled | {group}})
        # A specimen keeps its markers in a disabled group.
        cleared = _REDACTED_FIELDS[group] if self.not_for_payment else _EMPTY_FIELDS[group]
        return self.model_copy(update={"enabled": self.enabled - {group}, group.value: cleared})

    def redacted(self) -> SlipState:
        """Overwrite every group with markers, whatever its presence flag."""
        update: dict[str, Any] = {group.value: fields for group, fields in _REDACTED_FIELDS.items()}
        update["not_for_payment"] = True
        return self.model_copy(update=update)


class _GatedField:
    """Read-only accessor for one field of a presence-gated group."""

    def __init__(self, group: FieldGroup, attr: str) -> None:
        self._group = group
        self._attr = attr
        self._name = attr

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def __get__(self, slip: SlipData | None, owner: type | None = None) -> Any:
        if slip is None:
            return self
        return slip._read(self._group, self._attr)

    def __set__(self, slip: SlipData, value: Any) -> None:
        raise AttributeError(f"{self._name} is read-only, use the SlipData setters")


class SlipData:
    """Data of one payment slip.

    All groups start enabled and empty. Values only change through the
    ``set_*`` methods; writes to a disabled group are ignored, reads of a
    disabled group return ``UNAVAILABLE``.

    Not thread-safe: one owner mutates an instance at a time.
    """

    bank_name = _GatedField(FieldGroup.BANK, "name")
    bank_city = _GatedField(FieldGroup.BANK, "city")
    account_number = _GatedField(FieldGroup.ACCOUNT, "number")
    recipient_line1 = _GatedField(FieldGroup.RECIPIENT, "line1")
    recipient_line2 = _GatedField(FieldGroup.RECIPIENT, "line2")
    recipient_line3 = _GatedField(FieldGroup.RECIPIENT, "line3")
    recipient_line4 = _GatedField(FieldGroup.RECIPIENT, "line4")
    recipient_lines = _GatedField(FieldGroup.RECIPIENT, "lines")
    payer_line1 = _GatedField(FieldGroup.PAYER, "line1")
    payer_line2 = _GatedField(FieldGroup.PAYER, "line2")
    payer_line3 = _GatedField(FieldGroup.PAYER, "line3")
    payer_line4 = _GatedField(FieldGroup.PAYER, "line4")
    payer_lines = _GatedField(FieldGroup.PAYER, "lines")

    def __init__(self) -> None:
        self._state = SlipState()

    @property
    def state(self) -> SlipState:
        """Current snapshot, e.g. for ``state.model_dump()``."""
        return self._state

    # --- Presence flags ---

    def set_presence(self, group: FieldGroup | str, enabled: bool) -> None:
        """Enable or disable a field group.

        Disabling clears the group's fields. Enabling does not bring old
        values back.

        Raises:
            InvalidPresenceValueError: If ``enabled`` is not a bool.
        """
        if not isinstance(enabled, bool):
            raise InvalidPresenceValueError(str(group), enabled)
        group = FieldGroup(group)
        self._state = self._state.toggled(group, enabled)
        logger.debug("Field group %s %s", group, "enabled" if enabled else "disabled and cleared")

    def is_enabled(self, group: FieldGroup | str) -> bool:
        return FieldGroup(group) in self._state.enabled

    def set_with_bank(self, enabled: bool = True) -> None:
        self.set_presence(FieldGroup.BANK, enabled)

    def set_with_account_number(self, enabled: bool = True) -> None:
        self.set_presence(FieldGroup.ACCOUNT, enabled)

    def set_with_recipient(self, enabled: bool = True) -> None:
        self.set_presence(FieldGroup.RECIPIENT, enabled)

    def set_with_amount(self, enabled: bool = True) -> None:
        self.set_presence(FieldGroup.AMOUNT, enabled)

    def set_with_payer(self, enabled: bool = True) -> None:
        self.set_presence(FieldGroup.PAYER, enabled)

    @property
    def with_bank(self) -> bool:
        return self.is_enabled(FieldGroup.BANK)

    @property
    def with_account_number(self) -> bool:
        return self.is_enabled(FieldGroup.ACCOUNT)

    @property
    def with_recipient(self) -> bool:
        return self.is_enabled(FieldGroup.RECIPIENT)

    @property
    def with_amount(self) -> bool:
        return self.is_enabled(FieldGroup.AMOUNT)

    @property
    def with_payer(self) -> bool:
        return self.is_enabled(FieldGroup.PAYER)

    # --- Not for payment ---

    def set_not_for_payment(self, enabled: bool = True) -> None:
        """Mark the slip as a specimen.

        Enabling overwrites every field with redaction markers; the old
        values are gone for good. Disabling only clears the flag.
        """
        if not isinstance(enabled, bool):
            raise InvalidPresenceValueError("not_for_payment", enabled)
        if enabled:
            self._state = self._state.redacted()
            logger.debug("Slip marked not for payment, all fields redacted")
        else:
            self._state = self._state.model_copy(update={"not_for_payment": False})
            logger.debug("Slip not-for-payment flag cleared")

    @property
    def not_for_payment(self) -> bool:
        return self._state.not_for_payment

    # --- Setters ---

    def set_bank_data(self, name: str, city: str) -> None:
        self._write(FieldGroup.BANK, BankFields(name=name, city=city))

    def set_account_number(self, number: str) -> None:
        self._write(FieldGroup.ACCOUNT, AccountFields(number=number))

    def set_recipient_data(self, line1: str, line2: str = "", line3: str = "", line4: str = "") -> None:
        self._write(
            FieldGroup.RECIPIENT, AddressFields(line1=line1, line2=line2, line3=line3, line4=line4)
        )

    def set_payer_data(self, line1: str, line2: str = "", line3: str = "", line4: str = "") -> None:
        self._write(
            FieldGroup.PAYER, AddressFields(line1=line1, line2=line2, line3=line3, line4=line4)
        )

    def set_amount(self, amount: Decimal | int | float | str) -> None:
        """Set the amount, rounded half-up to the cent.

        Raises:
            InvalidAmountError: If the amount is negative or not a finite number.
        """
        if not self.with_amount:
            logger.debug("Ignoring write to disabled field group %s", FieldGroup.AMOUNT)
            return
        try:
            fields = AmountFields(value=amount)
        except ValidationError as exc:
            raise InvalidAmountError(amount, exc.errors()[0]["msg"]) from exc
        self._state = self._state.with_group(FieldGroup.AMOUNT, fields)

    def _write(self, group: FieldGroup, fields: BaseModel) -> None:
        if group not in self._state.enabled:
            logger.debug("Ignoring write to disabled field group %s", group)
            return
        self._state = self._state.with_group(group, fields)

    # --- Getters ---

    def _visible(self, group: FieldGroup) -> bool:
        # A specimen shows its markers in every group.
        return self._state.not_for_payment or group in self._state.enabled

    def _read(self, group: FieldGroup, attr: str) -> Any:
        if not self._visible(group):
            return UNAVAILABLE
        return getattr(self._state.fields_for(group), attr)

    @property
    def amount(self) -> MaybeAmount:
        if not self._visible(FieldGroup.AMOUNT):
            return UNAVAILABLE
        if self._state.amount.redacted:
            return REDACTED_AMOUNT
        return self._state.amount.value

    def amount_whole_units(self) -> MaybeWholeUnits:
        """Francs part of the amount."""
        if self._state.not_for_payment:
            return REDACTED_WHOLE_UNITS
        amount = self.amount
        if amount is UNAVAILABLE:
            return UNAVAILABLE
        if isinstance(amount, str):
            return REDACTED_WHOLE_UNITS
        return int(amount)

    def amount_fractional_units(self) -> MaybeText:
        """Cents part of the amount as two digits, e.g. ``"05"``."""
        if self._state.not_for_payment:
            return REDACTED_FRACTIONAL_UNITS
        amount = self.amount
        if amount is UNAVAILABLE:
            return UNAVAILABLE
        if isinstance(amount, str):
            return REDACTED_FRACTIONAL_UNITS
        cents = ((amount - int(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return f"{int(cents):02d}"

    def account_digits_only(self) -> MaybeText:
        """Account number without its two separators.

        ``UNAVAILABLE`` if the account group is off or the number does not
        have exactly two separators.
        """
        if self._state.not_for_payment:
            return REDACTED_ACCOUNT_DIGITS
        number = self.account_number
        if number is UNAVAILABLE or number.count(ACCOUNT_SEPARATOR) != ACCOUNT_SEPARATOR_COUNT:
            return UNAVAILABLE
        return number.replace(ACCOUNT_SEPARATOR, "")
