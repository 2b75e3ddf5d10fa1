"""Tests for the reference slip code-line encoder."""

from __future__ import annotations

import pytest

from paymentslip.core.config import AppSettings, EncodingConfig
from paymentslip.core.exceptions import EncodingError, MalformedAccountNumberError
from paymentslip.core.protocols import ICodeLineEncoder
from paymentslip.encoders import ReferenceCodeLineEncoder, create_encoder
from paymentslip.models.layout import LAYOUTS, SlipVariant
from paymentslip.models.slip_data import SlipData
from paymentslip.services.checksum import has_valid_check_digit
from tests.fakes import REFERENCE_NUMBER, populated_slip

VESR_LINE = "0100003949753>120000000000234478943216899+ 010001628>"


@pytest.fixture
def slip():
    return populated_slip()


@pytest.fixture
def encoder(slip):
    return create_encoder(slip, SlipVariant.VESR, reference_number=REFERENCE_NUMBER)


class TestVESR:
    def test_code_line_with_zero_fill(self, encoder):
        assert encoder.code_line(True) == VESR_LINE

    def test_code_line_without_zero_fill(self, encoder):
        assert encoder.code_line(False) == "013949755>120000000000234478943216899+ 011628>"

    def test_segment_check_digits_validate(self, encoder):
        assert has_valid_check_digit(encoder.amount_segment(True))
        assert has_valid_check_digit(encoder.complete_reference_number(True))

    def test_short_reference_is_zero_filled(self, slip):
        encoder = create_encoder(slip, "vesr", reference_number="123")
        reference = encoder.complete_reference_number(True)
        assert len(reference) == 27
        assert reference.startswith("0" * 23 + "123")
        assert has_valid_check_digit(reference)

    def test_formatted_reference_number(self, encoder):
        assert encoder.formatted_reference_number() == "12 00000 00000 23447 89432 16899"

    def test_zero_fill_default_comes_from_settings(self, slip):
        settings = AppSettings(encoding=EncodingConfig(fill_zeros=False))
        encoder = create_encoder(slip, "vesr", reference_number=REFERENCE_NUMBER, settings=settings)
        assert encoder.code_line() == "013949755>120000000000234478943216899+ 011628>"

    def test_default_variant_is_vesr(self, slip):
        encoder = create_encoder(slip, reference_number=REFERENCE_NUMBER)
        assert encoder.layout is LAYOUTS[SlipVariant.VESR]
        assert encoder.code_line() == VESR_LINE

    def test_satisfies_encoder_protocol(self, encoder):
        assert isinstance(encoder, ICodeLineEncoder)

    def test_reflects_later_slip_changes(self, slip, encoder):
        slip.set_amount("0.05")
        assert encoder.amount_segment(True).startswith("010000000005")


class TestBESR:
    def test_code_line_with_customer_id(self, slip):
        encoder = create_encoder(
            slip, SlipVariant.BESR, reference_number="123456789", banking_customer_id="210000"
        )
        assert encoder.code_line(True) == "0100003949753>210000000000000001234567890+ 010001628>"

    def test_reference_without_zero_fill(self, slip):
        encoder = create_encoder(
            slip, SlipVariant.BESR, reference_number="123456789", banking_customer_id="210000"
        )
        assert encoder.complete_reference_number(False) == "2100001234567893"

    def test_requires_customer_id(self, slip):
        encoder = create_encoder(slip, SlipVariant.BESR, reference_number="123456789")
        with pytest.raises(EncodingError) as exc_info:
            encoder.code_line()
        assert exc_info.value.segment == "reference"

    def test_customer_id_must_have_six_digits(self, slip):
        encoder = create_encoder(
            slip, SlipVariant.BESR, reference_number="1", banking_customer_id="2100"
        )
        with pytest.raises(EncodingError):
            encoder.code_line()


class TestESRPlus:
    def test_open_amount(self, slip):
        slip.set_with_amount(False)
        encoder = create_encoder(slip, SlipVariant.ESR_PLUS, reference_number=REFERENCE_NUMBER)
        assert encoder.code_line() == "042>120000000000234478943216899+ 010001628>"

    def test_with_amount_matches_vesr(self, slip):
        encoder = create_encoder(slip, SlipVariant.ESR_PLUS, reference_number=REFERENCE_NUMBER)
        assert encoder.code_line() == VESR_LINE


class TestNotForPayment:
    def test_redacted_slip_encodes_markers(self, slip, encoder):
        slip.set_not_for_payment(True)
        assert encoder.code_line(True) == "01" + "X" * 11 + ">" + "X" * 27 + "+ " + "X" * 9 + ">"

    def test_redacted_amount_segment_ignores_zero_fill(self, slip, encoder):
        slip.set_not_for_payment(True)
        assert encoder.amount_segment(True) == encoder.amount_segment(False)


class TestEncodingErrors:
    def test_missing_amount(self, slip, encoder):
        slip.set_with_amount(False)
        with pytest.raises(EncodingError) as exc_info:
            encoder.code_line()
        assert exc_info.value.segment == "amount"
        assert exc_info.value.variant == "vesr"

    def test_amount_too_large(self, slip, encoder):
        slip.set_amount("100000000.00")
        with pytest.raises(EncodingError):
            encoder.code_line()

    def test_disabled_account(self, slip, encoder):
        slip.set_with_account_number(False)
        with pytest.raises(EncodingError) as exc_info:
            encoder.code_line()
        assert not isinstance(exc_info.value, MalformedAccountNumberError)
        assert exc_info.value.segment == "participant"

    def test_malformed_account_number(self, slip, encoder):
        slip.set_account_number("01-23-456-7")
        with pytest.raises(MalformedAccountNumberError) as exc_info:
            encoder.code_line()
        assert exc_info.value.account_number == "01-23-456-7"

    def test_non_digit_account_part(self, slip, encoder):
        slip.set_account_number("01-ABC-7")
        with pytest.raises(EncodingError):
            encoder.code_line()

    def test_leftover_redaction_markers_in_amount(self, slip, encoder):
        slip.set_not_for_payment(True)
        slip.set_not_for_payment(False)
        with pytest.raises(EncodingError) as exc_info:
            encoder.code_line()
        assert exc_info.value.segment == "amount"

    def test_redaction_cleared_then_new_data_encodes(self, slip, encoder):
        slip.set_not_for_payment(True)
        slip.set_not_for_payment(False)
        slip.set_amount("3949.75")
        slip.set_account_number("01-162-8")
        assert encoder.code_line() == VESR_LINE

    @pytest.mark.parametrize("account_number", ["1234-5-6", "1-162-8", "01-162-12", "01-162-"])
    def test_participant_prefix_and_check_widths(self, slip, encoder, account_number):
        slip.set_account_number(account_number)
        with pytest.raises(EncodingError) as exc_info:
            encoder.participant_number(True)
        assert exc_info.value.segment == "participant"

    def test_serial_too_long(self, slip, encoder):
        slip.set_account_number("01-1234567-8")
        with pytest.raises(EncodingError):
            encoder.code_line()

    @pytest.mark.parametrize("reference", ["", "12AB", "1" * 27])
    def test_bad_reference(self, slip, reference):
        encoder = create_encoder(slip, "vesr", reference_number=reference)
        with pytest.raises(EncodingError) as exc_info:
            encoder.code_line()
        assert exc_info.value.segment == "reference"

    def test_customer_id_on_postal_variant(self, slip):
        encoder = create_encoder(
            slip, "vesr", reference_number=REFERENCE_NUMBER, banking_customer_id="210000"
        )
        with pytest.raises(EncodingError):
            encoder.code_line()

    def test_unknown_variant(self, slip):
        with pytest.raises(ValueError):
            create_encoder(slip, "red", reference_number=REFERENCE_NUMBER)


def test_encoder_can_be_built_directly():
    slip = SlipData()
    slip.set_account_number("01-162-8")
    slip.set_amount(0)
    encoder = ReferenceCodeLineEncoder(
        slip, LAYOUTS[SlipVariant.VESR], reference_number=REFERENCE_NUMBER
    )
    assert encoder.code_line() == "0100000000005>120000000000234478943216899+ 010001628>"
