"""Slip data model and variant segment tables."""

from __future__ import annotations

from paymentslip.models.layout import LAYOUTS, SegmentLayout, SlipVariant
from paymentslip.models.slip_data import FieldGroup, SlipData, SlipState

__all__ = ["LAYOUTS", "FieldGroup", "SegmentLayout", "SlipData", "SlipState", "SlipVariant"]
