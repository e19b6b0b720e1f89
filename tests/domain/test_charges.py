"""Unit tests for charge line items and the charge aggregator."""

from decimal import Decimal

import pytest

from freightdesk.domain.exceptions import ValidationError
from freightdesk.domain.model.charges import ChargeKind, ChargeLineItem
from freightdesk.domain.model.value_objects import Money
from freightdesk.domain.service.charge_aggregator import aggregate


def _lr_charges(base="30000", loading="3000", unloading="2000", door="0", other="0"):
    return [
        ChargeLineItem.of(ChargeKind.BASE_FREIGHT, base),
        ChargeLineItem.of(ChargeKind.LOADING, loading),
        ChargeLineItem.of(ChargeKind.UNLOADING, unloading),
        ChargeLineItem.of(ChargeKind.DOOR_DELIVERY, door),
        ChargeLineItem.of(ChargeKind.OTHER, other),
    ]


class TestChargeKind:

    def test_parse_is_forgiving_about_case_and_separators(self):
        assert ChargeKind.parse("Door-Delivery") == ChargeKind.DOOR_DELIVERY
        assert ChargeKind.parse(" base freight ") == ChargeKind.BASE_FREIGHT

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown charge kind"):
            ChargeKind.parse("toll")


class TestChargeLineItem:

    def test_of_coerces_blank_to_zero(self):
        item = ChargeLineItem.of(ChargeKind.LOADING, "")
        assert item.amount == Money.zero()

    def test_of_coerces_negative_to_zero(self):
        item = ChargeLineItem.of(ChargeKind.LOADING, "-100")
        assert item.amount == Money.zero()

    def test_of_coerces_oversized_to_zero(self):
        item = ChargeLineItem.of(ChargeKind.OTHER, "9" * 29)
        assert item.amount == Money.zero()

    def test_description_prefers_label(self):
        item = ChargeLineItem.of(ChargeKind.OTHER, "2000", label="Detention")
        assert item.description == "Detention"

    def test_description_falls_back_to_kind(self):
        assert ChargeLineItem.of(ChargeKind.DOOR_DELIVERY, "1").description == "Door Delivery"


class TestAggregate:

    def test_lr_charges_subtotal(self):
        assert aggregate(_lr_charges()) == Money.of("35000.00")

    def test_empty_is_zero(self):
        assert aggregate([]) == Money.zero()

    def test_unparsable_fields_count_as_zero(self):
        items = _lr_charges(loading="n/a", unloading="", door="Infinity", other="NaN")
        assert aggregate(items) == Money.of("30000")

    def test_rounded_to_paise(self):
        items = [
            ChargeLineItem.of(ChargeKind.BASE_FREIGHT, "100.333"),
            ChargeLineItem.of(ChargeKind.OTHER, "0.10"),
        ]
        assert aggregate(items).amount == Decimal("100.43")

    def test_idempotent(self):
        items = _lr_charges()
        assert aggregate(items) == aggregate(items)

    def test_additive_over_any_partition(self):
        items = _lr_charges(door="1250.75", other="99.99")
        for cut in range(len(items) + 1):
            left, right = items[:cut], items[cut:]
            assert aggregate(items) == aggregate(left) + aggregate(right)
