"""Unit tests for ConsignmentRecord and the invoice composer."""

from decimal import Decimal

import pytest

from freightdesk.domain.exceptions import ValidationError
from freightdesk.domain.model.charges import ChargeKind, ChargeLineItem
from freightdesk.domain.model.consignment import ConsignmentRecord
from freightdesk.domain.model.tax import TaxRate
from freightdesk.domain.model.value_objects import Money
from freightdesk.domain.service.invoice_composer import compose, freight_lines


def _record(lr: str, freight: str, weight: str = "1000") -> ConsignmentRecord:
    return ConsignmentRecord(
        identifier=lr,
        consignor="ABC Industries",
        consignee="XYZ Retail Ltd",
        origin="Mumbai",
        destination="Pune",
        weight_kg=Decimal(weight),
        freight_amount=Money.of(freight),
    )


class TestConsignmentRecord:

    def test_toggled_returns_flipped_copy(self):
        record = _record("LR001", "15000")
        selected = record.toggled()
        assert selected.selected is True
        assert record.selected is False
        assert selected.toggled() == record

    def test_blank_identifier_rejected(self):
        with pytest.raises(ValidationError, match="identifier"):
            _record(" ", "100")

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _record("LR001", "100", weight="-1")


class TestCompose:

    def test_three_consignments_with_extras_and_split_gst(self):
        selected = [
            _record("LR001", "15000"),
            _record("LR002", "12000"),
            _record("LR003", "18000"),
        ]
        extras = [
            ChargeLineItem.of(ChargeKind.UNLOADING, "5000"),
            ChargeLineItem.of(ChargeKind.OTHER, "2000", label="Detention"),
        ]
        totals = compose(selected, extras, TaxRate.split({"CGST": "2.5", "SGST": "2.5"}))

        assert totals.subtotal == Money.of("52000.00")
        assert totals.tax_breakdown == {
            "CGST": Money.of("1300.00"),
            "SGST": Money.of("1300.00"),
        }
        assert totals.total == Money.of("54600.00")

    def test_inter_state_igst(self):
        totals = compose([_record("LR004", "22000")], [], TaxRate.inter_state("5"))
        assert totals.tax_breakdown == {"IGST": Money.of("1100.00")}
        assert totals.total == Money.of("23100.00")

    @pytest.mark.parametrize(
        "config",
        [TaxRate.flat("18"), TaxRate.intra_state("5"), TaxRate.inter_state("12")],
    )
    def test_empty_selection_is_zero(self, config):
        totals = compose([], [], config)
        assert totals.subtotal == Money.zero()
        assert totals.total == Money.zero()

    def test_extras_alone_are_billed(self):
        totals = compose([], [ChargeLineItem.of(ChargeKind.OTHER, "500")], TaxRate.flat("0"))
        assert totals.total == Money.of("500")

    def test_selection_flag_is_ignored(self):
        record = _record("LR001", "15000")
        config = TaxRate.flat("0")
        assert compose([record], [], config) == compose([record.toggled()], [], config)


class TestFreightLines:

    def test_one_base_freight_line_per_record(self):
        lines = freight_lines([_record("LR001", "15000"), _record("LR002", "12000")])
        assert [(l.kind, l.description, l.amount) for l in lines] == [
            (ChargeKind.BASE_FREIGHT, "LR001", Money.of("15000")),
            (ChargeKind.BASE_FREIGHT, "LR002", Money.of("12000")),
        ]
