"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from freightdesk.domain.exceptions import ValidationError
from freightdesk.domain.model.value_objects import Gstin, Money


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "INR"

    def test_quantised_to_paise(self):
        assert Money(Decimal("10.005")).amount == Decimal("10.01")
        assert Money(Decimal("10.004")).amount == Decimal("10.00")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10) == Money.of("10.00")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten rupees")

    def test_of_rejects_nan(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of("NaN")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "INR") + Money(Decimal("5"), "USD")

    def test_overflowing_sum_rejected(self):
        big = Money.of("9" * 26)
        with pytest.raises(ValidationError, match="too large"):
            big + big

    def test_percent_rounds_half_up(self):
        assert Money.of("0.10").percent(Decimal("5")) == Money.of("0.01")
        assert Money.of("35000").percent(Decimal("18")) == Money.of("6300.00")

    def test_str_formatting(self):
        assert str(Money.of("41300")) == "₹41300.00"
        assert str(Money.of("9.5")) == "₹9.50"


class TestMoneyCoerce:

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "NaN", "Infinity", "-5", -5])
    def test_invalid_inputs_become_zero(self, raw):
        assert Money.coerce(raw) == Money.zero()

    def test_float_nan_becomes_zero(self):
        assert Money.coerce(float("nan")) == Money.zero()

    def test_valid_input_kept(self):
        assert Money.coerce(" 3000 ") == Money.of("3000.00")

    @pytest.mark.parametrize("raw", ["1e30", "9" * 29])
    def test_oversized_inputs_become_zero(self, raw):
        assert Money.coerce(raw) == Money.zero()


# ── Gstin ────────────────────────────────────────────────────────────────────


class TestGstin:

    def test_state_code(self):
        assert Gstin("27AABCU9603R1ZM").state_code == "27"

    def test_normalised_to_upper_case(self):
        assert str(Gstin(" 29aadcb2230m1zt ")) == "29AADCB2230M1ZT"

    @pytest.mark.parametrize("raw", ["", "27AABCU9603R1Z", "XXAABCU9603R1ZM", "27AABCU9603R1ZM9"])
    def test_malformed_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid GSTIN"):
            Gstin(raw)
