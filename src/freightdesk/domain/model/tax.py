"""Tax configuration and the computed totals it produces.

GST on road freight is charged either as one flat rate, or split into
named components: CGST + SGST when supplier and recipient are registered
in the same state, IGST when they are not.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from freightdesk.domain.exceptions import ValidationError
from freightdesk.domain.model.value_objects import Gstin, Money


class TaxMode(Enum):
    FLAT = "flat"
    SPLIT = "split"


def _to_rate(raw: str | int | float | Decimal) -> Decimal:
    try:
        rate = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid tax rate: {raw!r}") from exc
    if not rate.is_finite():
        raise ValidationError(f"Invalid tax rate: {raw!r}")
    return rate


@dataclass(frozen=True)
class TaxComponent:
    name: str
    rate_percent: Decimal

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Tax component name is required")
        if not isinstance(self.rate_percent, Decimal):
            object.__setattr__(self, "rate_percent", _to_rate(self.rate_percent))
        if self.rate_percent < Decimal("0"):
            raise ValidationError(
                f"Tax rate for {self.name} cannot be negative, got {self.rate_percent}"
            )


@dataclass(frozen=True)
class TaxRate:
    """How tax is applied to a subtotal.

    Use the factories; the constructor only checks structural invariants.

    Invariants:
    - FLAT mode has exactly one component
    - SPLIT mode has at least one component
    - component names are unique
    """

    mode: TaxMode
    components: tuple[TaxComponent, ...]

    def __post_init__(self) -> None:
        if not self.components:
            raise ValidationError("Tax configuration needs at least one component")
        if self.mode == TaxMode.FLAT and len(self.components) != 1:
            raise ValidationError("Flat tax takes exactly one rate")
        names = [c.name for c in self.components]
        if len(set(names)) != len(names):
            raise ValidationError(f"Duplicate tax component in {names}")

    @property
    def effective_rate_percent(self) -> Decimal:
        return sum((c.rate_percent for c in self.components), Decimal("0"))

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def flat(rate_percent: str | int | float | Decimal, name: str = "GST") -> TaxRate:
        return TaxRate(TaxMode.FLAT, (TaxComponent(name, _to_rate(rate_percent)),))

    @staticmethod
    def split(
        rates: dict[str, str | int | float | Decimal],
        effective_rate: str | int | float | Decimal | None = None,
    ) -> TaxRate:
        """Named sub-rates; if ``effective_rate`` is given they must add up to it."""
        config = TaxRate(
            TaxMode.SPLIT,
            tuple(TaxComponent(name, _to_rate(rate)) for name, rate in rates.items()),
        )
        if effective_rate is not None:
            expected = _to_rate(effective_rate)
            if config.effective_rate_percent != expected:
                raise ValidationError(
                    f"Tax components add up to {config.effective_rate_percent}%, "
                    f"expected {expected}%"
                )
        return config

    @staticmethod
    def intra_state(rate_percent: str | int | float | Decimal) -> TaxRate:
        """CGST and SGST, each half of the GST rate."""
        half = _to_rate(rate_percent) / Decimal("2")
        return TaxRate.split({"CGST": half, "SGST": half}, effective_rate=rate_percent)

    @staticmethod
    def inter_state(rate_percent: str | int | float | Decimal) -> TaxRate:
        return TaxRate.flat(rate_percent, name="IGST")

    @staticmethod
    def for_parties(
        supplier: Gstin,
        recipient: Gstin,
        rate_percent: str | int | float | Decimal,
    ) -> TaxRate:
        """Pick the GST regime from the two parties' state codes."""
        if supplier.state_code == recipient.state_code:
            return TaxRate.intra_state(rate_percent)
        return TaxRate.inter_state(rate_percent)


@dataclass(frozen=True)
class FreightTotals:
    """Result of a freight calculation.

    Invariant: ``total == subtotal + sum(tax_breakdown.values())`` to the
    paise. ``tax_breakdown`` keeps the order of the tax components.
    """

    subtotal: Money
    tax_breakdown: dict[str, Money]
    total: Money

    def __post_init__(self) -> None:
        expected = self.subtotal + self.tax_total
        if expected != self.total:
            raise ValidationError(
                f"Total {self.total} does not equal subtotal plus tax ({expected})"
            )

    @property
    def tax_total(self) -> Money:
        result = Money.zero()
        for amount in self.tax_breakdown.values():
            result = result + amount
        return result
