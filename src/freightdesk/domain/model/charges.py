"""Charge line items - the itemised components of what a shipment costs."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from freightdesk.domain.exceptions import ValidationError
from freightdesk.domain.model.value_objects import Money


class ChargeKind(Enum):
    BASE_FREIGHT = "base_freight"
    LOADING = "loading"
    UNLOADING = "unloading"
    DOOR_DELIVERY = "door_delivery"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()

    @staticmethod
    def parse(raw: str) -> ChargeKind:
        key = raw.strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return ChargeKind(key)
        except ValueError as exc:
            choices = ", ".join(k.value for k in ChargeKind)
            raise ValidationError(
                f"Unknown charge kind '{raw}' (expected one of: {choices})"
            ) from exc


@dataclass(frozen=True)
class ChargeLineItem:
    """One component of a shipment's cost.

    ``label`` names charges the enum does not cover, e.g. a detention
    charge is ``ChargeKind.OTHER`` labelled "Detention".
    """

    kind: ChargeKind
    amount: Money
    label: str | None = None

    @property
    def description(self) -> str:
        return self.label or self.kind.display_name

    @staticmethod
    def of(
        kind: ChargeKind,
        raw_amount: str | float | int | Decimal | None,
        label: str | None = None,
    ) -> ChargeLineItem:
        """Build a line item from a raw form value (bad input counts as 0)."""
        return ChargeLineItem(kind=kind, amount=Money.coerce(raw_amount), label=label)
