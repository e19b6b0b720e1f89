"""ConsignmentRecord - a booked lorry receipt that can be billed."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from freightdesk.domain.exceptions import ValidationError
from freightdesk.domain.model.value_objects import Money


@dataclass(frozen=True)
class ConsignmentRecord:
    """A selectable unit of freight on the invoice screen.

    ``selected`` is UI state carried along for convenience; the invoice
    composer never looks at it. Callers pass only the records they want
    billed.
    """

    identifier: str
    consignor: str
    consignee: str
    origin: str
    destination: str
    weight_kg: Decimal
    freight_amount: Money
    selected: bool = False

    def __post_init__(self) -> None:
        if not self.identifier or not self.identifier.strip():
            raise ValidationError("Consignment identifier (LR number) is required")
        if self.weight_kg < Decimal("0"):
            raise ValidationError(
                f"Weight of {self.identifier} cannot be negative, got {self.weight_kg}"
            )

    def toggled(self) -> ConsignmentRecord:
        """Return a copy with the selection flag flipped."""
        return replace(self, selected=not self.selected)
