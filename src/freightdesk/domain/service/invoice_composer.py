"""Domain service: Invoice Composer.

Bills a set of consignments: one base-freight line per consignment plus
any extra charges (unloading, detention, ...), then tax on the lot.
"""

from __future__ import annotations

from typing import Sequence

from freightdesk.domain.model.charges import ChargeKind, ChargeLineItem
from freightdesk.domain.model.consignment import ConsignmentRecord
from freightdesk.domain.model.tax import FreightTotals, TaxRate
from freightdesk.domain.service.charge_aggregator import aggregate
from freightdesk.domain.service.tax_calculator import apply_tax


def freight_lines(selected: Sequence[ConsignmentRecord]) -> list[ChargeLineItem]:
    return [
        ChargeLineItem(
            kind=ChargeKind.BASE_FREIGHT,
            amount=record.freight_amount,
            label=record.identifier,
        )
        for record in selected
    ]


def compose(
    selected: Sequence[ConsignmentRecord],
    extra_charges: Sequence[ChargeLineItem],
    tax_config: TaxRate,
) -> FreightTotals:
    """Compose invoice totals for exactly the records passed in.

    No filtering happens here: ``selected`` is whatever the caller wants
    billed. An empty selection with no charges gives zero totals.
    """
    subtotal = aggregate([*freight_lines(selected), *extra_charges])
    return apply_tax(subtotal, tax_config)
