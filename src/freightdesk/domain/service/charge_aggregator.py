"""Domain service: Charge Aggregator."""

from __future__ import annotations

from typing import Iterable

from freightdesk.domain.model.charges import ChargeLineItem
from freightdesk.domain.model.value_objects import Money


def aggregate(line_items: Iterable[ChargeLineItem]) -> Money:
    """Sum every line item into a subtotal (0.00 for no items)."""
    subtotal = Money.zero()
    for item in line_items:
        subtotal = subtotal + item.amount
    return subtotal
