"""Domain service: Tax Calculator.

Each tax component is rounded to paise on its own and only then added
up, so the grand total always equals subtotal plus the printed components.
"""

from __future__ import annotations

import logging

from freightdesk.domain.model.tax import FreightTotals, TaxRate
from freightdesk.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


def apply_tax(subtotal: Money, config: TaxRate) -> FreightTotals:
    breakdown: dict[str, Money] = {}
    total = subtotal
    for component in config.components:
        amount = subtotal.percent(component.rate_percent)
        breakdown[component.name] = amount
        total = total + amount

    logger.debug(
        "Applied %s tax %s%% to %s: total %s",
        config.mode.value,
        config.effective_rate_percent,
        subtotal,
        total,
    )
    return FreightTotals(subtotal=subtotal, tax_breakdown=breakdown, total=total)
