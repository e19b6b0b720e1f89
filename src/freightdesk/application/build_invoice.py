"""Application service: Build Invoice use case.

Resolves the LR numbers the user ticked, turns the typed extra charges
into line items and lets the invoice composer do the arithmetic.
"""

from __future__ import annotations

import logging

from freightdesk.application.dto import ChargeLineDTO, ChargeSpec, InvoiceDTO, TotalsDTO
from freightdesk.domain.exceptions import EntityNotFoundError, ValidationError
from freightdesk.domain.model.charges import ChargeKind, ChargeLineItem
from freightdesk.domain.model.consignment import ConsignmentRecord
from freightdesk.domain.model.tax import TaxRate
from freightdesk.domain.repository.consignment_repository import ConsignmentRepository
from freightdesk.domain.service.invoice_composer import compose, freight_lines

logger = logging.getLogger(__name__)


class BuildInvoiceHandler:

    def __init__(self, consignment_repo: ConsignmentRepository) -> None:
        self._consignment_repo = consignment_repo

    def handle(
        self,
        lr_numbers: list[str],
        charges: list[ChargeSpec],
        tax_config: TaxRate,
    ) -> InvoiceDTO:
        """Compose an invoice for the given consignments.

        Steps:
        1. Resolve every LR number (fail on unknown or repeated ones).
        2. Parse extra charges; amounts that do not parse count as 0.
        3. Compose totals. An empty selection is allowed and bills 0.00.
        """
        selected = self._resolve(lr_numbers)
        extras = [
            ChargeLineItem.of(ChargeKind.parse(spec.kind), spec.amount, spec.label)
            for spec in charges
        ]

        totals = compose(selected, extras, tax_config)
        logger.info(
            "Invoice composed for %d consignment(s): total %s",
            len(selected),
            totals.total,
        )

        return InvoiceDTO(
            lr_numbers=[record.identifier for record in selected],
            lines=[
                ChargeLineDTO(description=item.description, amount=str(item.amount))
                for item in [*freight_lines(selected), *extras]
            ],
            totals=TotalsDTO.from_totals(totals, tax_config),
        )

    def _resolve(self, lr_numbers: list[str]) -> list[ConsignmentRecord]:
        seen: set[str] = set()
        records: list[ConsignmentRecord] = []
        for lr_number in lr_numbers:
            key = lr_number.strip().upper()
            if key in seen:
                raise ValidationError(f"LR {lr_number} is listed more than once")
            seen.add(key)

            record = self._consignment_repo.get_by_id(key)
            if record is None:
                raise EntityNotFoundError(f"Consignment not found: '{lr_number}'")
            records.append(record)
        return records
