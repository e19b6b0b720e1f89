"""Application service: Capture Lorry Receipt use case.

Validates an LR draft, prices it, and registers the results: the LR
becomes a billable consignment, and its e-way bill (when one was
entered) joins the expiry watch list.

Timestamps typed on the form without an offset are read as Indian
Standard Time, the same zone they are displayed in.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation

from freightdesk.application.dto import IST, ChargeLineDTO, LorryReceiptDTO, TotalsDTO
from freightdesk.domain.exceptions import ValidationError
from freightdesk.domain.model.consignment import ConsignmentRecord
from freightdesk.domain.model.eway_bill import ExpiryDocument
from freightdesk.domain.model.lorry_receipt import LorryReceiptDraft
from freightdesk.domain.repository.consignment_repository import ConsignmentRepository
from freightdesk.domain.repository.expiry_document_repository import (
    ExpiryDocumentRepository,
)
from freightdesk.domain.service.charge_aggregator import aggregate
from freightdesk.domain.service.tax_calculator import apply_tax

logger = logging.getLogger(__name__)


class CaptureLorryReceiptHandler:

    def __init__(
        self,
        consignment_repo: ConsignmentRepository,
        document_repo: ExpiryDocumentRepository,
    ) -> None:
        self._consignment_repo = consignment_repo
        self._document_repo = document_repo

    def handle(self, draft: LorryReceiptDraft) -> LorryReceiptDTO:
        draft.validate()

        lr_number = self._consignment_repo.next_identifier()

        # Nothing is saved unless the e-way bill is valid too.
        eway_bill = self._build_eway_bill(draft, lr_number) if draft.has_eway_bill else None
        if eway_bill is not None and self._document_repo.get_by_id(eway_bill.document_number):
            raise ValidationError(
                f"E-way bill {eway_bill.document_number} is already registered"
            )

        items = draft.charge_items()
        tax_config = draft.tax_rate()
        subtotal = aggregate(items)
        totals = apply_tax(subtotal, tax_config)

        record = ConsignmentRecord(
            identifier=lr_number,
            consignor=draft.consignor.strip(),
            consignee=draft.consignee.strip(),
            origin=draft.origin.strip(),
            destination=draft.destination.strip(),
            weight_kg=_parse_weight(draft.weight_kg),
            freight_amount=subtotal,
        )
        self._save(record, eway_bill)
        logger.info("LR %s captured: %s -> %s", lr_number, record.origin, record.destination)
        if eway_bill is not None:
            logger.info(
                "E-way bill %s registered, valid until %s",
                eway_bill.document_number,
                eway_bill.expiry_at.isoformat(),
            )

        return LorryReceiptDTO(
            lr_number=lr_number,
            consignor=record.consignor,
            consignee=record.consignee,
            origin=record.origin,
            destination=record.destination,
            lines=[
                ChargeLineDTO(description=item.description, amount=str(item.amount))
                for item in items
            ],
            totals=TotalsDTO.from_totals(totals, tax_config),
            eway_bill_number=eway_bill.document_number if eway_bill else None,
        )

    # --- Helpers --------------------------------------------------------------

    def _save(self, record: ConsignmentRecord, eway_bill: ExpiryDocument | None) -> None:
        """Save the e-way bill, then the LR; an LR is never left without its bill."""
        if eway_bill is None:
            self._consignment_repo.save(record)
            return

        self._document_repo.save(eway_bill)
        try:
            self._consignment_repo.save(record)
        except Exception:
            logger.error(
                "Saving LR %s failed, withdrawing e-way bill %s",
                record.identifier,
                eway_bill.document_number,
            )
            self._document_repo.delete(eway_bill.document_number)
            raise

    @staticmethod
    def _build_eway_bill(draft: LorryReceiptDraft, lr_number: str) -> ExpiryDocument:
        if not draft.eway_bill_generated_at.strip():
            raise ValidationError("E-way bill generation time is required")

        validity_hours = None
        if draft.eway_bill_validity_hours.strip():
            try:
                validity_hours = int(draft.eway_bill_validity_hours.strip())
            except ValueError as exc:
                raise ValidationError(
                    f"Invalid e-way bill validity: '{draft.eway_bill_validity_hours}'"
                ) from exc

        expiry_at = None
        if draft.eway_bill_valid_until.strip():
            expiry_at = _parse_timestamp(draft.eway_bill_valid_until, "e-way bill expiry")

        return ExpiryDocument.create(
            document_number=draft.eway_bill_number,
            generated_at=_parse_timestamp(
                draft.eway_bill_generated_at, "e-way bill generation time"
            ),
            validity_hours=validity_hours,
            expiry_at=expiry_at,
            lr_number=lr_number,
            vehicle_number=draft.vehicle_number.strip(),
            consignor=draft.consignor.strip(),
            consignee=draft.consignee.strip(),
            origin=draft.origin.strip(),
            destination=draft.destination.strip(),
        )


def _parse_timestamp(raw: str, what: str) -> datetime:
    try:
        moment = datetime.fromisoformat(raw.strip())
    except ValueError as exc:
        raise ValidationError(f"Invalid {what}: '{raw}'") from exc
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=IST)
    return moment


def _parse_weight(raw: str) -> Decimal:
    """Weight is informational; blank or unparsable means 0 kg."""
    try:
        weight = Decimal(raw.strip())
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not weight.is_finite() or weight < 0:
        return Decimal("0")
    return weight
