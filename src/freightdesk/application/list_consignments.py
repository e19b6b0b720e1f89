"""Application service: List Consignments use case (query)."""

from __future__ import annotations

from freightdesk.application.dto import ConsignmentDTO
from freightdesk.domain.repository.consignment_repository import ConsignmentRepository


class ListConsignmentsHandler:

    def __init__(self, consignment_repo: ConsignmentRepository) -> None:
        self._consignment_repo = consignment_repo

    def handle(self) -> list[ConsignmentDTO]:
        return [
            ConsignmentDTO(
                lr_number=record.identifier,
                consignor=record.consignor,
                consignee=record.consignee,
                origin=record.origin,
                destination=record.destination,
                weight_kg=f"{record.weight_kg:f}",
                freight=str(record.freight_amount),
            )
            for record in self._consignment_repo.list_all()
        ]
