"""JSON-file-backed implementation of ExpiryDocumentRepository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from freightdesk.domain.model.eway_bill import ExpiryDocument
from freightdesk.domain.repository.expiry_document_repository import (
    ExpiryDocumentRepository,
)


class JsonExpiryDocumentRepository(ExpiryDocumentRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ExpiryDocumentRepository interface -----------------------------------

    def get_by_id(self, document_number: str) -> ExpiryDocument | None:
        for raw in self._load_raw():
            if raw["eway_bill_number"] == document_number:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[ExpiryDocument]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, doc: ExpiryDocument) -> None:
        records = self._load_raw()
        replaced = False
        for i, raw in enumerate(records):
            if raw["eway_bill_number"] == doc.document_number:
                records[i] = self._to_raw(doc)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(doc))
        self._persist_raw(records)

    def delete(self, document_number: str) -> None:
        records = self._load_raw()
        remaining = [raw for raw in records if raw["eway_bill_number"] != document_number]
        if len(remaining) != len(records):
            self._persist_raw(remaining)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(doc: ExpiryDocument) -> dict:
        return {
            "eway_bill_number": doc.document_number,
            "lr_number": doc.lr_number,
            "vehicle_number": doc.vehicle_number,
            "consignor": doc.consignor,
            "consignee": doc.consignee,
            "origin": doc.origin,
            "destination": doc.destination,
            "generated_at": doc.generated_at.isoformat(),
            "validity_hours": doc.validity_hours,
            "expiry_at": doc.expiry_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> ExpiryDocument:
        # Goes through create() so records missing either validity or
        # expiry are completed, and inconsistent ones are rejected.
        return ExpiryDocument.create(
            document_number=raw["eway_bill_number"],
            generated_at=datetime.fromisoformat(raw["generated_at"]),
            validity_hours=raw.get("validity_hours"),
            expiry_at=(
                datetime.fromisoformat(raw["expiry_at"]) if raw.get("expiry_at") else None
            ),
            lr_number=raw.get("lr_number", ""),
            vehicle_number=raw.get("vehicle_number", ""),
            consignor=raw.get("consignor", ""),
            consignee=raw.get("consignee", ""),
            origin=raw.get("origin", ""),
            destination=raw.get("destination", ""),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
