"""JSON-file-backed implementation of ConsignmentRepository."""

from __future__ import annotations

import json
import re
from decimal import Decimal
from pathlib import Path

from freightdesk.domain.model.consignment import ConsignmentRecord
from freightdesk.domain.model.value_objects import Money
from freightdesk.domain.repository.consignment_repository import ConsignmentRepository

_LR_NUMBER = re.compile(r"^LR-?(\d+)$", re.IGNORECASE)


class JsonConsignmentRepository(ConsignmentRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ConsignmentRepository interface --------------------------------------

    def next_identifier(self) -> str:
        highest = 0
        for raw in self._load_raw():
            match = _LR_NUMBER.match(raw["lr_number"])
            if match:
                highest = max(highest, int(match.group(1)))
        return f"LR{highest + 1:03d}"

    def get_by_id(self, identifier: str) -> ConsignmentRecord | None:
        key = identifier.strip().upper()
        for raw in self._load_raw():
            if raw["lr_number"].upper() == key:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[ConsignmentRecord]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, record: ConsignmentRecord) -> None:
        records = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["lr_number"] == record.identifier:
                records[i] = self._to_raw(record)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(record))

        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: ConsignmentRecord) -> dict:
        return {
            "lr_number": record.identifier,
            "consignor": record.consignor,
            "consignee": record.consignee,
            "origin": record.origin,
            "destination": record.destination,
            "weight_kg": str(record.weight_kg),
            "freight": str(record.freight_amount.amount),
            "currency": record.freight_amount.currency,
        }

    @staticmethod
    def _to_domain(raw: dict) -> ConsignmentRecord:
        return ConsignmentRecord(
            identifier=raw["lr_number"],
            consignor=raw.get("consignor", ""),
            consignee=raw.get("consignee", ""),
            origin=raw.get("origin", ""),
            destination=raw.get("destination", ""),
            weight_kg=Decimal(str(raw.get("weight_kg", "0"))),
            freight_amount=Money(Decimal(str(raw["freight"])), raw.get("currency", "INR")),
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
