"""Tests for the JSON-file repositories, against a temporary directory."""

import json
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from freightdesk.domain.exceptions import ValidationError
from freightdesk.domain.model.consignment import ConsignmentRecord
from freightdesk.domain.model.eway_bill import ExpiryDocument
from freightdesk.domain.model.value_objects import Money
from freightdesk.infrastructure.persistence.json_consignment_repository import (
    JsonConsignmentRepository,
)
from freightdesk.infrastructure.persistence.json_expiry_document_repository import (
    JsonExpiryDocumentRepository,
)

IST = timezone(timedelta(hours=5, minutes=30))


def _record(lr: str, freight: str = "15000") -> ConsignmentRecord:
    return ConsignmentRecord(lr, "ABC Industries", "XYZ Retail Ltd", "Mumbai", "Pune",
                             Decimal("5000"), Money.of(freight))


class TestJsonConsignmentRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "consignments.json"
        repo = JsonConsignmentRepository(path)
        assert path.exists()
        assert repo.list_all() == []
        assert repo.next_identifier() == "LR001"

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "consignments.json"
        JsonConsignmentRepository(path).save(_record("LR001"))

        loaded = JsonConsignmentRepository(path).get_by_id("LR001")
        assert loaded == _record("LR001")
        assert json.loads(path.read_text(encoding="utf-8"))[0]["freight"] == "15000.00"

    def test_save_replaces_existing(self, tmp_path):
        repo = JsonConsignmentRepository(tmp_path / "consignments.json")
        repo.save(_record("LR001", "15000"))
        repo.save(_record("LR001", "16000"))
        assert len(repo.list_all()) == 1
        assert repo.get_by_id("LR001").freight_amount == Money.of("16000")

    def test_next_identifier_follows_highest(self, tmp_path):
        repo = JsonConsignmentRepository(tmp_path / "consignments.json")
        repo.save(_record("LR002"))
        repo.save(_record("LR-2025-007"))
        repo.save(_record("LR009"))
        assert repo.next_identifier() == "LR010"

    def test_lookup_ignores_case(self, tmp_path):
        repo = JsonConsignmentRepository(tmp_path / "consignments.json")
        repo.save(_record("LR001"))
        assert repo.get_by_id(" lr001 ").identifier == "LR001"

    def test_unknown_identifier(self, tmp_path):
        assert JsonConsignmentRepository(tmp_path / "c.json").get_by_id("LR404") is None


class TestJsonExpiryDocumentRepository:

    def test_save_and_reload_in_utc(self, tmp_path):
        path = tmp_path / "eway_bills.json"
        doc = ExpiryDocument.create(
            "381234567890",
            generated_at=datetime(2025, 11, 16, 8, 0, tzinfo=IST),
            validity_hours=72,
            lr_number="LR001",
            vehicle_number="MH12AB1234",
        )
        JsonExpiryDocumentRepository(path).save(doc)

        loaded = JsonExpiryDocumentRepository(path).get_by_id("381234567890")
        assert loaded == doc
        assert loaded.expiry_at == datetime(2025, 11, 19, 2, 30, tzinfo=timezone.utc)

    def test_delete(self, tmp_path):
        repo = JsonExpiryDocumentRepository(tmp_path / "eway_bills.json")
        for number in ("381234567890", "381234567891"):
            repo.save(ExpiryDocument.create(
                number, generated_at=datetime(2025, 11, 16, tzinfo=IST), validity_hours=24
            ))
        repo.delete("381234567890")
        repo.delete("000000000000")
        assert [d.document_number for d in repo.list_all()] == ["381234567891"]

    def test_record_without_validity_is_completed(self, tmp_path):
        path = tmp_path / "eway_bills.json"
        path.write_text(json.dumps([{
            "eway_bill_number": "381234567891",
            "generated_at": "2025-11-17T10:00:00+05:30",
            "expiry_at": "2025-11-18T10:00:00+05:30",
        }]), encoding="utf-8")
        assert JsonExpiryDocumentRepository(path).list_all()[0].validity_hours == 24

    def test_inconsistent_record_rejected(self, tmp_path):
        path = tmp_path / "eway_bills.json"
        path.write_text(json.dumps([{
            "eway_bill_number": "381234567891",
            "generated_at": "2025-11-17T10:00:00+05:30",
            "validity_hours": 48,
            "expiry_at": "2025-11-18T10:00:00+05:30",
        }]), encoding="utf-8")
        with pytest.raises(ValidationError, match="does not match"):
            JsonExpiryDocumentRepository(path).list_all()
