"""Composition root - wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

The data directory is ``<repo>/data`` unless ``FREIGHTDESK_DATA_DIR``
points somewhere else.
"""

from __future__ import annotations

import os
from pathlib import Path

from freightdesk.infrastructure.persistence.json_consignment_repository import (
    JsonConsignmentRepository,
)
from freightdesk.infrastructure.persistence.json_expiry_document_repository import (
    JsonExpiryDocumentRepository,
)

DATA_DIR_ENV = "FREIGHTDESK_DATA_DIR"

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def consignment_repository() -> JsonConsignmentRepository:
    return JsonConsignmentRepository(data_dir() / "consignments.json")


def expiry_document_repository() -> JsonExpiryDocumentRepository:
    return JsonExpiryDocumentRepository(data_dir() / "eway_bills.json")
