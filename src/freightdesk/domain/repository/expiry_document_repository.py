"""Abstract repository for ExpiryDocument (e-way bills)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from freightdesk.domain.model.eway_bill import ExpiryDocument


class ExpiryDocumentRepository(ABC):

    @abstractmethod
    def get_by_id(self, document_number: str) -> ExpiryDocument | None:
        """Return a document by its e-way bill number, or None."""

    @abstractmethod
    def list_all(self) -> list[ExpiryDocument]:
        """Return every document."""

    @abstractmethod
    def save(self, doc: ExpiryDocument) -> None:
        """Persist a new or updated document."""

    @abstractmethod
    def delete(self, document_number: str) -> None:
        """Remove a document; unknown numbers are ignored."""
