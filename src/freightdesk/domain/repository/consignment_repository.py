"""Abstract repository for ConsignmentRecord.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live
elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from freightdesk.domain.model.consignment import ConsignmentRecord


class ConsignmentRepository(ABC):

    @abstractmethod
    def next_identifier(self) -> str:
        """Generate the next unused LR number."""

    @abstractmethod
    def get_by_id(self, identifier: str) -> ConsignmentRecord | None:
        """Return a consignment by LR number, or None if not found.

        LR numbers match regardless of case and surrounding whitespace.
        """

    @abstractmethod
    def list_all(self) -> list[ConsignmentRecord]:
        """Return every consignment."""

    @abstractmethod
    def save(self, record: ConsignmentRecord) -> None:
        """Persist a new or updated consignment."""
