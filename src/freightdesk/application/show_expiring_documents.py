"""Application service: Show Expiring E-way Bills use case (query).

The caller supplies ``now``; refreshing the badges as time passes means
calling ``handle`` again with a later instant.
"""

from __future__ import annotations

from datetime import datetime

from freightdesk.application.dto import ExpiryReportDTO, ExpiryRowDTO, format_ist
from freightdesk.domain.model.eway_bill import ExpiryClassification, ExpiryDocument, Severity
from freightdesk.domain.repository.expiry_document_repository import (
    ExpiryDocumentRepository,
)
from freightdesk.domain.service.validity_classifier import (
    classify,
    filter_by_severity,
    search,
    summarize,
)


class ShowExpiringDocumentsHandler:

    def __init__(self, document_repo: ExpiryDocumentRepository) -> None:
        self._document_repo = document_repo

    def handle(
        self,
        now: datetime,
        query: str = "",
        severity: Severity | None = None,
    ) -> ExpiryReportDTO:
        """List e-way bills soonest-expiring first.

        ``query`` and ``severity`` narrow the rows only; the summary
        counts always cover every document on file.
        """
        docs = self._document_repo.list_all()
        summary = summarize(docs, now)

        rows = search(docs, query)
        if severity is not None:
            rows = filter_by_severity(rows, now, severity)
        rows.sort(key=lambda doc: doc.expiry_at)

        return ExpiryReportDTO(
            rows=[self._to_row(doc, classify(doc, now)) for doc in rows],
            expired=summary.expired,
            critical=summary.critical,
            warning=summary.warning,
            active=summary.active,
            total=summary.total,
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_row(doc: ExpiryDocument, result: ExpiryClassification) -> ExpiryRowDTO:
        return ExpiryRowDTO(
            document_number=doc.document_number,
            lr_number=doc.lr_number,
            vehicle_number=doc.vehicle_number,
            route=f"{doc.origin} -> {doc.destination}",
            generated_at=format_ist(doc.generated_at),
            expiry_at=format_ist(doc.expiry_at),
            hours_remaining=result.hours_remaining,
            status=result.severity.value,
            badge=_badge(result),
        )


def _badge(result: ExpiryClassification) -> str:
    hours = result.hours_remaining
    if result.severity == Severity.EXPIRED:
        return "Expired"
    if result.severity == Severity.CRITICAL:
        return f"Critical ({hours}h left)"
    if result.severity == Severity.WARNING:
        return f"Warning ({hours}h left)"
    return f"{hours}h left"
