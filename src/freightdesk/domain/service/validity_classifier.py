"""Domain service: Document Validity Classifier.

Buckets an e-way bill by how much validity it has left at a given
moment:

    remaining < 0             -> EXPIRED
    0 <= remaining <= 12h     -> CRITICAL
    12h < remaining <= 24h    -> WARNING
    remaining > 24h           -> ACTIVE

The comparison uses the exact remaining duration; ``hours_remaining``
is that duration floored to whole hours, for display. ``now`` is always
passed in, never read from the clock here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Sequence

from freightdesk.domain.model.eway_bill import (
    ONE_HOUR,
    ExpiryClassification,
    ExpiryDocument,
    Severity,
    require_aware,
)

logger = logging.getLogger(__name__)

CRITICAL_WINDOW = timedelta(hours=12)
WARNING_WINDOW = timedelta(hours=24)


@dataclass(frozen=True)
class ExpirySummary:
    expired: int = 0
    critical: int = 0
    warning: int = 0
    active: int = 0

    @property
    def total(self) -> int:
        return self.expired + self.critical + self.warning + self.active


def severity_for(remaining: timedelta) -> Severity:
    if remaining < timedelta(0):
        return Severity.EXPIRED
    if remaining <= CRITICAL_WINDOW:
        return Severity.CRITICAL
    if remaining <= WARNING_WINDOW:
        return Severity.WARNING
    return Severity.ACTIVE


def classify(doc: ExpiryDocument, now: datetime) -> ExpiryClassification:
    remaining = doc.expiry_at - require_aware(now, "now")
    result = ExpiryClassification(
        hours_remaining=remaining // ONE_HOUR,
        severity=severity_for(remaining),
    )
    logger.debug(
        "E-way bill %s: %sh left, %s",
        doc.document_number,
        result.hours_remaining,
        result.severity.value,
    )
    return result


def summarize(docs: Iterable[ExpiryDocument], now: datetime) -> ExpirySummary:
    counts = {severity: 0 for severity in Severity}
    for doc in docs:
        counts[classify(doc, now).severity] += 1
    return ExpirySummary(
        expired=counts[Severity.EXPIRED],
        critical=counts[Severity.CRITICAL],
        warning=counts[Severity.WARNING],
        active=counts[Severity.ACTIVE],
    )


def filter_by_severity(
    docs: Iterable[ExpiryDocument],
    now: datetime,
    severity: Severity,
) -> list[ExpiryDocument]:
    return [doc for doc in docs if classify(doc, now).severity == severity]


def search(docs: Sequence[ExpiryDocument], query: str) -> list[ExpiryDocument]:
    """Match LR number, vehicle and parties case-insensitively.

    The e-way bill number is numeric, so it is matched as a plain
    substring. A blank query matches everything.
    """
    needle = query.strip().lower()
    if not needle:
        return list(docs)
    return [
        doc
        for doc in docs
        if needle in doc.lr_number.lower()
        or query.strip() in doc.document_number
        or needle in doc.vehicle_number.lower()
        or needle in doc.consignor.lower()
        or needle in doc.consignee.lower()
    ]
