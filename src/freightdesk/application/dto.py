"""Data Transfer Objects - plain containers that cross layer boundaries.

DTOs carry already-formatted values to the CLI. Timestamps are shown in
Indian Standard Time; the domain itself only ever works in UTC.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from freightdesk.domain.model.tax import FreightTotals, TaxRate

IST = timezone(timedelta(hours=5, minutes=30), "IST")


def format_ist(moment: datetime) -> str:
    return moment.astimezone(IST).strftime("%d-%m-%Y %H:%M IST")


@dataclass(frozen=True)
class ChargeSpec:
    """Input: one extra charge as typed by the user, e.g. ('other', '2000', 'Detention')."""

    kind: str
    amount: str
    label: str | None = None


@dataclass(frozen=True)
class ChargeLineDTO:
    description: str
    amount: str  # formatted, e.g. "₹5000.00"


@dataclass(frozen=True)
class TaxLineDTO:
    name: str
    rate_percent: str
    amount: str


@dataclass(frozen=True)
class TotalsDTO:
    subtotal: str
    taxes: list[TaxLineDTO]
    total: str

    @staticmethod
    def from_totals(totals: FreightTotals, config: TaxRate) -> TotalsDTO:
        rates = {c.name: c.rate_percent for c in config.components}
        return TotalsDTO(
            subtotal=str(totals.subtotal),
            taxes=[
                TaxLineDTO(name=name, rate_percent=f"{rates[name]}%", amount=str(amount))
                for name, amount in totals.tax_breakdown.items()
            ],
            total=str(totals.total),
        )


@dataclass(frozen=True)
class InvoiceDTO:
    lr_numbers: list[str]
    lines: list[ChargeLineDTO]
    totals: TotalsDTO


@dataclass(frozen=True)
class ConsignmentDTO:
    lr_number: str
    consignor: str
    consignee: str
    origin: str
    destination: str
    weight_kg: str
    freight: str


@dataclass(frozen=True)
class LorryReceiptDTO:
    lr_number: str
    consignor: str
    consignee: str
    origin: str
    destination: str
    lines: list[ChargeLineDTO]
    totals: TotalsDTO
    eway_bill_number: str | None


@dataclass(frozen=True)
class ExpiryRowDTO:
    document_number: str
    lr_number: str
    vehicle_number: str
    route: str
    generated_at: str
    expiry_at: str
    hours_remaining: int
    status: str
    badge: str  # e.g. "Critical (5h left)"


@dataclass(frozen=True)
class ExpiryReportDTO:
    rows: list[ExpiryRowDTO]
    expired: int
    critical: int
    warning: int
    active: int
    total: int
