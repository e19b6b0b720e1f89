"""E-way bills and other time-bound transport documents.

An e-way bill is valid for a fixed number of hours from generation. The
document itself only records when it was generated and when it lapses;
how urgent that is depends on the moment you ask, so severity is never
stored (see ``validity_classifier``).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from freightdesk.domain.exceptions import ValidationError

ONE_HOUR = timedelta(hours=1)


class Severity(Enum):
    EXPIRED = "expired"
    CRITICAL = "critical"
    WARNING = "warning"
    ACTIVE = "active"


@dataclass(frozen=True)
class ExpiryClassification:
    hours_remaining: int
    severity: Severity


def require_aware(value: datetime, field_name: str) -> datetime:
    """Reject naive datetimes and normalise aware ones to UTC."""
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValidationError(f"{field_name} must carry a timezone, got {value.isoformat()}")
    return value.astimezone(timezone.utc)


def _expiry_after(generated_at: datetime, validity_hours: int, document_number: str) -> datetime:
    try:
        return generated_at + timedelta(hours=validity_hours)
    except OverflowError as exc:
        raise ValidationError(
            f"E-way bill {document_number}: validity of {validity_hours}h is out of range"
        ) from exc


@dataclass(frozen=True)
class ExpiryDocument:
    """A document that lapses ``validity_hours`` after ``generated_at``.

    Use ``ExpiryDocument.create()``: it derives whichever of validity or
    expiry is missing and checks the two agree. The plain constructor
    still enforces ``expiry_at > generated_at`` so a reconstituted record
    cannot be inconsistent either.
    """

    document_number: str
    lr_number: str
    vehicle_number: str
    consignor: str
    consignee: str
    origin: str
    destination: str
    generated_at: datetime
    validity_hours: int
    expiry_at: datetime

    def __post_init__(self) -> None:
        if not self.document_number or not self.document_number.strip():
            raise ValidationError("E-way bill number is required")
        object.__setattr__(
            self, "generated_at", require_aware(self.generated_at, "generated_at")
        )
        object.__setattr__(self, "expiry_at", require_aware(self.expiry_at, "expiry_at"))
        if self.expiry_at <= self.generated_at:
            raise ValidationError(
                f"E-way bill {self.document_number} expires at or before it was generated"
            )
        expected = _expiry_after(self.generated_at, self.validity_hours, self.document_number)
        if expected != self.expiry_at:
            raise ValidationError(
                f"E-way bill {self.document_number}: validity of {self.validity_hours}h "
                f"does not match expiry {self.expiry_at.isoformat()}"
            )

    @staticmethod
    def create(
        document_number: str,
        generated_at: datetime,
        validity_hours: int | None = None,
        expiry_at: datetime | None = None,
        lr_number: str = "",
        vehicle_number: str = "",
        consignor: str = "",
        consignee: str = "",
        origin: str = "",
        destination: str = "",
    ) -> ExpiryDocument:
        """Create a new document from either its validity or its expiry (or both)."""
        generated_at = require_aware(generated_at, "generated_at")

        if validity_hours is None and expiry_at is None:
            raise ValidationError("Either validity hours or an expiry time is required")

        if validity_hours is not None and validity_hours <= 0:
            raise ValidationError(
                f"Validity must be a positive number of hours, got {validity_hours}"
            )

        if expiry_at is None:
            expiry_at = _expiry_after(generated_at, validity_hours, document_number)
        else:
            expiry_at = require_aware(expiry_at, "expiry_at")
            if expiry_at <= generated_at:
                raise ValidationError(
                    f"E-way bill {document_number} expires at or before it was generated"
                )
            span = expiry_at - generated_at
            if validity_hours is None:
                if span % ONE_HOUR:
                    raise ValidationError(
                        f"E-way bill {document_number}: validity must be whole hours, "
                        f"got {span}"
                    )
                validity_hours = span // ONE_HOUR
            elif expiry_at != _expiry_after(generated_at, validity_hours, document_number):
                raise ValidationError(
                    f"E-way bill {document_number}: validity of {validity_hours}h "
                    f"does not match expiry {expiry_at.isoformat()}"
                )

        return ExpiryDocument(
            document_number=document_number.strip(),
            lr_number=lr_number,
            vehicle_number=vehicle_number,
            consignor=consignor,
            consignee=consignee,
            origin=origin,
            destination=destination,
            generated_at=generated_at,
            validity_hours=validity_hours,
            expiry_at=expiry_at,
        )
