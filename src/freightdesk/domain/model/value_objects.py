"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from freightdesk.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

PAISE = Decimal("0.01")


def round_currency(value: Decimal) -> Decimal:
    """Round to the INR minor unit (paise), half away from zero."""
    return value.quantize(PAISE, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Amounts are Decimals quantised to two places on construction, so
    every arithmetic step stays at paise precision.
    """

    amount: Decimal
    currency: str = "INR"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        try:
            rounded = round_currency(self.amount)
        except InvalidOperation as exc:
            raise ValidationError(f"Money amount {self.amount} is too large") from exc
        object.__setattr__(self, "amount", rounded)

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def percent(self, rate_percent: Decimal) -> Money:
        """Return ``rate_percent`` % of this amount, rounded to paise."""
        return Money(self.amount * rate_percent / Decimal("100"), self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    @property
    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"₹{self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Strict factory: raises ValidationError for anything unparsable."""
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def coerce(raw: str | float | int | Decimal | None) -> Money:
        """Permissive factory for raw form values.

        Blank, unparsable, non-finite, negative and oversized inputs all become zero,
        the same way an empty charge field counts as nothing.
        """
        if raw is None:
            return Money.zero()
        try:
            value = Decimal(str(raw).strip())
        except (InvalidOperation, ValueError):
            if str(raw).strip():
                logger.warning("Unparsable amount %r treated as 0", raw)
            return Money.zero()
        if not value.is_finite() or value < 0:
            logger.warning("Amount %r outside the valid range, treated as 0", raw)
            return Money.zero()
        try:
            return Money(value)
        except ValidationError:
            logger.warning("Amount %r too large, treated as 0", raw)
            return Money.zero()


_GSTIN_PATTERN = re.compile(r"^[0-9]{2}[0-9A-Z]{13}$")


@dataclass(frozen=True)
class Gstin:
    """A 15-character GST identification number.

    The first two digits are the registering state's code, which decides
    whether a supply is intra-state or inter-state.
    """

    value: str

    def __post_init__(self) -> None:
        normalised = self.value.strip().upper() if isinstance(self.value, str) else ""
        if not _GSTIN_PATTERN.match(normalised):
            raise ValidationError(f"Invalid GSTIN: {self.value!r}")
        object.__setattr__(self, "value", normalised)

    @property
    def state_code(self) -> str:
        return self.value[:2]

    def __str__(self) -> str:
        return self.value
