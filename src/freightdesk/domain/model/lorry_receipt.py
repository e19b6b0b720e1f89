"""LorryReceiptDraft - the typed snapshot of an LR capture form.

Every field the capture screen knows about is listed here with its type,
so nothing reads form values by string key. Values stay as the user
typed them (strings); parsing happens when the draft is turned into
charges, parties or an e-way bill.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from freightdesk.domain.exceptions import ValidationError
from freightdesk.domain.model.charges import ChargeKind, ChargeLineItem
from freightdesk.domain.model.tax import TaxRate
from freightdesk.domain.model.value_objects import Gstin

REQUIRED_FIELDS = (
    "booking_date",
    "consignor",
    "consignee",
    "origin",
    "destination",
    "vehicle_number",
    "material_description",
)

GST_SLABS = ("5", "12", "18", "28")


@dataclass(frozen=True)
class LorryReceiptDraft:
    booking_date: date | None = None

    consignor: str = ""
    consignor_gstin: str = ""
    consignor_address: str = ""
    consignee: str = ""
    consignee_gstin: str = ""
    consignee_address: str = ""

    origin: str = ""
    destination: str = ""
    distance_km: str = ""

    vehicle_number: str = ""
    vehicle_type: str = ""
    driver_name: str = ""
    driver_phone: str = ""
    driver_license: str = ""

    material_description: str = ""
    packing_type: str = ""
    weight_kg: str = ""
    freight_terms: str = ""

    invoice_number: str = ""
    invoice_date: str = ""
    invoice_value: str = ""

    eway_bill_number: str = ""
    eway_bill_generated_at: str = ""
    eway_bill_valid_until: str = ""
    eway_bill_validity_hours: str = ""

    insurance_company: str = ""
    insurance_policy_number: str = ""
    insurance_amount: str = ""

    base_freight: str = ""
    loading_charges: str = ""
    unloading_charges: str = ""
    door_delivery_charges: str = ""
    other_charges: str = ""
    gst_rate: str = "18"

    remarks: str = ""

    # --- Validation -----------------------------------------------------------

    def missing_fields(self) -> list[str]:
        """Names of required fields that are blank, in form order."""
        missing = []
        for name in REQUIRED_FIELDS:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return missing

    def validate(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise ValidationError(f"Required fields missing: {', '.join(missing)}")
        if self.gst_rate.strip() not in GST_SLABS:
            raise ValidationError(
                f"GST rate must be one of {', '.join(GST_SLABS)}%, got '{self.gst_rate}'"
            )
        # GSTINs are optional on the form but must be well-formed when given.
        for gstin in (self.consignor_gstin, self.consignee_gstin):
            if gstin.strip():
                Gstin(gstin)

    # --- Derived values -------------------------------------------------------

    def charge_items(self) -> list[ChargeLineItem]:
        """The five charge fields as line items (blank or bad values count as 0)."""
        return [
            ChargeLineItem.of(ChargeKind.BASE_FREIGHT, self.base_freight),
            ChargeLineItem.of(ChargeKind.LOADING, self.loading_charges),
            ChargeLineItem.of(ChargeKind.UNLOADING, self.unloading_charges),
            ChargeLineItem.of(ChargeKind.DOOR_DELIVERY, self.door_delivery_charges),
            ChargeLineItem.of(ChargeKind.OTHER, self.other_charges),
        ]

    def tax_rate(self) -> TaxRate:
        return TaxRate.flat(self.gst_rate.strip())

    @property
    def has_eway_bill(self) -> bool:
        return bool(self.eway_bill_number.strip())
