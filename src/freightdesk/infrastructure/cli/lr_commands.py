"""CLI commands for lorry receipts."""

from __future__ import annotations

from datetime import date, datetime

import click

from freightdesk.application.capture_lorry_receipt import CaptureLorryReceiptHandler
from freightdesk.domain.exceptions import DomainException
from freightdesk.domain.model.lorry_receipt import GST_SLABS, LorryReceiptDraft
from freightdesk.infrastructure.bootstrap import (
    consignment_repository,
    expiry_document_repository,
)
from freightdesk.infrastructure.cli.invoice_commands import display_totals


@click.command("capture")
@click.option(
    "--booking-date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Booking date (defaults to today).",
)
@click.option("--consignor", default="", help="Consignor name.")
@click.option("--consignor-gstin", default="", help="Consignor GSTIN.")
@click.option("--consignee", default="", help="Consignee name.")
@click.option("--consignee-gstin", default="", help="Consignee GSTIN.")
@click.option("--origin", default="", help="Origin city.")
@click.option("--destination", default="", help="Destination city.")
@click.option("--vehicle", "vehicle_number", default="", help="Vehicle registration number.")
@click.option("--driver", "driver_name", default="", help="Driver name.")
@click.option("--material", "material_description", default="", help="Material description.")
@click.option("--weight", "weight_kg", default="", help="Weight in kg.")
@click.option("--base-freight", default="", help="Base freight amount.")
@click.option("--loading", "loading_charges", default="", help="Loading charges.")
@click.option("--unloading", "unloading_charges", default="", help="Unloading charges.")
@click.option("--door-delivery", "door_delivery_charges", default="", help="Door delivery charges.")
@click.option("--other", "other_charges", default="", help="Other charges.")
@click.option(
    "--gst-rate", type=click.Choice(list(GST_SLABS)), default="18", show_default=True,
    help="GST rate in percent.",
)
@click.option("--eway-bill", "eway_bill_number", default="", help="E-way bill number.")
@click.option("--eway-generated", "eway_bill_generated_at", default="",
              help="E-way bill generation time (ISO 8601; IST if no offset).")
@click.option("--eway-valid-until", "eway_bill_valid_until", default="",
              help="E-way bill expiry time (ISO 8601; IST if no offset).")
@click.option("--eway-validity-hours", "eway_bill_validity_hours", default="",
              help="E-way bill validity in hours.")
@click.option("--remarks", default="", help="Free-text remarks.")
def lr_capture(booking_date: datetime | None, **fields: str) -> None:
    """Capture a lorry receipt and register its e-way bill."""
    draft = LorryReceiptDraft(
        booking_date=booking_date.date() if booking_date else date.today(),
        **fields,
    )
    handler = CaptureLorryReceiptHandler(
        consignment_repo=consignment_repository(),
        document_repo=expiry_document_repository(),
    )

    try:
        dto = handler.handle(draft)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.lr_number} saved  ({dto.consignor} -> {dto.consignee})")
    click.echo(f"Route: {dto.origin} -> {dto.destination}")
    if dto.eway_bill_number:
        click.echo(f"E-way bill: {dto.eway_bill_number}")
    click.echo()
    for line in dto.lines:
        click.echo(f"  {line.description:<36} {line.amount:>14}")
    click.echo(f"  {'-'*51}")
    display_totals(dto.totals)
