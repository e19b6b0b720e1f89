"""CLI commands for invoices."""

from __future__ import annotations

import click

from freightdesk.application.build_invoice import BuildInvoiceHandler
from freightdesk.application.dto import ChargeSpec, TotalsDTO
from freightdesk.domain.exceptions import DomainException
from freightdesk.domain.model.tax import TaxRate
from freightdesk.domain.model.value_objects import Gstin
from freightdesk.infrastructure.bootstrap import consignment_repository


def _parse_charges(raw: tuple[str, ...]) -> list[ChargeSpec]:
    """Parse ('unloading:5000', 'other:2000:Detention') into ChargeSpecs."""
    specs: list[ChargeSpec] = []
    for entry in raw:
        parts = [p.strip() for p in entry.split(":", 2)]
        if len(parts) < 2:
            raise click.BadParameter(
                f"Invalid charge '{entry}'. Expected 'kind:amount' or 'kind:amount:label'."
            )
        label = parts[2] if len(parts) == 3 and parts[2] else None
        specs.append(ChargeSpec(kind=parts[0], amount=parts[1], label=label))
    return specs


def _tax_config(
    rate: str,
    regime: str | None,
    supplier_gstin: str | None,
    recipient_gstin: str | None,
) -> TaxRate:
    """Pick the GST regime: explicit --regime wins, then the two GSTINs.

    With neither, the supply is treated as intra-state (CGST + SGST).
    """
    if regime == "flat":
        return TaxRate.flat(rate)
    if regime == "inter":
        return TaxRate.inter_state(rate)
    if regime == "intra":
        return TaxRate.intra_state(rate)

    if bool(supplier_gstin) != bool(recipient_gstin):
        raise click.UsageError(
            "--supplier-gstin and --recipient-gstin must be given together"
        )
    if supplier_gstin and recipient_gstin:
        return TaxRate.for_parties(Gstin(supplier_gstin), Gstin(recipient_gstin), rate)
    return TaxRate.intra_state(rate)


def display_totals(totals: TotalsDTO) -> None:
    """Shared formatting for the subtotal / tax / total block."""
    click.echo(f"  {'Subtotal':<36} {totals.subtotal:>14}")
    for tax in totals.taxes:
        name = f"{tax.name} ({tax.rate_percent})"
        click.echo(f"  {name:<36} {tax.amount:>14}")
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Total':<36} {totals.total:>14}")


@click.command("build")
@click.option("--lr", "lr_numbers", multiple=True, help="LR number to bill (repeatable).")
@click.option(
    "--charge",
    "charges",
    multiple=True,
    help="Extra charge as 'kind:amount[:label]', e.g. 'other:2000:Detention'.",
)
@click.option("--rate", default="5", show_default=True, help="GST rate in percent.")
@click.option(
    "--regime",
    type=click.Choice(["intra", "inter", "flat"]),
    default=None,
    help="Force CGST+SGST (intra), IGST (inter) or a single flat GST line.",
)
@click.option("--supplier-gstin", default=None, help="Transporter's GSTIN.")
@click.option("--recipient-gstin", default=None, help="Billed party's GSTIN.")
def invoice_build(
    lr_numbers: tuple[str, ...],
    charges: tuple[str, ...],
    rate: str,
    regime: str | None,
    supplier_gstin: str | None,
    recipient_gstin: str | None,
) -> None:
    """Compose an invoice for the selected LRs."""
    specs = _parse_charges(charges)
    handler = BuildInvoiceHandler(consignment_repo=consignment_repository())

    try:
        tax_config = _tax_config(rate, regime, supplier_gstin, recipient_gstin)
        dto = handler.handle(
            lr_numbers=list(lr_numbers), charges=specs, tax_config=tax_config
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Invoice for {len(dto.lr_numbers)} LR(s): {', '.join(dto.lr_numbers) or '-'}")
    click.echo()
    click.echo(f"  {'Description':<36} {'Amount':>14}")
    click.echo(f"  {'-'*51}")
    for line in dto.lines:
        click.echo(f"  {line.description:<36} {line.amount:>14}")
    click.echo(f"  {'-'*51}")
    display_totals(dto.totals)
