import logging

import click

from freightdesk.infrastructure.cli.consignment_commands import consignment_list
from freightdesk.infrastructure.cli.ewaybill_commands import ewaybill_list
from freightdesk.infrastructure.cli.invoice_commands import invoice_build
from freightdesk.infrastructure.cli.lr_commands import lr_capture


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log calculation details.")
def cli(verbose: bool) -> None:
    """freightdesk - freight document engine"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def consignment() -> None:
    """Browse booked consignments."""


@cli.group()
def invoice() -> None:
    """Build freight invoices."""


@cli.group()
def lr() -> None:
    """Capture lorry receipts."""


@cli.group()
def ewaybill() -> None:
    """Watch e-way bill validity."""


# Register subcommands
consignment.add_command(consignment_list)
invoice.add_command(invoice_build)
lr.add_command(lr_capture)
ewaybill.add_command(ewaybill_list)
