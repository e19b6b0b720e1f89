"""CLI commands for consignments."""

from __future__ import annotations

import click

from freightdesk.application.list_consignments import ListConsignmentsHandler
from freightdesk.infrastructure.bootstrap import consignment_repository


@click.command("list")
def consignment_list() -> None:
    """List consignments available for invoicing."""
    handler = ListConsignmentsHandler(consignment_repo=consignment_repository())
    rows = handler.handle()

    if not rows:
        click.echo("No consignments found.")
        return

    click.echo(
        f"{'LR':<8} {'Consignor':<18} {'Consignee':<18} {'Route':<22} {'Weight':>8} {'Freight':>12}"
    )
    click.echo("-" * 91)
    for row in rows:
        route = f"{row.origin} -> {row.destination}"
        click.echo(
            f"{row.lr_number:<8} {row.consignor:<18} {row.consignee:<18} "
            f"{route:<22} {row.weight_kg:>8} {row.freight:>12}"
        )
