"""CLI commands for the e-way bill watch list."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from freightdesk.application.show_expiring_documents import ShowExpiringDocumentsHandler
from freightdesk.domain.exceptions import DomainException
from freightdesk.domain.model.eway_bill import Severity
from freightdesk.infrastructure.bootstrap import expiry_document_repository


@click.command("list")
@click.option("--search", "query", default="", help="Match LR, e-way bill, vehicle or party.")
@click.option(
    "--status",
    type=click.Choice([s.value for s in Severity]),
    default=None,
    help="Only show bills in this state.",
)
def ewaybill_list(query: str, status: str | None) -> None:
    """Show e-way bills, soonest-expiring first."""
    handler = ShowExpiringDocumentsHandler(document_repo=expiry_document_repository())

    try:
        report = handler.handle(
            now=datetime.now(timezone.utc),
            query=query,
            severity=Severity(status) if status else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Expired: {report.expired}  Critical: {report.critical}  "
        f"Warning: {report.warning}  Active: {report.active}  Total: {report.total}"
    )
    click.echo()

    if not report.rows:
        click.echo("No e-way bills match.")
        return

    click.echo(
        f"{'E-way bill':<14} {'LR':<13} {'Vehicle':<12} {'Route':<24} {'Expires':<22} {'Status'}"
    )
    click.echo("-" * 105)
    for row in report.rows:
        click.echo(
            f"{row.document_number:<14} {row.lr_number:<13} {row.vehicle_number:<12} "
            f"{row.route:<24} {row.expiry_at:<22} {row.badge}"
        )
