"""CLI commands for invoices."""

from __future__ import annotations

import click

from catering.application.generate_invoice import GenerateInvoiceHandler
from catering.domain.exceptions import DomainException
from catering.infrastructure.bootstrap import order_repository


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to invoice.")
def invoice_show(order_id: int) -> None:
    """Print the invoice for an order."""
    handler = GenerateInvoiceHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Invoice {dto.invoice_number}")
    click.echo(f"Order:    {dto.order_number}  ({dto.order_date})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Kitchen:  {dto.kitchen}")
    if dto.flight is not None:
        click.echo(f"Flight:   {dto.flight.tail_number} ({dto.flight.aircraft_type}) {dto.flight.route}")
        click.echo(f"Departs:  {dto.flight.departure}")
    click.echo()
    click.echo(f"  {'Item':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<24} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Subtotal':<31} {dto.subtotal:>20}")
    click.echo(f"  {'Delivery fee':<31} {dto.delivery_fee:>20}")
    click.echo(f"  {'Total':<31} {dto.total:>20}")
