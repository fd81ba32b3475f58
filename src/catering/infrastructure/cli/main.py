import logging

import click

from catering.infrastructure.cli.invoice_commands import invoice_show
from catering.infrastructure.cli.menu_commands import menu_add, menu_list, menu_set_price
from catering.infrastructure.cli.order_commands import (
    order_cancel,
    order_checkout,
    order_create,
    order_deliver,
    order_pay,
    order_quote,
    order_show,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log pricing decisions.")
def cli(verbose: bool) -> None:
    """Flight catering: menu, orders and invoices"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def menu() -> None:
    """Manage the menu catalog."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def invoice() -> None:
    """Produce invoices."""


# Register subcommands
menu.add_command(menu_add)
menu.add_command(menu_list)
menu.add_command(menu_set_price)
order.add_command(order_cancel)
order.add_command(order_checkout)
order.add_command(order_create)
order.add_command(order_deliver)
order.add_command(order_pay)
order.add_command(order_quote)
order.add_command(order_show)
invoice.add_command(invoice_show)
