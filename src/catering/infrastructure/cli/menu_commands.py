"""CLI commands for the menu catalog."""

from __future__ import annotations

import click

from catering.application.add_menu_item import AddMenuItemHandler
from catering.application.list_menu import ListMenuHandler
from catering.application.update_menu_item_price import UpdateMenuItemPriceHandler
from catering.domain.exceptions import DomainException
from catering.domain.model.value_objects import Location
from catering.infrastructure.bootstrap import menu_repository


@click.command("add")
@click.option("--name", required=True, help="Dish name.")
@click.option("--price-a", required=True, help=f"Price at {Location.A.label} (e.g. 12.50).")
@click.option("--price-b", required=True, help=f"Price at {Location.B.label} (e.g. 14.00).")
@click.option("--unit", default=None, help="Display unit, e.g. 'per piece'.")
@click.option("--category", default=None, help="Menu category, e.g. 'breakfast'.")
def menu_add(
    name: str, price_a: str, price_b: str, unit: str | None, category: str | None
) -> None:
    """Add a dish to the catalog."""
    handler = AddMenuItemHandler(menu_repo=menu_repository())

    try:
        item = handler.handle(
            name=name, price_a=price_a, price_b=price_b, unit=unit, category=category
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu item #{item.id} '{item.name}' added")


@click.command("list")
@click.option("--location", default=None, help="Only show prices for this kitchen (A/B).")
def menu_list(location: str | None) -> None:
    """List the available dishes."""
    handler = ListMenuHandler(menu_repo=menu_repository())

    try:
        items = handler.handle(location)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not items:
        click.echo("No menu items found.")
        return

    codes = list(items[0].prices)
    header = "".join(f" {code:>10}" for code in codes)
    click.echo(f"{'ID':<6} {'Name':<24} {'Unit':<12}{header}")
    click.echo("-" * (44 + 11 * len(codes)))
    for item in items:
        prices = "".join(f" {item.prices[code]:>10}" for code in codes)
        click.echo(f"{item.id:<6} {item.name:<24} {item.unit or '':<12}{prices}")


@click.command("set-price")
@click.option("--id", "menu_item_id", required=True, type=int, help="Menu item ID.")
@click.option("--location", required=True, help="Kitchen whose price changes (A/B).")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def menu_set_price(menu_item_id: int, location: str, price: str) -> None:
    """Change one kitchen's price for a dish."""
    handler = UpdateMenuItemPriceHandler(menu_repo=menu_repository())

    try:
        handler.handle(menu_item_id=menu_item_id, location=location, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Menu item #{menu_item_id} price at {location} updated to {price}")
