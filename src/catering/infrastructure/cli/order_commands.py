"""CLI commands for composing and managing orders."""

from __future__ import annotations

import click

from catering.application.cancel_order import CancelOrderHandler
from catering.application.checkout_order import CheckoutOrderHandler
from catering.application.confirm_payment import ConfirmPaymentHandler
from catering.application.deliver_order import DeliverOrderHandler
from catering.application.dto import OrderItemSpec
from catering.application.quote_order import QuoteOrderHandler
from catering.application.show_order import ShowOrderHandler
from catering.application.start_order import StartOrderHandler, add_items
from catering.application.submit_order import SubmitOrderHandler
from catering.domain.exceptions import DomainException
from catering.domain.model.order import FlightDetails
from catering.domain.service.pricing_resolver import PricingResolver
from catering.infrastructure.bootstrap import (
    default_location,
    menu_repository,
    order_repository,
)


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'Croissant:3,Greek Salad:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'DishName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for dish '{name}'."
            )
        specs.append(OrderItemSpec(menu_item_name=name.strip(), quantity=qty))
    return specs


def _build_session(location: str | None, items: str) -> PricingResolver:
    specs = _parse_items(items)
    menu_repo = menu_repository()
    resolver = StartOrderHandler(menu_repo, default_location()).handle(location)
    add_items(resolver, menu_repo, specs)
    return resolver


def _display_lines(items) -> None:
    click.echo(f"  {'Item':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in items:
        click.echo(
            f"  {item.name:<24} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*51}")


def _display_flight(flight) -> None:
    if flight is None:
        return
    click.echo(f"Flight:   {flight.tail_number} ({flight.aircraft_type}) {flight.route}")
    click.echo(f"Departs:  {flight.departure}")
    click.echo(f"Aboard:   {flight.passenger_count} passengers, {flight.crew_count} crew")
    click.echo(f"Delivery: {flight.delivery_location} at {flight.delivery_time}")


def _display_totals(dto) -> None:
    click.echo(f"  {'Subtotal':<31} {dto.subtotal:>20}")
    click.echo(f"  {'Delivery fee':<31} {dto.delivery_fee:>20}")
    click.echo(f"  {'Order Total':<31} {dto.total:>20}")


@click.command("quote")
@click.option("--location", default=None, help="Kitchen (A/B); defaults to the configured one.")
@click.option("--items", required=True, help="Items as 'Dish:Qty,Dish:Qty'.")
def order_quote(location: str | None, items: str) -> None:
    """Price a cart without placing the order."""
    try:
        resolver = _build_session(location, items)
        dto = QuoteOrderHandler().handle(resolver)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Quote for kitchen {dto.kitchen} ({dto.location})")
    click.echo()
    _display_lines(dto.items)
    _display_totals(dto)


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--location", default=None, help="Kitchen (A/B); defaults to the configured one.")
@click.option("--items", required=True, help="Items as 'Dish:Qty,Dish:Qty'.")
@click.option("--notes", default=None, help="Special notes for the kitchen.")
@click.option("--aircraft", "aircraft_type", required=True, help="Aircraft type, e.g. 'Cessna Citation XLS'.")
@click.option("--tail-number", required=True, help="Aircraft registration.")
@click.option("--departure-date", required=True, type=click.DateTime(formats=["%Y-%m-%d"]), help="YYYY-MM-DD.")
@click.option("--departure-time", required=True, type=click.DateTime(formats=["%H:%M"]), help="HH:MM, local.")
@click.option("--from", "departure_airport", required=True, help="Departure airport code.")
@click.option("--to", "arrival_airport", default=None, help="Arrival airport code.")
@click.option("--passengers", required=True, type=int, help="Passenger count.")
@click.option("--crew", required=True, type=int, help="Crew count.")
@click.option("--delivery-location", required=True, help="Where to hand over the catering (FBO, gate, stand).")
@click.option("--delivery-time", required=True, type=click.DateTime(formats=["%H:%M"]), help="HH:MM, local.")
def order_create(
    customer: str,
    location: str | None,
    items: str,
    notes: str | None,
    aircraft_type: str,
    tail_number: str,
    departure_date,
    departure_time,
    departure_airport: str,
    arrival_airport: str | None,
    passengers: int,
    crew: int,
    delivery_location: str,
    delivery_time,
) -> None:
    """Place a new catering order."""
    try:
        flight = FlightDetails(
            aircraft_type=aircraft_type,
            tail_number=tail_number,
            departure_date=departure_date.date(),
            departure_time=departure_time.time(),
            departure_airport=departure_airport,
            arrival_airport=arrival_airport,
            passenger_count=passengers,
            crew_count=crew,
            delivery_location=delivery_location,
            delivery_time=delivery_time.time(),
        )
        resolver = _build_session(location, items)
        dto = SubmitOrderHandler(order_repo=order_repository()).handle(
            customer_name=customer, resolver=resolver, flight=flight, special_notes=notes
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_number} (#{dto.id}) created  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Kitchen:  {dto.kitchen}")
    _display_flight(dto.flight)
    click.echo()
    _display_lines(dto.items)
    _display_totals(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_number}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Kitchen:  {dto.kitchen}")
    click.echo(f"Created:  {dto.created_at}")
    _display_flight(dto.flight)
    if dto.special_notes:
        click.echo(f"Notes:    {dto.special_notes}")
    click.echo()
    _display_lines(dto.items)
    _display_totals(dto)


@click.command("checkout")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to pay for.")
def order_checkout(order_id: int) -> None:
    """Show the exact amount to charge for an order."""
    handler = CheckoutOrderHandler(order_repo=order_repository())

    try:
        request = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Charge {request.display_amount} "
        f"({request.amount_cents} {request.currency} minor units) for {request.order_number}"
    )


@click.command("pay")
@click.option("--id", "order_id", required=True, type=int, help="Order ID that was paid.")
@click.option("--amount-cents", required=True, type=int, help="Captured amount in cents.")
def order_pay(order_id: int, amount_cents: int) -> None:
    """Record a captured payment and confirm the order."""
    handler = ConfirmPaymentHandler(order_repo=order_repository())

    try:
        handler.handle(order_id, captured_cents=amount_cents)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} confirmed — payment recorded.")


@click.command("deliver")
@click.option("--id", "order_id", required=True, type=int, help="Order ID that was delivered.")
def order_deliver(order_id: int) -> None:
    """Mark a confirmed order as delivered to the aircraft."""
    handler = DeliverOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} delivered.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
def order_cancel(order_id: int) -> None:
    """Cancel an order."""
    handler = CancelOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled.")
