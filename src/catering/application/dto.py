"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money is carried as
display strings, plus the exact integer amount wherever a collaborator
(payment) must charge it.
"""

from __future__ import annotations

from dataclasses import dataclass

from catering.domain.model.order import FlightDetails, OrderLineItem


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (dish name + quantity)."""

    menu_item_name: str
    quantity: int
    special_instructions: str | None = None


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "€15.00"
    line_total: str
    special_instructions: str | None = None


@dataclass(frozen=True)
class FlightDetailsDTO:
    """Output: the flight an order is for, formatted for display."""

    aircraft_type: str
    tail_number: str
    departure: str  # e.g. "2024-06-01 09:30"
    route: str
    passenger_count: int
    crew_count: int
    delivery_location: str
    delivery_time: str


@dataclass(frozen=True)
class QuoteDTO:
    """Output: the review-stage summary of an order not yet submitted."""

    location: str
    kitchen: str
    items: list[OrderLineItemDTO]
    subtotal: str
    delivery_fee: str
    total: str
    total_cents: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    order_number: str
    customer_name: str
    kitchen: str
    status: str
    items: list[OrderLineItemDTO]
    subtotal: str
    delivery_fee: str
    total: str
    total_cents: int
    created_at: str
    special_notes: str | None = None
    flight: FlightDetailsDTO | None = None


@dataclass(frozen=True)
class PaymentRequestDTO:
    """Output: the exact amount a payment collaborator must charge."""

    order_id: int
    order_number: str
    amount_cents: int
    currency: str
    display_amount: str


@dataclass(frozen=True)
class InvoiceDTO:
    """Output: invoice figures, identical to what the customer reviewed."""

    invoice_number: str
    order_number: str
    customer_name: str
    kitchen: str
    order_date: str
    items: list[OrderLineItemDTO]
    subtotal: str
    delivery_fee: str
    total: str
    total_cents: int
    flight: FlightDetailsDTO | None = None


@dataclass(frozen=True)
class MenuItemDTO:
    id: int
    name: str
    unit: str | None
    category: str | None
    prices: dict[str, str]  # location code -> formatted price


def to_line_item_dto(item: OrderLineItem) -> OrderLineItemDTO:
    return OrderLineItemDTO(
        name=item.name,
        quantity=item.quantity.value,
        unit_price=str(item.unit_price),
        line_total=str(item.line_total),
        special_instructions=item.special_instructions,
    )


def to_flight_dto(flight: FlightDetails | None) -> FlightDetailsDTO | None:
    if flight is None:
        return None
    return FlightDetailsDTO(
        aircraft_type=flight.aircraft_type,
        tail_number=flight.tail_number,
        departure=f"{flight.departure_date:%Y-%m-%d} {flight.departure_time:%H:%M}",
        route=flight.route,
        passenger_count=flight.passenger_count,
        crew_count=flight.crew_count,
        delivery_location=flight.delivery_location,
        delivery_time=f"{flight.delivery_time:%H:%M}",
    )
