"""Order aggregate and its line items.

A line item is built while the customer composes an order (inside a
pricing session) and then frozen into the persisted Order. Once an
Order exists, its figures come only from the frozen line items and
delivery fee; the catalog is never consulted again.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime, time, timezone
from enum import Enum

from catering.domain.exceptions import ValidationError
from catering.domain.model.value_objects import Location, Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


@dataclass
class OrderLineItem:
    """One dish on an order with the price resolved for it.

    ``resolved_price_cents`` is written by the pricing resolver; quantity
    changes never touch it.
    """

    menu_item_id: int
    name: str
    quantity: Quantity
    resolved_price_cents: int
    special_instructions: str | None = None

    @property
    def unit_price(self) -> Money:
        return Money(self.resolved_price_cents)

    @property
    def line_total_cents(self) -> int:
        return self.resolved_price_cents * self.quantity.value

    @property
    def line_total(self) -> Money:
        return Money(self.line_total_cents)

    def frozen_copy(self) -> OrderLineItem:
        return replace(self)


@dataclass(frozen=True)
class FlightDetails:
    """The flight an order is catered for.

    Times are local to the departure airport. Only the arrival airport
    is optional; everything else is needed by the kitchen to schedule
    the delivery.
    """

    aircraft_type: str
    tail_number: str
    departure_date: date
    departure_time: time
    departure_airport: str
    passenger_count: int
    crew_count: int
    delivery_location: str
    delivery_time: time
    arrival_airport: str | None = None

    def __post_init__(self) -> None:
        for label, value in (
            ("Aircraft type", self.aircraft_type),
            ("Tail number", self.tail_number),
            ("Departure airport", self.departure_airport),
            ("Delivery location", self.delivery_location),
        ):
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f"{label} is required")

        for label, count in (
            ("Passenger count", self.passenger_count),
            ("Crew count", self.crew_count),
        ):
            if isinstance(count, bool) or not isinstance(count, int):
                raise ValidationError(
                    f"{label} must be an integer, got {type(count).__name__}"
                )
            if count <= 0:
                raise ValidationError(f"{label} must be positive, got {count}")

        if not isinstance(self.departure_date, date) or isinstance(
            self.departure_date, datetime
        ):
            raise ValidationError("Departure date must be a date")
        for label, value in (
            ("Departure time", self.departure_time),
            ("Delivery time", self.delivery_time),
        ):
            if not isinstance(value, time):
                raise ValidationError(f"{label} must be a time of day")

    @property
    def headcount(self) -> int:
        return self.passenger_count + self.crew_count

    @property
    def route(self) -> str:
        if self.arrival_airport:
            return f"{self.departure_airport} -> {self.arrival_airport}"
        return self.departure_airport


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_LINE_ITEMS = 50


@dataclass
class Order:
    """Aggregate root for submitted catering orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer_name: str
    kitchen_location: Location
    items: list[OrderLineItem]
    delivery_fee: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    special_notes: str | None = None
    flight: FlightDetails | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_name: str,
        kitchen_location: Location,
        items: list[OrderLineItem],
        delivery_fee: Money,
        flight: FlightDetails,
        special_notes: str | None = None,
    ) -> Order:
        """Create a new order from already-priced line items."""
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")

        if not isinstance(flight, FlightDetails):
            raise ValidationError("Flight details are required")

        if not items:
            raise ValidationError("Order must contain at least one item")

        if len(items) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")

        return Order(
            id=None,
            customer_name=customer_name.strip(),
            kitchen_location=kitchen_location,
            items=[item.frozen_copy() for item in items],
            delivery_fee=delivery_fee,
            special_notes=special_notes.strip() if special_notes else None,
            flight=flight,
        )

    # --- State transitions ----------------------------------------------------

    def confirm(self) -> None:
        """Transition PENDING -> CONFIRMED once payment has been captured."""
        if self.status != OrderStatus.PENDING:
            raise ValidationError(
                f"Cannot confirm order — current status is {self.status.value}, "
                f"expected PENDING"
            )
        self.status = OrderStatus.CONFIRMED

    def deliver(self) -> None:
        """Transition CONFIRMED -> DELIVERED."""
        if self.status != OrderStatus.CONFIRMED:
            raise ValidationError(
                f"Cannot deliver order in {self.status.value} status"
            )
        self.status = OrderStatus.DELIVERED

    def cancel(self) -> None:
        """Transition PENDING|CONFIRMED -> CANCELLED."""
        if self.status == OrderStatus.CANCELLED:
            raise ValidationError("Order is already cancelled")
        if self.status == OrderStatus.DELIVERED:
            raise ValidationError("Cannot cancel order in DELIVERED status")
        self.status = OrderStatus.CANCELLED

    # --- Computed properties --------------------------------------------------

    @property
    def order_number(self) -> str | None:
        if self.id is None:
            return None
        return f"ORD-{self.created_at:%Y%m%d}-{self.id:04d}"

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def total(self) -> Money:
        return self.subtotal + self.delivery_fee
