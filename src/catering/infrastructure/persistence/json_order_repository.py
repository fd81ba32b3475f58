"""JSON-file-backed implementation of OrderRepository.

Prices are written as integer minor units so a reloaded order shows
exactly the figures it was submitted with.
"""

from __future__ import annotations

import json
from datetime import date, datetime, time
from pathlib import Path

from catering.domain.model.order import FlightDetails, Order, OrderLineItem, OrderStatus
from catering.domain.model.value_objects import Location, Money, Quantity
from catering.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._load_raw()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        if order.id is None:
            order.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_name": order.customer_name,
            "kitchen_location": order.kitchen_location.value,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "special_notes": order.special_notes,
            "flight": _flight_to_raw(order.flight),
            "delivery_fee_cents": order.delivery_fee.cents,
            "currency": order.delivery_fee.currency,
            "items": [
                {
                    "menu_item_id": item.menu_item_id,
                    "name": item.name,
                    "quantity": item.quantity.value,
                    "price_cents": item.resolved_price_cents,
                    "special_instructions": item.special_instructions,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                menu_item_id=i["menu_item_id"],
                name=i["name"],
                quantity=Quantity(i["quantity"]),
                resolved_price_cents=i["price_cents"],
                special_instructions=i.get("special_instructions"),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            customer_name=raw["customer_name"],
            kitchen_location=Location.parse(raw["kitchen_location"]),
            items=items,
            delivery_fee=Money(raw["delivery_fee_cents"], raw.get("currency", "EUR")),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            special_notes=raw.get("special_notes"),
            flight=_flight_to_domain(raw.get("flight")),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _flight_to_raw(flight: FlightDetails | None) -> dict | None:
    if flight is None:
        return None
    return {
        "aircraft_type": flight.aircraft_type,
        "tail_number": flight.tail_number,
        "departure_date": flight.departure_date.isoformat(),
        "departure_time": flight.departure_time.strftime("%H:%M"),
        "departure_airport": flight.departure_airport,
        "arrival_airport": flight.arrival_airport,
        "passenger_count": flight.passenger_count,
        "crew_count": flight.crew_count,
        "delivery_location": flight.delivery_location,
        "delivery_time": flight.delivery_time.strftime("%H:%M"),
    }


def _flight_to_domain(raw: dict | None) -> FlightDetails | None:
    if raw is None:
        return None
    return FlightDetails(
        aircraft_type=raw["aircraft_type"],
        tail_number=raw["tail_number"],
        departure_date=date.fromisoformat(raw["departure_date"]),
        departure_time=time.fromisoformat(raw["departure_time"]),
        departure_airport=raw["departure_airport"],
        arrival_airport=raw.get("arrival_airport"),
        passenger_count=raw["passenger_count"],
        crew_count=raw["crew_count"],
        delivery_location=raw["delivery_location"],
        delivery_time=time.fromisoformat(raw["delivery_time"]),
    )
