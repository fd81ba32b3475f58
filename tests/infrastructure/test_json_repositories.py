"""Tests for the JSON-file repositories, against a temporary directory."""

import json
from datetime import datetime, timezone

from catering.domain.model.order import Order, OrderLineItem, OrderStatus
from catering.domain.model.value_objects import Location, Money, Quantity
from catering.infrastructure.persistence.json_menu_item_repository import (
    JsonMenuItemRepository,
)
from catering.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from tests.fakes import make_flight, make_menu_item


class TestJsonMenuItemRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "menu_items.json"
        repo = JsonMenuItemRepository(path)
        assert path.exists()
        assert repo.list_all() == []
        assert repo.next_id() == 1

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "menu_items.json"
        JsonMenuItemRepository(path).save(make_menu_item(7, "Croissant", 300, 500))

        repo = JsonMenuItemRepository(path)
        item = repo.get_by_id(7)
        assert item.name == "Croissant"
        assert item.price_by_location == {Location.A: 300, Location.B: 500}
        assert repo.get_by_name("CROISSANT").id == 7
        assert repo.next_id() == 8

    def test_prices_stored_as_cents(self, tmp_path):
        path = tmp_path / "menu_items.json"
        JsonMenuItemRepository(path).save(make_menu_item(7, "Croissant", 300, 500))
        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw[0]["price_by_location"] == {"A": 300, "B": 500}

    def test_save_replaces_existing(self, tmp_path):
        repo = JsonMenuItemRepository(tmp_path / "menu_items.json")
        item = make_menu_item(7, "Croissant", 300, 500)
        repo.save(item)
        item.update_price(Location.A, Money(350))
        repo.save(item)
        assert len(repo.list_all()) == 1
        assert repo.get_by_id(7).price_at(Location.A) == 350


class TestJsonOrderRepository:

    def _order(self) -> Order:
        return Order(
            id=None,
            customer_name="Alice",
            kitchen_location=Location.B,
            items=[
                OrderLineItem(7, "Croissant", Quantity(2), 500, "warm"),
                OrderLineItem(8, "Greek Salad", Quantity(1), 1600),
            ],
            delivery_fee=Money(15000),
            created_at=datetime(2024, 6, 1, 9, 30, tzinfo=timezone.utc),
            special_notes="crew of 4",
            flight=make_flight(),
        )

    def test_save_assigns_id(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = self._order()
        repo.save(order)
        assert order.id == 1
        assert repo.next_id() == 2

    def test_round_trip_keeps_frozen_figures(self, tmp_path):
        path = tmp_path / "orders.json"
        order = self._order()
        JsonOrderRepository(path).save(order)

        loaded = JsonOrderRepository(path).get_by_id(order.id)
        assert loaded.kitchen_location is Location.B
        assert loaded.status == OrderStatus.PENDING
        assert loaded.items[0].special_instructions == "warm"
        assert loaded.total == order.total == Money(16600)
        assert loaded.order_number == "ORD-20240601-0001"
        assert loaded.special_notes == "crew of 4"

    def test_status_update_persisted(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = self._order()
        repo.save(order)
        order.confirm()
        repo.save(order)
        assert repo.get_by_id(order.id).status == OrderStatus.CONFIRMED

    def test_missing_order(self, tmp_path):
        assert JsonOrderRepository(tmp_path / "orders.json").get_by_id(5) is None

    def test_flight_details_round_trip(self, tmp_path):
        path = tmp_path / "orders.json"
        order = self._order()
        JsonOrderRepository(path).save(order)

        raw = json.loads(path.read_text(encoding="utf-8"))[0]["flight"]
        assert raw["departure_date"] == "2024-06-01"
        assert raw["departure_time"] == "09:30"
        assert raw["passenger_count"] == 6

        loaded = JsonOrderRepository(path).get_by_id(order.id)
        assert loaded.flight == make_flight()

    def test_order_without_flight_loads(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = self._order()
        order.flight = None
        repo.save(order)
        assert repo.get_by_id(order.id).flight is None
