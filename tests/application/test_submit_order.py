"""Integration tests for submitting and showing orders.

Uses in-memory fake repositories, no file I/O.
"""

import pytest

from catering.application.dto import OrderItemSpec
from catering.application.quote_order import QuoteOrderHandler
from catering.application.show_order import ShowOrderHandler
from catering.application.start_order import StartOrderHandler, add_items
from catering.application.submit_order import SubmitOrderHandler
from catering.domain.exceptions import EntityNotFoundError, ValidationError
from catering.domain.model.value_objects import Location
from tests.fakes import FakeMenuItemRepository, FakeOrderRepository, default_menu, make_flight


def _setup():
    menu_repo = FakeMenuItemRepository(default_menu())
    order_repo = FakeOrderRepository()
    return menu_repo, order_repo


def _session(menu_repo, location="A", items=None):
    resolver = StartOrderHandler(menu_repo).handle(location)
    add_items(resolver, menu_repo, items or [OrderItemSpec("Croissant", 2)])
    return resolver


class TestSubmitOrderHappyPath:

    def test_creates_order_with_reviewed_total(self):
        menu_repo, order_repo = _setup()
        resolver = _session(menu_repo, items=[
            OrderItemSpec("Croissant", 2),
            OrderItemSpec("Greek Salad", 3),
        ])
        quote = QuoteOrderHandler().handle(resolver)

        dto = SubmitOrderHandler(order_repo).handle("Alice", resolver, make_flight())
        assert dto.total == quote.total == "€143.50"
        assert dto.total_cents == quote.total_cents == 14350
        assert dto.status == "PENDING"
        assert dto.kitchen == "Thessaloniki"
        assert len(dto.items) == 2

    def test_assigns_id_and_order_number(self):
        menu_repo, order_repo = _setup()
        dto = SubmitOrderHandler(order_repo).handle("Alice", _session(menu_repo), make_flight())
        assert dto.id == 1
        assert dto.order_number.startswith("ORD-")
        assert dto.order_number.endswith("-0001")

    def test_persists_order(self):
        menu_repo, order_repo = _setup()
        dto = SubmitOrderHandler(order_repo).handle(
            "Alice", _session(menu_repo, location="B"), make_flight(), special_notes="  crew of 4 "
        )
        saved = order_repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.kitchen_location is Location.B
        assert saved.delivery_fee.cents == 15000
        assert saved.special_notes == "crew of 4"


class TestSubmitOrderPriceLock:

    def test_catalog_change_after_submit_not_reflected(self):
        menu_repo, order_repo = _setup()
        dto = SubmitOrderHandler(order_repo).handle("Alice", _session(menu_repo), make_flight())

        croissant = menu_repo.get_by_name("Croissant")
        croissant.price_by_location[Location.A] = 9999
        menu_repo.save(croissant)

        shown = ShowOrderHandler(order_repo).handle(dto.id)
        assert shown.items[0].unit_price == "€3.00"
        assert shown.total == "€106.00"

    def test_session_change_after_submit_not_reflected(self):
        menu_repo, order_repo = _setup()
        resolver = _session(menu_repo)
        dto = SubmitOrderHandler(order_repo).handle("Alice", resolver, make_flight())

        resolver.set_location("B")
        resolver.add_line_item(8, 1)

        saved = order_repo.get_by_id(dto.id)
        assert len(saved.items) == 1
        assert saved.items[0].resolved_price_cents == 300
        assert saved.total.cents == 10600


class TestSubmitOrderValidation:

    def test_empty_cart_rejected(self):
        menu_repo, order_repo = _setup()
        resolver = StartOrderHandler(menu_repo).handle()
        with pytest.raises(ValidationError, match="at least one item"):
            SubmitOrderHandler(order_repo).handle("Alice", resolver, make_flight())

    def test_blank_customer_rejected(self):
        menu_repo, order_repo = _setup()
        with pytest.raises(ValidationError, match="Customer name"):
            SubmitOrderHandler(order_repo).handle(" ", _session(menu_repo), make_flight())


class TestShowOrder:

    def test_show_nonexistent_rejected(self):
        _, order_repo = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            ShowOrderHandler(order_repo).handle(999)

    def test_show_figures(self):
        menu_repo, order_repo = _setup()
        dto = SubmitOrderHandler(order_repo).handle("Bob", _session(menu_repo, location="B"), make_flight())
        shown = ShowOrderHandler(order_repo).handle(dto.id)
        assert shown.subtotal == "€10.00"
        assert shown.delivery_fee == "€150.00"
        assert shown.total == "€160.00"
        assert shown.customer_name == "Bob"


class TestSubmitOrderFlight:

    def test_flight_details_on_order(self):
        menu_repo, order_repo = _setup()
        dto = SubmitOrderHandler(order_repo).handle("Alice", _session(menu_repo), make_flight())

        assert dto.flight.tail_number == "SX-ABC"
        assert dto.flight.aircraft_type == "Cessna Citation XLS"
        assert dto.flight.departure == "2024-06-01 09:30"
        assert dto.flight.route == "SKG -> JMK"
        assert dto.flight.passenger_count == 6
        assert dto.flight.crew_count == 2
        assert dto.flight.delivery_location == "FBO Terminal, stand 4"
        assert dto.flight.delivery_time == "08:45"
        assert order_repo.get_by_id(dto.id).flight == make_flight()

    def test_missing_flight_rejected(self):
        menu_repo, order_repo = _setup()
        with pytest.raises(ValidationError, match="Flight details are required"):
            SubmitOrderHandler(order_repo).handle("Alice", _session(menu_repo), None)
        assert order_repo.get_by_id(1) is None
