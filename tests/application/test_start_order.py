"""Integration tests for starting an order and quoting it (review stage)."""

import pytest

from catering.application.dto import OrderItemSpec
from catering.application.quote_order import QuoteOrderHandler
from catering.application.start_order import StartOrderHandler, add_items
from catering.domain.exceptions import (
    EntityNotFoundError,
    InvalidLocationError,
    InvalidQuantityError,
    UnknownMenuItemError,
    ValidationError,
)
from catering.domain.model.value_objects import Location
from tests.fakes import FakeMenuItemRepository, default_menu, make_menu_item


def _setup(default_location: Location = Location.A):
    menu_repo = FakeMenuItemRepository(
        default_menu() + [make_menu_item(10, "Lobster", 9000, 9500, available=False)]
    )
    return StartOrderHandler(menu_repo, default_location), menu_repo


class TestStartOrder:

    def test_uses_configured_default(self):
        handler, _ = _setup(default_location=Location.B)
        resolver = handler.handle()
        assert resolver.location is Location.B

    def test_explicit_location_wins(self):
        handler, _ = _setup(default_location=Location.B)
        assert handler.handle("A").location is Location.A

    def test_invalid_location_never_defaults(self):
        handler, _ = _setup()
        with pytest.raises(InvalidLocationError):
            handler.handle("Athens")

    def test_unavailable_items_are_not_priced(self):
        handler, _ = _setup()
        resolver = handler.handle()
        assert resolver.catalog_size == 3
        with pytest.raises(UnknownMenuItemError):
            resolver.resolve_price(10)

    def test_each_start_is_a_new_session(self):
        handler, _ = _setup()
        first = handler.handle()
        first.add_line_item(7, 1)
        second = handler.handle()
        assert second.line_items == ()


class TestAddItems:

    def test_adds_by_name(self):
        handler, menu_repo = _setup()
        resolver = handler.handle()
        add_items(resolver, menu_repo, [
            OrderItemSpec("croissant", 2),
            OrderItemSpec("Greek Salad", 1, "no onions"),
        ])
        items = resolver.line_items
        assert [(i.menu_item_id, i.quantity.value) for i in items] == [(7, 2), (8, 1)]
        assert items[1].special_instructions == "no onions"

    def test_unknown_name_leaves_cart_untouched(self):
        handler, menu_repo = _setup()
        resolver = handler.handle()
        with pytest.raises(EntityNotFoundError, match="Menu item not found"):
            add_items(resolver, menu_repo, [
                OrderItemSpec("Croissant", 2),
                OrderItemSpec("Caviar", 1),
            ])
        assert resolver.line_items == ()

    def test_bad_quantity_leaves_cart_untouched(self):
        handler, menu_repo = _setup()
        resolver = handler.handle()
        with pytest.raises(InvalidQuantityError):
            add_items(resolver, menu_repo, [
                OrderItemSpec("Croissant", 2),
                OrderItemSpec("Greek Salad", 0),
            ])
        assert resolver.line_items == ()

    def test_unavailable_item_rejected(self):
        handler, menu_repo = _setup()
        resolver = handler.handle()
        with pytest.raises(ValidationError, match="unavailable"):
            add_items(resolver, menu_repo, [OrderItemSpec("Lobster", 1)])


class TestQuoteOrder:

    def test_quote_figures(self):
        handler, menu_repo = _setup()
        resolver = handler.handle("A")
        add_items(resolver, menu_repo, [OrderItemSpec("Croissant", 2)])

        quote = QuoteOrderHandler().handle(resolver)
        assert quote.location == "A"
        assert quote.kitchen == "Thessaloniki"
        assert quote.items[0].unit_price == "€3.00"
        assert quote.items[0].line_total == "€6.00"
        assert quote.subtotal == "€6.00"
        assert quote.delivery_fee == "€100.00"
        assert quote.total == "€106.00"
        assert quote.total_cents == 10600

    def test_quote_after_location_switch(self):
        handler, menu_repo = _setup()
        resolver = handler.handle("A")
        add_items(resolver, menu_repo, [OrderItemSpec("Croissant", 2)])
        resolver.set_location("B")

        quote = QuoteOrderHandler().handle(resolver)
        assert quote.items[0].unit_price == "€5.00"
        assert quote.total_cents == 16000
