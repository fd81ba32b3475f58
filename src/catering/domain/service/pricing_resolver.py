"""Domain service: Pricing Resolver.

Single source of truth for what an order-in-progress costs. Every stage
of the order flow (menu browse, cart, review, payment, invoice) reads
prices from a resolver instead of computing them itself.

Each resolver owns exactly one PricingSession. Nothing is shared at
module level, so several orders can be composed in the same process
without leaking prices between them.

Location-change policy: switching the location reprices every line item
already on the cart to the new kitchen's price. The switch is two-phase
(resolve every new price first, then mutate), so an item missing from
the catalog aborts the switch and leaves the session untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from catering.domain.exceptions import UnknownMenuItemError, ValidationError
from catering.domain.model.menu_item import MenuItem
from catering.domain.model.order import OrderLineItem
from catering.domain.model.value_objects import Location, Quantity, format_minor_units

logger = logging.getLogger(__name__)

# Flat delivery fee per kitchen, in minor units.
DELIVERY_FEE_CENTS: dict[Location, int] = {
    Location.A: 10000,
    Location.B: 15000,
}


@dataclass
class PricingSession:
    """Mutable state of one order-in-progress.

    ``resolved_prices`` maps menu_item_id -> price (minor units) for the
    current location. Subtotal, fee and total are deliberately absent:
    they are derived on every read.
    """

    location: Location
    line_items: list[OrderLineItem] = field(default_factory=list)
    resolved_prices: dict[int, int] = field(default_factory=dict)
    resolved_names: dict[int, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PricingSnapshot:
    """Read-only view of a session handed to review, payment and invoicing."""

    location: Location
    line_items: tuple[OrderLineItem, ...]
    subtotal_cents: int
    delivery_fee_cents: int
    total_cents: int


class PricingResolver:

    def __init__(
        self,
        location: Location | str = Location.A,
        catalog: list[MenuItem] | None = None,
    ) -> None:
        self._catalog: dict[int, MenuItem] = {}
        self._session = PricingSession(location=Location.parse(location))
        if catalog is not None:
            self.load_catalog(catalog)

    # --- Location -------------------------------------------------------------

    @property
    def location(self) -> Location:
        return self._session.location

    def set_location(self, location: Location | str) -> None:
        """Switch kitchens, invalidating every resolved price.

        Raises InvalidLocationError for anything outside the closed set,
        and UnknownMenuItemError if an item on the cart can no longer be
        priced (in which case nothing changes).
        """
        new_location = Location.parse(location)
        if new_location == self._session.location:
            return

        # Phase 1: price every distinct item at the new location
        new_prices: dict[int, int] = {}
        for item in self._session.line_items:
            if item.menu_item_id not in new_prices:
                new_prices[item.menu_item_id] = self._lookup(
                    item.menu_item_id, new_location
                ).price_at(new_location)

        # Phase 2: swap location, cache and line item prices together
        old_location = self._session.location
        self._session.location = new_location
        self._session.resolved_prices = dict(new_prices)
        for item in self._session.line_items:
            item.resolved_price_cents = new_prices[item.menu_item_id]

        logger.info(
            "Location switched %s -> %s; repriced %d line item(s)",
            old_location.value,
            new_location.value,
            len(self._session.line_items),
        )

    # --- Catalog --------------------------------------------------------------

    @property
    def catalog_size(self) -> int:
        return len(self._catalog)

    def load_catalog(self, menu_items: list[MenuItem]) -> None:
        """Replace the catalog used for lookups.

        Prices already resolved in this session stay as they are. Any
        item whose new catalog price differs from its resolved price is
        reported, but the resolved price keeps winning until the location
        changes.
        """
        catalog: dict[int, MenuItem] = {}
        for menu_item in menu_items:
            if menu_item.id in catalog:
                raise ValidationError(f"Duplicate menu item ID {menu_item.id} in catalog")
            catalog[menu_item.id] = menu_item
        self._catalog = catalog

        location = self._session.location
        for menu_item_id, cached in self._session.resolved_prices.items():
            fresh = catalog.get(menu_item_id)
            if fresh is not None and fresh.price_at(location) != cached:
                logger.warning(
                    "Catalog price of item #%d at %s changed from %d to %d; "
                    "keeping %d for this session",
                    menu_item_id,
                    location.value,
                    cached,
                    fresh.price_at(location),
                    cached,
                )
        logger.debug("Loaded catalog with %d item(s)", len(catalog))

    # --- Price lookup ---------------------------------------------------------

    def resolve_price(self, menu_item_id: int) -> int:
        """Return the price of an item for the current location, in minor units.

        The first lookup in a session is cached; later calls return the
        cached value even if the catalog has been reloaded since.
        """
        cached = self._session.resolved_prices.get(menu_item_id)
        if cached is not None:
            return cached

        location = self._session.location
        menu_item = self._lookup(menu_item_id, location)
        price = menu_item.price_at(location)
        self._session.resolved_prices[menu_item_id] = price
        self._session.resolved_names[menu_item_id] = menu_item.name
        logger.debug(
            "Resolved item #%d at %s: %s", menu_item_id, location.value, format_minor_units(price)
        )
        return price

    # --- Cart mutation --------------------------------------------------------

    @property
    def line_items(self) -> tuple[OrderLineItem, ...]:
        return tuple(item.frozen_copy() for item in self._session.line_items)

    def add_line_item(
        self,
        menu_item_id: int,
        quantity: int,
        special_instructions: str | None = None,
    ) -> OrderLineItem:
        qty = Quantity(quantity)
        price = self.resolve_price(menu_item_id)
        item = OrderLineItem(
            menu_item_id=menu_item_id,
            name=self._session.resolved_names[menu_item_id],
            quantity=qty,
            resolved_price_cents=price,
            special_instructions=special_instructions or None,
        )
        self._session.line_items.append(item)
        return item.frozen_copy()

    def remove_line_item(self, index: int) -> OrderLineItem:
        self._check_index(index)
        return self._session.line_items.pop(index).frozen_copy()

    def update_quantity(self, index: int, quantity: int) -> None:
        """Change a line's quantity. Its resolved price is left alone."""
        qty = Quantity(quantity)
        self._check_index(index)
        self._session.line_items[index].quantity = qty

    def clear(self) -> None:
        """Empty the cart. Location and resolved prices are kept."""
        self._session.line_items.clear()

    # --- Aggregates -----------------------------------------------------------

    def get_subtotal_cents(self) -> int:
        return sum(item.line_total_cents for item in self._session.line_items)

    def get_delivery_fee_cents(self) -> int:
        return DELIVERY_FEE_CENTS[self._session.location]

    def get_total_cents(self) -> int:
        return self.get_subtotal_cents() + self.get_delivery_fee_cents()

    def snapshot(self) -> PricingSnapshot:
        return PricingSnapshot(
            location=self._session.location,
            line_items=self.line_items,
            subtotal_cents=self.get_subtotal_cents(),
            delivery_fee_cents=self.get_delivery_fee_cents(),
            total_cents=self.get_total_cents(),
        )

    @staticmethod
    def format_minor_units(cents: int) -> str:
        return format_minor_units(cents)

    # --- Internal helpers -----------------------------------------------------

    def _lookup(self, menu_item_id: int, location: Location) -> MenuItem:
        menu_item = self._catalog.get(menu_item_id)
        if menu_item is None:
            raise UnknownMenuItemError(
                f"Menu item #{menu_item_id} is not in the loaded catalog "
                f"(location {location.value})"
            )
        return menu_item

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._session.line_items):
            raise ValidationError(
                f"No line item at position {index} "
                f"(cart has {len(self._session.line_items)})"
            )
