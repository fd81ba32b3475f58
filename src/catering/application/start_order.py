"""Application service: Start Order use case.

Opens a pricing session for a new order and fills its cart. The
session lives only in memory until it is submitted.
"""

from __future__ import annotations

import logging

from catering.application.dto import OrderItemSpec
from catering.domain.exceptions import EntityNotFoundError, ValidationError
from catering.domain.model.value_objects import Location, Quantity
from catering.domain.repository.menu_item_repository import MenuItemRepository
from catering.domain.service.pricing_resolver import PricingResolver

logger = logging.getLogger(__name__)


class StartOrderHandler:

    def __init__(
        self,
        menu_repo: MenuItemRepository,
        default_location: Location = Location.A,
    ) -> None:
        self._menu_repo = menu_repo
        self._default_location = default_location

    def handle(self, location: Location | str | None = None) -> PricingResolver:
        """Return a fresh resolver loaded with the available dishes.

        ``location`` falls back to the configured default only when it is
        not given at all; an invalid value is rejected.
        """
        chosen = self._default_location if location is None else Location.parse(location)
        catalog = [item for item in self._menu_repo.list_all() if item.available]
        resolver = PricingResolver(location=chosen, catalog=catalog)
        logger.debug(
            "Started pricing session at %s with %d dish(es)", chosen.value, len(catalog)
        )
        return resolver


def add_items(
    resolver: PricingResolver,
    menu_repo: MenuItemRepository,
    item_specs: list[OrderItemSpec],
) -> None:
    """Resolve each dish name to a menu item and add it to the cart.

    Every name is looked up before the first item is added, so an
    unknown dish leaves the cart as it was.
    """
    resolved: list[tuple[int, OrderItemSpec]] = []
    for spec in item_specs:
        menu_item = menu_repo.get_by_name(spec.menu_item_name)
        if menu_item is None:
            raise EntityNotFoundError(f"Menu item not found: '{spec.menu_item_name}'")
        if not menu_item.available:
            raise ValidationError(f"'{menu_item.name}' is currently unavailable")
        Quantity(spec.quantity)
        resolved.append((menu_item.id, spec))

    for menu_item_id, spec in resolved:
        resolver.add_line_item(menu_item_id, spec.quantity, spec.special_instructions)
