"""Application service: Add Menu Item use case."""

from __future__ import annotations

from catering.domain.exceptions import ValidationError
from catering.domain.model.menu_item import MenuItem
from catering.domain.model.value_objects import Location, Money
from catering.domain.repository.menu_item_repository import MenuItemRepository


class AddMenuItemHandler:

    def __init__(self, menu_repo: MenuItemRepository) -> None:
        self._menu_repo = menu_repo

    def handle(
        self,
        name: str,
        price_a: str,
        price_b: str,
        unit: str | None = None,
        category: str | None = None,
    ) -> MenuItem:
        """Add a dish to the catalog with a price for each kitchen.

        Prices are given in major units (e.g. "12.50") and stored as
        minor units.
        """
        if not name or not name.strip():
            raise ValidationError("Menu item name is required")

        existing = self._menu_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Menu item '{name.strip()}' already exists")

        menu_item = MenuItem(
            id=self._menu_repo.next_id(),
            name=name.strip(),
            price_by_location={
                Location.A: Money.parse(price_a).cents,
                Location.B: Money.parse(price_b).cents,
            },
            unit=unit or None,
            category=category or None,
        )
        self._menu_repo.save(menu_item)
        return menu_item
