"""Application service: Update Menu Item Price use case."""

from __future__ import annotations

from catering.domain.exceptions import EntityNotFoundError
from catering.domain.model.value_objects import Location, Money
from catering.domain.repository.menu_item_repository import MenuItemRepository


class UpdateMenuItemPriceHandler:

    def __init__(self, menu_repo: MenuItemRepository) -> None:
        self._menu_repo = menu_repo

    def handle(self, menu_item_id: int, location: Location | str, new_price: str) -> None:
        """Update one kitchen's price for a dish.

        This does NOT affect any submitted orders, which froze their
        prices at submission time.
        """
        menu_item = self._menu_repo.get_by_id(menu_item_id)
        if menu_item is None:
            raise EntityNotFoundError(f"Menu item with ID {menu_item_id} not found")

        menu_item.update_price(Location.parse(location), Money.parse(new_price))
        self._menu_repo.save(menu_item)
