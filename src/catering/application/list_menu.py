"""Application service: List Menu use case (query)."""

from __future__ import annotations

from catering.application.dto import MenuItemDTO
from catering.domain.model.value_objects import Location, format_minor_units
from catering.domain.repository.menu_item_repository import MenuItemRepository


class ListMenuHandler:

    def __init__(self, menu_repo: MenuItemRepository) -> None:
        self._menu_repo = menu_repo

    def handle(self, location: Location | str | None = None) -> list[MenuItemDTO]:
        """List available dishes with prices for one kitchen or both."""
        locations = list(Location) if location is None else [Location.parse(location)]
        return [
            MenuItemDTO(
                id=item.id,
                name=item.name,
                unit=item.unit,
                category=item.category,
                prices={
                    loc.value: format_minor_units(item.price_at(loc)) for loc in locations
                },
            )
            for item in self._menu_repo.list_all()
            if item.available
        ]
