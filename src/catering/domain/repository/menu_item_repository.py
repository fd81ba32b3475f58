"""Abstract repository for MenuItem aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catering.domain.model.menu_item import MenuItem


class MenuItemRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique menu item ID."""

    @abstractmethod
    def get_by_id(self, menu_item_id: int) -> MenuItem | None:
        """Return a menu item by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> MenuItem | None:
        """Return a menu item by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[MenuItem]:
        """Return every menu item in the catalog."""

    @abstractmethod
    def save(self, menu_item: MenuItem) -> None:
        """Persist a new or updated menu item."""
