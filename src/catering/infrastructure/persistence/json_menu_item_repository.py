"""JSON-file-backed implementation of MenuItemRepository."""

from __future__ import annotations

import json
from pathlib import Path

from catering.domain.model.menu_item import MenuItem
from catering.domain.model.value_objects import Location
from catering.domain.repository.menu_item_repository import MenuItemRepository


class JsonMenuItemRepository(MenuItemRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- MenuItemRepository interface -----------------------------------------

    def next_id(self) -> int:
        records = self._load_raw()
        if not records:
            return 1
        return max(r["id"] for r in records) + 1

    def get_by_id(self, menu_item_id: int) -> MenuItem | None:
        for raw in self._load_raw():
            if raw["id"] == menu_item_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> MenuItem | None:
        for raw in self._load_raw():
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[MenuItem]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, menu_item: MenuItem) -> None:
        records = self._load_raw()
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == menu_item.id:
                records[i] = self._to_raw(menu_item)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(menu_item))
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(menu_item: MenuItem) -> dict:
        return {
            "id": menu_item.id,
            "name": menu_item.name,
            "price_by_location": {
                loc.value: cents for loc, cents in menu_item.price_by_location.items()
            },
            "unit": menu_item.unit,
            "category": menu_item.category,
            "available": menu_item.available,
        }

    @staticmethod
    def _to_domain(raw: dict) -> MenuItem:
        return MenuItem(
            id=raw["id"],
            name=raw["name"],
            price_by_location={
                Location.parse(code): cents
                for code, cents in raw["price_by_location"].items()
            },
            unit=raw.get("unit"),
            category=raw.get("category"),
            available=raw.get("available", True),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
