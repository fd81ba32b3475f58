"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Configuration comes from the environment:

- ``CATERING_DATA_DIR``: directory holding the JSON files
  (defaults to ``<repo>/data``)
- ``CATERING_DEFAULT_LOCATION``: kitchen a new order starts at, as a
  code or kitchen name (defaults to ``A``)
"""

from __future__ import annotations

import os
from pathlib import Path

from catering.domain.model.value_objects import Location
from catering.infrastructure.persistence.json_menu_item_repository import (
    JsonMenuItemRepository,
)
from catering.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)

DATA_DIR_ENV = "CATERING_DATA_DIR"
DEFAULT_LOCATION_ENV = "CATERING_DEFAULT_LOCATION"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    configured = os.environ.get(DATA_DIR_ENV)
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def default_location() -> Location:
    """Configured starting kitchen. An invalid value fails loudly."""
    return Location.parse(os.environ.get(DEFAULT_LOCATION_ENV, Location.A.value))


def menu_repository() -> JsonMenuItemRepository:
    return JsonMenuItemRepository(data_dir() / "menu_items.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")
