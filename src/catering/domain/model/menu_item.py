"""MenuItem aggregate.

Menu items are reference data owned by the catalog. They live
independently of orders: prices change, dishes are added and withdrawn.
"""

from __future__ import annotations

from dataclasses import dataclass

from catering.domain.exceptions import ValidationError
from catering.domain.model.value_objects import Location, Money


@dataclass
class MenuItem:
    """A dish in the catalog with one flat price per kitchen location.

    Invariants:
    - ``price_by_location`` has an entry for every Location
    - every price is a non-negative integer in minor units
    """

    id: int
    name: str
    price_by_location: dict[Location, int]
    unit: str | None = None
    category: str | None = None
    available: bool = True

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Menu item name is required")
        missing = [loc.value for loc in Location if loc not in self.price_by_location]
        if missing:
            raise ValidationError(
                f"Menu item '{self.name}' has no price for location(s) {', '.join(missing)}"
            )
        for location, cents in self.price_by_location.items():
            _check_price(self.name, location, cents)

    def price_at(self, location: Location) -> int:
        return self.price_by_location[location]

    def update_price(self, location: Location, new_price: Money) -> None:
        """Change the price for one location.

        This does NOT affect any existing orders because orders
        capture a price snapshot at submission time.
        """
        _check_price(self.name, location, new_price.cents)
        self.price_by_location[location] = new_price.cents


def _check_price(name: str, location: Location, cents: int) -> None:
    if isinstance(cents, bool) or not isinstance(cents, int):
        raise ValidationError(
            f"Price of '{name}' at {location.value} must be integer minor units"
        )
    if cents < 0:
        raise ValidationError(
            f"Price of '{name}' at {location.value} cannot be negative"
        )
