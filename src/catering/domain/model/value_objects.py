"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from catering.domain.exceptions import (
    InvalidLocationError,
    InvalidQuantityError,
    ValidationError,
)

CURRENCY = "EUR"
CURRENCY_SYMBOL = "€"
MINOR_UNITS_PER_MAJOR = 100


class Location(Enum):
    """The closed set of kitchens an order can be priced and delivered from."""

    A = "A"
    B = "B"

    @property
    def label(self) -> str:
        return _KITCHEN_NAMES[self]

    @classmethod
    def parse(cls, value: Location | str) -> Location:
        """Accept a Location, its code ("A"/"B") or its kitchen name.

        Matching ignores case and surrounding whitespace, nothing more.
        Never falls back to a default: anything else is rejected.
        """
        if isinstance(value, Location):
            return value
        if isinstance(value, str):
            key = value.strip()
            for location in cls:
                if key.upper() == location.value or key.lower() == location.label.lower():
                    return location
        raise InvalidLocationError(
            f"Unknown location {value!r}; expected one of "
            + ", ".join(f"{loc.value} ({loc.label})" for loc in cls)
        )


_KITCHEN_NAMES = {
    Location.A: "Thessaloniki",
    Location.B: "Mykonos",
}


def format_minor_units(cents: int) -> str:
    """Render integer minor units as a display string, e.g. 1250 -> '€12.50'.

    Presentation only. The result must never be parsed back into a
    calculation.
    """
    if isinstance(cents, bool) or not isinstance(cents, int):
        raise ValidationError(
            f"Minor units must be an integer, got {type(cents).__name__}"
        )
    sign = "-" if cents < 0 else ""
    major, minor = divmod(abs(cents), MINOR_UNITS_PER_MAJOR)
    return f"{sign}{CURRENCY_SYMBOL}{major}.{minor:02d}"


@dataclass(frozen=True)
class Money:
    """Monetary amount held as integer minor units (cents).

    Major-unit values only exist as display strings produced by ``str()``;
    arithmetic always happens on ``cents``.
    """

    cents: int
    currency: str = CURRENCY

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise ValidationError(
                f"Money must be integer minor units, got {type(self.cents).__name__}"
            )
        if self.cents < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.cents}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.cents + other.cents, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.cents * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.cents < other.cents

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.cents <= other.cents

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.cents > other.cents

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.cents >= other.cents

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return format_minor_units(self.cents)

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(0)

    @staticmethod
    def parse(amount: str | int | Decimal) -> Money:
        """Convert a major-unit amount such as "12.50" into minor units.

        Goes through Decimal so no float rounding is involved. Floats are
        rejected outright, as are amounts with more than two decimals.
        """
        if isinstance(amount, (float, bool)):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")

        minor = value * MINOR_UNITS_PER_MAJOR
        if minor != minor.to_integral_value():
            raise ValidationError(
                f"Money amount {amount!r} has more than two decimal places"
            )
        return Money(int(minor))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidQuantityError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise InvalidQuantityError(
                f"Quantity must be positive, got {self.value}"
            )

    def __str__(self) -> str:
        return str(self.value)
