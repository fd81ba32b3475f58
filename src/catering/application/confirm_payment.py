"""Application service: Confirm Payment use case.

Called once the payment collaborator reports a captured amount. The
order is confirmed only if that amount is exactly the total the
customer reviewed.
"""

from __future__ import annotations

import logging

from catering.domain.exceptions import EntityNotFoundError, ValidationError
from catering.domain.model.value_objects import format_minor_units
from catering.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ConfirmPaymentHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, captured_cents: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        expected = order.total.cents
        if captured_cents != expected:
            raise ValidationError(
                f"Captured amount {format_minor_units(captured_cents)} does not match "
                f"order total {format_minor_units(expected)}"
            )

        order.confirm()
        self._order_repo.save(order)
        logger.info("Order %s confirmed after payment of %s", order.order_number, order.total)
