"""Application service: Deliver Order use case.

Marks a paid order as handed over to the aircraft. Only CONFIRMED orders
can be delivered; the domain model rejects every other status.
"""

from __future__ import annotations

import logging

from catering.domain.exceptions import EntityNotFoundError
from catering.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeliverOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.deliver()
        self._order_repo.save(order)
        logger.info("Order %s delivered", order.order_number)
