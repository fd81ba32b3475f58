"""Application service: Submit Order use case.

Freezes a pricing session into a persisted Order. From here on the
order's figures come from its own line items; the resolver that built
them is no longer consulted.
"""

from __future__ import annotations

import logging

from catering.application.dto import OrderDTO
from catering.application.show_order import to_order_dto
from catering.domain.model.order import FlightDetails, Order
from catering.domain.model.value_objects import Money
from catering.domain.repository.order_repository import OrderRepository
from catering.domain.service.pricing_resolver import PricingResolver

logger = logging.getLogger(__name__)


class SubmitOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        customer_name: str,
        resolver: PricingResolver,
        flight: FlightDetails,
        special_notes: str | None = None,
    ) -> OrderDTO:
        """Persist the session's cart exactly as the customer reviewed it."""
        snapshot = resolver.snapshot()
        order = Order.create(
            customer_name=customer_name,
            kitchen_location=snapshot.location,
            items=list(snapshot.line_items),
            delivery_fee=Money(snapshot.delivery_fee_cents),
            flight=flight,
            special_notes=special_notes,
        )
        self._order_repo.save(order)

        logger.info(
            "Submitted order %s for %s (%s, %s) at %s: %s",
            order.order_number,
            order.customer_name,
            flight.tail_number,
            flight.route,
            order.kitchen_location.label,
            order.total,
        )
        return to_order_dto(order)
