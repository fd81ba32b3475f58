"""Application service: Generate Invoice use case (query).

The invoice reproduces the figures of the persisted order: the frozen
per-line prices and the delivery fee charged at checkout. Current
catalog prices are never looked at, since they may have changed since
the order was placed.
"""

from __future__ import annotations

from catering.application.dto import InvoiceDTO, to_flight_dto, to_line_item_dto
from catering.domain.exceptions import EntityNotFoundError, ValidationError
from catering.domain.model.order import OrderStatus
from catering.domain.repository.order_repository import OrderRepository


class GenerateInvoiceHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> InvoiceDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        if order.status == OrderStatus.CANCELLED:
            raise ValidationError(f"Order {order.order_number} is cancelled; no invoice")

        return InvoiceDTO(
            invoice_number=f"INV-{order.order_number}",
            order_number=order.order_number,  # type: ignore[arg-type]
            customer_name=order.customer_name,
            kitchen=order.kitchen_location.label,
            order_date=order.created_at.strftime("%Y-%m-%d"),
            items=[to_line_item_dto(item) for item in order.items],
            subtotal=str(order.subtotal),
            delivery_fee=str(order.delivery_fee),
            total=str(order.total),
            total_cents=order.total.cents,
            flight=to_flight_dto(order.flight),
        )
