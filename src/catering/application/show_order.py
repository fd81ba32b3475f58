"""Application service: Show Order use case (query)."""

from __future__ import annotations

from catering.application.dto import OrderDTO, to_flight_dto, to_line_item_dto
from catering.domain.exceptions import EntityNotFoundError
from catering.domain.model.order import Order
from catering.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return to_order_dto(order)


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.order_number,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        kitchen=order.kitchen_location.label,
        status=order.status.value,
        items=[to_line_item_dto(item) for item in order.items],
        subtotal=str(order.subtotal),
        delivery_fee=str(order.delivery_fee),
        total=str(order.total),
        total_cents=order.total.cents,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        special_notes=order.special_notes,
        flight=to_flight_dto(order.flight),
    )
