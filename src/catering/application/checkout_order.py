"""Application service: Checkout Order use case (query).

Produces the amount handed to the payment collaborator. It is the
order's frozen total in minor units, never a re-derived or re-parsed
display value.
"""

from __future__ import annotations

from catering.application.dto import PaymentRequestDTO
from catering.domain.exceptions import EntityNotFoundError, ValidationError
from catering.domain.model.order import OrderStatus
from catering.domain.repository.order_repository import OrderRepository


class CheckoutOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> PaymentRequestDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        if order.status != OrderStatus.PENDING:
            raise ValidationError(
                f"Cannot check out order in {order.status.value} status"
            )

        total = order.total
        return PaymentRequestDTO(
            order_id=order.id,  # type: ignore[arg-type]
            order_number=order.order_number,  # type: ignore[arg-type]
            amount_cents=total.cents,
            currency=total.currency,
            display_amount=str(total),
        )
