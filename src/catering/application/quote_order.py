"""Application service: Quote Order use case (query).

The review step: shows what the customer is about to pay, straight
from the pricing session, without persisting anything.
"""

from __future__ import annotations

from catering.application.dto import QuoteDTO, to_line_item_dto
from catering.domain.model.value_objects import format_minor_units
from catering.domain.service.pricing_resolver import PricingResolver


class QuoteOrderHandler:

    def handle(self, resolver: PricingResolver) -> QuoteDTO:
        snapshot = resolver.snapshot()
        return QuoteDTO(
            location=snapshot.location.value,
            kitchen=snapshot.location.label,
            items=[to_line_item_dto(item) for item in snapshot.line_items],
            subtotal=format_minor_units(snapshot.subtotal_cents),
            delivery_fee=format_minor_units(snapshot.delivery_fee_cents),
            total=format_minor_units(snapshot.total_cents),
            total_cents=snapshot.total_cents,
        )
