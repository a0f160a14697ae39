"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timezone

from pizzapos.domain.model.order import DeliveryService, Order, PaymentMethod


@dataclass(frozen=True)
class CheckoutRequest:
    """Input: who is buying and how. Blank fields fall back to defaults."""

    buyer: str | None = None
    payment_method: PaymentMethod | None = None
    delivery_service: DeliveryService | None = None
    coupon_code: str | None = None


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$12.99"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    buyer: str
    created_at: str
    payment_method: str
    delivery_service: str
    coupon_code: str | None
    items: list[OrderLineItemDTO]
    subtotal: str
    tax: str
    total: str


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        buyer=order.buyer,
        created_at=order.created_at.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
        payment_method=order.payment_method.value,
        delivery_service=order.delivery_service.value,
        coupon_code=order.coupon_code,
        items=[
            OrderLineItemDTO(
                product_name=item.product.name,
                quantity=item.quantity.value,
                unit_price=str(item.product.price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        subtotal=str(order.subtotal),
        tax=str(order.tax),
        total=str(order.total),
    )
