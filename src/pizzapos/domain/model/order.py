"""Order aggregate — a completed sale.

Orders are created only by checkout and never change afterwards: line
items carry a frozen product snapshot and the financial fields are
computed once, from the cart, when the draft is built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from pizzapos.domain.exceptions import ValidationError
from pizzapos.domain.model.cart import Cart, CartTotals
from pizzapos.domain.model.product import Product
from pizzapos.domain.model.value_objects import Money, Quantity

WALK_IN_CUSTOMER = "Walk-in Customer"
TOTALS_TOLERANCE = Decimal("0.005")


class PaymentMethod(Enum):
    CASH = "Cash"
    VISA = "Card - Visa"
    MASTERCARD = "Card - Mastercard"
    AMEX = "Card - AMEX"
    OTHER = "Other"


class DeliveryService(Enum):
    NONE = "None"
    UBER_EATS = "Uber Eats"
    DOORDASH = "DoorDash"
    GRUBHUB = "GrubHub"
    IN_HOUSE = "In-house"


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the product as it was sold (price lock)."""

    product_id: str
    quantity: Quantity
    product: Product

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass(frozen=True)
class OrderDraft:
    """An order that has not been submitted yet: no id, no timestamp."""

    buyer: str
    items: tuple[OrderLineItem, ...]
    payment_method: PaymentMethod
    delivery_service: DeliveryService
    subtotal: Money
    tax: Money
    total: Money
    coupon_code: str | None = None

    @staticmethod
    def from_cart(
        cart: Cart,
        buyer: str | None = None,
        payment_method: PaymentMethod | None = None,
        delivery_service: DeliveryService | None = None,
        coupon_code: str | None = None,
    ) -> OrderDraft:
        """Snapshot the cart's lines and totals, filling in defaults."""
        if cart.is_empty:
            raise ValidationError("Order must contain at least one item")

        totals = cart.totals()
        return OrderDraft(
            buyer=(buyer or "").strip() or WALK_IN_CUSTOMER,
            items=tuple(
                OrderLineItem(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    product=line.product,
                )
                for line in cart.lines
            ),
            payment_method=payment_method or PaymentMethod.CASH,
            delivery_service=delivery_service or DeliveryService.NONE,
            subtotal=totals.subtotal,
            tax=totals.tax,
            total=totals.total,
            coupon_code=(coupon_code or "").strip() or None,
        )

    def place(self, order_id: int, created_at: datetime | None = None) -> Order:
        """Turn the draft into an Order. Called by the backend."""
        return Order(
            id=order_id,
            created_at=created_at or datetime.now(timezone.utc),
            buyer=self.buyer,
            items=self.items,
            payment_method=self.payment_method,
            delivery_service=self.delivery_service,
            subtotal=self.subtotal,
            tax=self.tax,
            total=self.total,
            coupon_code=self.coupon_code,
        )


@dataclass(frozen=True)
class Order:
    """Aggregate root for completed orders.

    Invariants:
    - ``total == subtotal + tax``
    - the line items and money fields never change after creation
    """

    id: int
    buyer: str
    items: tuple[OrderLineItem, ...]
    payment_method: PaymentMethod
    delivery_service: DeliveryService
    subtotal: Money
    tax: Money
    total: Money
    coupon_code: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        # Backends that store floats round-trip with tiny errors.
        drift = (self.subtotal + self.tax).amount - self.total.amount
        if abs(drift) > TOTALS_TOLERANCE:
            raise ValidationError(
                f"Order #{self.id} total {self.total} does not equal "
                f"subtotal {self.subtotal} plus tax {self.tax}"
            )

    @property
    def totals(self) -> CartTotals:
        return CartTotals(subtotal=self.subtotal, tax=self.tax, total=self.total)

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)
