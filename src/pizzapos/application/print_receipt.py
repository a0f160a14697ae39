"""Application service: Print Receipt use case.

Printing happens after the order is committed, so a printer failure is
reported to the caller but never undoes anything.
"""

from __future__ import annotations

import logging

from pizzapos.application.state import PosState
from pizzapos.domain.exceptions import NotFoundError, PrintError
from pizzapos.domain.model.order import Order
from pizzapos.domain.model.value_objects import TAX_RATE
from pizzapos.domain.repository.receipt_printer import ReceiptPrinter

logger = logging.getLogger(__name__)

RULE = "=" * 25

TAX_LABEL = f"Tax ({TAX_RATE * 100:.0f}%)"


def format_ticket(order: Order) -> str:
    """Render the plain-text receipt for an order."""
    lines = [
        "🍕 PIZZA POS RECEIPT 🍕",
        RULE,
        f"Order #: {order.id}",
        f"Date: {order.created_at.isoformat()}",
        f"Customer: {order.buyer}",
        f"Payment: {order.payment_method.value}",
        f"Delivery: {order.delivery_service.value}",
    ]
    if order.coupon_code:
        lines.append(f"Coupon: {order.coupon_code}")
    lines += ["", "ITEMS:"]
    lines += [
        f"{item.quantity} x {item.product.name} - {item.line_total}"
        for item in order.items
    ]
    lines += [
        RULE,
        f"Subtotal: {order.subtotal}",
        f"{TAX_LABEL}: {order.tax}",
        f"Total: {order.total}",
        "",
        "Thank you for your order!",
        RULE,
    ]
    return "\n".join(lines) + "\n"


def job_name_for(order: Order) -> str:
    return f"PizzaPOS_Order_{order.id}"


class PrintReceiptHandler:

    def __init__(self, state: PosState, printer: ReceiptPrinter) -> None:
        self._state = state
        self._printer = printer

    def handle(self, order_id: int) -> str:
        """Print the receipt for an order and return the ticket text.

        Raises NotFoundError for an unknown order and PrintError if the
        printer gave up.
        """
        order = self._state.ledger.find_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        ticket = format_ticket(order)
        try:
            self._printer.print_receipt(ticket, job_name=job_name_for(order))
        except PrintError:
            logger.warning("Printing receipt for order #%s failed", order_id)
            raise
        return ticket
