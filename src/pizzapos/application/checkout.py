"""Application service: Checkout use case.

Turns the cart into a persisted order. This is the only place that
coordinates cart, backend and ledger, and the order of the steps matters:

1. Refuse an empty cart.
2. Snapshot lines and totals into an OrderDraft (defaults filled in).
3. Submit the draft; the backend assigns ID and timestamp.
4. Only after the backend confirmed: prepend to the ledger, clear the cart.

If submission fails nothing local changes, so the cashier can retry with
the same cart.
"""

from __future__ import annotations

import logging

from pizzapos.application.dto import CheckoutRequest
from pizzapos.application.mode_selector import ModeSelector
from pizzapos.application.state import PosState
from pizzapos.domain.exceptions import BackendError, EmptyCartError, SubmissionError
from pizzapos.domain.model.order import Order, OrderDraft

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, selector: ModeSelector, state: PosState) -> None:
        self._selector = selector
        self._state = state

    async def handle(self, request: CheckoutRequest | None = None) -> Order:
        request = request or CheckoutRequest()
        cart = self._state.cart

        if cart.is_empty:
            raise EmptyCartError("Please add items to the cart first")

        draft = OrderDraft.from_cart(
            cart,
            buyer=request.buyer,
            payment_method=request.payment_method,
            delivery_service=request.delivery_service,
            coupon_code=request.coupon_code,
        )

        try:
            order = await self._selector.backend.create_order(draft)
        except BackendError as exc:
            logger.warning("Submitting order for %s failed: %s", draft.buyer, exc)
            raise SubmissionError(f"Failed to create order, please try again: {exc}") from exc

        self._state.ledger.append(order)
        cart.clear()

        logger.info("Order #%s completed for %s, total %s", order.id, order.buyer, order.total)
        return order
