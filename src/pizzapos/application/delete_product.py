"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from pizzapos.application.list_products import ListProductsHandler
from pizzapos.application.mode_selector import ModeSelector
from pizzapos.application.state import PosState
from pizzapos.domain.exceptions import BackendError, NotFoundError, SubmissionError

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, selector: ModeSelector, state: PosState) -> None:
        self._selector = selector
        self._state = state

    async def handle(self, product_id: str) -> None:
        """Remove a product from the catalog and from the current cart."""
        product = self._state.find_product(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        try:
            await self._selector.backend.delete_product(product_id)
        except BackendError as exc:
            logger.warning("Deleting product #%s failed: %s", product_id, exc)
            raise SubmissionError(f"Could not delete product '{product.name}': {exc}") from exc

        self._state.cart.drop_product(product_id)
        logger.info("Product #%s '%s' deleted", product_id, product.name)

        await ListProductsHandler(self._selector, self._state).reload_after_change(
            f"Deleting '{product.name}'",
            lambda products: [p for p in products if p.id != product_id],
        )
