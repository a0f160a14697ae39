"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from pizzapos.application.list_products import ListProductsHandler
from pizzapos.application.mode_selector import ModeSelector
from pizzapos.application.state import PosState
from pizzapos.domain.exceptions import BackendError, NotFoundError, SubmissionError
from pizzapos.domain.model.product import Product

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, selector: ModeSelector, state: PosState) -> None:
        self._selector = selector
        self._state = state

    async def handle(self, product: Product) -> Product:
        """Replace a product in the catalog.

        Existing orders are NOT affected; they captured a snapshot at
        checkout. A cart line for this product, on the other hand, picks
        up the new name and price and keeps its quantity.
        """
        product = product.normalized()
        if self._state.find_product(product.id) is None:
            raise NotFoundError(f"Product with ID '{product.id}' not found")

        try:
            updated = await self._selector.backend.update_product(product)
        except BackendError as exc:
            logger.warning("Updating product #%s failed: %s", product.id, exc)
            raise SubmissionError(f"Could not update product '{product.name}': {exc}") from exc

        self._state.cart.refresh_product(updated)
        logger.info("Product #%s updated", updated.id)

        await ListProductsHandler(self._selector, self._state).reload_after_change(
            f"Updating '{updated.name}'",
            lambda products: [updated if p.id == updated.id else p for p in products],
        )
        return updated
