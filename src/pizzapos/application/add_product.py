"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from pizzapos.application.list_products import ListProductsHandler
from pizzapos.application.mode_selector import ModeSelector
from pizzapos.application.state import PosState
from pizzapos.domain.exceptions import BackendError, SubmissionError
from pizzapos.domain.model.product import Product, ProductDraft

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, selector: ModeSelector, state: PosState) -> None:
        self._selector = selector
        self._state = state

    async def handle(self, draft: ProductDraft) -> Product:
        """Add a new product to the catalog.

        Raises ValidationError for a blank name, a name or description
        that is too long, or a price that is not positive.
        """
        draft = draft.normalized()

        try:
            product = await self._selector.backend.create_product(draft)
        except BackendError as exc:
            logger.warning("Creating product %r failed: %s", draft.name, exc)
            raise SubmissionError(f"Could not save product '{draft.name}': {exc}") from exc

        logger.info("Product #%s '%s' added at %s", product.id, product.name, product.price)
        await ListProductsHandler(self._selector, self._state).reload_after_change(
            f"Adding '{product.name}'", lambda products: [*products, product]
        )
        return product
