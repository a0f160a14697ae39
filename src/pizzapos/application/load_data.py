"""Application service: Load Data use case (session start-up)."""

from __future__ import annotations

import logging

from pizzapos.application.mode_selector import ModeSelector
from pizzapos.application.state import PosState

logger = logging.getLogger(__name__)


class LoadDataHandler:

    def __init__(self, selector: ModeSelector, state: PosState) -> None:
        self._selector = selector
        self._state = state

    async def handle(self) -> None:
        """Fill the catalog and order history from the active backend.

        A remote backend that fails here is replaced by the sample data
        (see ModeSelector), so this only raises if the fallback itself
        cannot load.
        """
        products, orders = await self._selector.initial_load()
        self._state.products = products
        self._state.ledger.load(orders)
        logger.info(
            "Loaded %d products and %d orders (%s mode)",
            len(products),
            len(orders),
            self._selector.mode.value,
        )
