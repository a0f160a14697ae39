"""Application service: List Products use case (query)."""

from __future__ import annotations

import logging
from typing import Callable

from pizzapos.application.mode_selector import ModeSelector
from pizzapos.application.state import PosState
from pizzapos.domain.exceptions import BackendError
from pizzapos.domain.model.product import Product

logger = logging.getLogger(__name__)


class ListProductsHandler:

    def __init__(self, selector: ModeSelector, state: PosState) -> None:
        self._selector = selector
        self._state = state

    def handle(self, search: str | None = None) -> list[Product]:
        """Return the catalog, optionally filtered by a search term."""
        if not search or not search.strip():
            return list(self._state.products)
        return [p for p in self._state.products if p.matches(search)]

    async def reload(self) -> list[Product]:
        """Re-read the catalog from the active backend."""
        self._state.products = await self._selector.backend.list_products()
        return list(self._state.products)

    async def reload_after_change(
        self,
        what: str,
        apply_locally: Callable[[list[Product]], list[Product]],
    ) -> None:
        """Reload once a mutation went through.

        The backend has already accepted the change, so a failed reload is
        not a failed mutation. The change is applied to the loaded catalog
        instead and the next reload catches up with anything else.
        """
        try:
            await self.reload()
        except BackendError as exc:
            logger.warning("%s saved, but the catalog could not be reloaded: %s", what, exc)
            self._state.products = apply_locally(list(self._state.products))
