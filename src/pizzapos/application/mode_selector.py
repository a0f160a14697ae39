"""Mode selection between the real backend and the local fallback.

The mode is decided once, when the session starts: connected if a remote
backend was configured, fallback otherwise. Callers always go through
``ModeSelector.backend`` and never check the mode themselves.

A failing remote backend is reported to the caller, with one exception:
if the very first load fails, the session switches to the fallback data
so the register is never left with an empty catalog.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from pizzapos.domain.exceptions import BackendError
from pizzapos.domain.model.order import Order
from pizzapos.domain.model.product import Product
from pizzapos.domain.repository.pos_backend import PosBackend

logger = logging.getLogger(__name__)


class Mode(Enum):
    CONNECTED = "connected"
    FALLBACK = "fallback"


class ModeSelector:

    def __init__(
        self,
        remote: PosBackend | None,
        fallback_factory: Callable[[], PosBackend],
    ) -> None:
        self._remote = remote
        self._fallback_factory = fallback_factory
        self._fallback: PosBackend | None = None
        self._loaded = False

        if remote is None:
            logger.info("No backend configured, running in fallback mode")
            self._mode = Mode.FALLBACK
            self._active = self._make_fallback()
        else:
            self._mode = Mode.CONNECTED
            self._active = remote

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def backend(self) -> PosBackend:
        return self._active

    async def initial_load(self) -> tuple[list[Product], list[Order]]:
        """Load catalog and order history from the active backend.

        Only the first call may fall back; later failures propagate.
        """
        first_load = not self._loaded
        self._loaded = True
        try:
            return await self._load_from(self._active)
        except BackendError as exc:
            if not first_load or self._mode is Mode.FALLBACK:
                raise
            logger.warning("Initial load failed (%s); switching to sample data", exc)
            self._mode = Mode.FALLBACK
            self._active = self._make_fallback()
            return await self._load_from(self._active)

    async def aclose(self) -> None:
        if self._remote is not None:
            await self._remote.aclose()
        if self._fallback is not None:
            await self._fallback.aclose()

    # --- Internal helpers -----------------------------------------------------

    def _make_fallback(self) -> PosBackend:
        self._fallback = self._fallback_factory()
        return self._fallback

    @staticmethod
    async def _load_from(backend: PosBackend) -> tuple[list[Product], list[Order]]:
        products = await backend.list_products()
        orders = await backend.list_orders()
        return products, orders
