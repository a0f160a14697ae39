"""In-memory implementation of PosBackend, used in fallback mode.

This adapter is the source of truth while the session runs without a
real backend: reads and writes go to the same dicts, so a reload after a
mutation sees exactly what was written.
"""

from __future__ import annotations

import itertools
import uuid

from pizzapos.domain.exceptions import NotFoundError
from pizzapos.domain.model.order import Order, OrderDraft
from pizzapos.domain.model.product import Product, ProductDraft
from pizzapos.domain.repository.pos_backend import PosBackend
from pizzapos.infrastructure.backend.sample_data import sample_products


class InMemoryPosBackend(PosBackend):

    def __init__(
        self,
        products: list[Product] | None = None,
        orders: list[Order] | None = None,
    ) -> None:
        self._products: dict[str, Product] = {p.id: p for p in products or []}
        self._orders: list[Order] = list(orders or [])
        start = max((o.id for o in self._orders), default=0) + 1
        self._order_ids = itertools.count(start)

    @classmethod
    def with_sample_data(cls) -> InMemoryPosBackend:
        return cls(products=sample_products())

    # --- PosBackend interface -------------------------------------------------

    async def list_products(self) -> list[Product]:
        return list(self._products.values())

    async def list_orders(self) -> list[Order]:
        return list(self._orders)

    async def create_product(self, draft: ProductDraft) -> Product:
        product = draft.with_id(self._new_product_id())
        self._products[product.id] = product
        return product

    async def update_product(self, product: Product) -> Product:
        if product.id not in self._products:
            raise NotFoundError(f"Product with ID '{product.id}' not found")
        self._products[product.id] = product
        return product

    async def delete_product(self, product_id: str) -> None:
        if self._products.pop(product_id, None) is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

    async def create_order(self, draft: OrderDraft) -> Order:
        order = draft.place(next(self._order_ids))
        self._orders.insert(0, order)
        return order

    # --- Internal helpers -----------------------------------------------------

    def _new_product_id(self) -> str:
        while True:
            candidate = uuid.uuid4().hex[:8]
            if candidate not in self._products:
                return candidate
