"""Abstract boundary to whatever stores products and orders.

Defined in the domain layer so the domain never depends on
infrastructure. There are two implementations: an HTTP client for a
real backend and an in-memory stand-in used in fallback mode. Both live
in the infrastructure layer and return the same domain objects.

Implementations raise ``NotFoundError`` for an unknown identifier and
``BackendError`` for anything that went wrong on the way.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pizzapos.domain.model.order import Order, OrderDraft
from pizzapos.domain.model.product import Product, ProductDraft


class PosBackend(ABC):

    @abstractmethod
    async def list_products(self) -> list[Product]:
        """Return every product in the catalog, in the source's order."""

    @abstractmethod
    async def list_orders(self) -> list[Order]:
        """Return every order, most recent first."""

    @abstractmethod
    async def create_product(self, draft: ProductDraft) -> Product:
        """Persist a new product and return it with its assigned ID."""

    @abstractmethod
    async def update_product(self, product: Product) -> Product:
        """Replace an existing product and return the stored version."""

    @abstractmethod
    async def delete_product(self, product_id: str) -> None:
        """Remove a product from the catalog."""

    @abstractmethod
    async def create_order(self, draft: OrderDraft) -> Order:
        """Persist an order, assigning its ID and timestamp."""

    async def aclose(self) -> None:
        """Release any connections held by the backend."""
