"""In-memory fakes for testing.

These implement the same abstract interfaces as the real adapters but
keep everything in plain lists and dicts, and can be told to fail.
No network, no side effects. ``http_backend`` serves the real HTTP
adapter from an in-process handler.
"""

from __future__ import annotations

import httpx

from pizzapos.application.mode_selector import ModeSelector
from pizzapos.application.state import PosState
from pizzapos.domain.exceptions import BackendError, NotFoundError, PrintError
from pizzapos.domain.model.order import Order, OrderDraft
from pizzapos.domain.model.product import Product, ProductDraft
from pizzapos.domain.model.value_objects import Money
from pizzapos.domain.repository.pos_backend import PosBackend
from pizzapos.domain.repository.receipt_printer import ReceiptPrinter
from pizzapos.infrastructure.backend.http_backend import HttpPosBackend


def margherita(price: str = "12.99") -> Product:
    return Product(id="1", name="Margherita", price=Money.of(price), description="Classic")


def pepperoni(price: str = "14.99") -> Product:
    return Product(id="2", name="Pepperoni", price=Money.of(price), description="Spicy")


class FakePosBackend(PosBackend):
    """Backend double. Put operation names into ``failing`` to make them raise."""

    def __init__(
        self,
        products: list[Product] | None = None,
        orders: list[Order] | None = None,
    ) -> None:
        self._products: dict[str, Product] = {p.id: p for p in products or []}
        self._orders: list[Order] = list(orders or [])
        self._next_product_id = 100
        self._next_order_id = 1
        self.failing: set[str] = set()
        self.calls: list[str] = []
        self.closed = False

    def _call(self, name: str) -> None:
        self.calls.append(name)
        if name in self.failing:
            raise BackendError(f"{name} is down")

    async def list_products(self) -> list[Product]:
        self._call("list_products")
        return list(self._products.values())

    async def list_orders(self) -> list[Order]:
        self._call("list_orders")
        return list(self._orders)

    async def create_product(self, draft: ProductDraft) -> Product:
        self._call("create_product")
        product = draft.with_id(str(self._next_product_id))
        self._next_product_id += 1
        self._products[product.id] = product
        return product

    async def update_product(self, product: Product) -> Product:
        self._call("update_product")
        if product.id not in self._products:
            raise NotFoundError(f"Product with ID '{product.id}' not found")
        self._products[product.id] = product
        return product

    async def delete_product(self, product_id: str) -> None:
        self._call("delete_product")
        if self._products.pop(product_id, None) is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

    async def create_order(self, draft: OrderDraft) -> Order:
        self._call("create_order")
        order = draft.place(self._next_order_id)
        self._next_order_id += 1
        self._orders.insert(0, order)
        return order

    async def aclose(self) -> None:
        self.closed = True


class FakeReceiptPrinter(ReceiptPrinter):

    def __init__(self, broken: bool = False) -> None:
        self.broken = broken
        self.printed: list[tuple[str, str | None]] = []

    def print_receipt(self, ticket_text: str, job_name: str | None = None) -> None:
        if self.broken:
            raise PrintError("Printer is out of paper")
        self.printed.append((ticket_text, job_name))


def connected_setup(
    products: list[Product] | None = None,
) -> tuple[ModeSelector, PosState, FakePosBackend]:
    """Selector in connected mode over a fake backend, state pre-loaded."""
    if products is None:
        products = [margherita(), pepperoni()]
    backend = FakePosBackend(products)
    selector = ModeSelector(remote=backend, fallback_factory=FakePosBackend)
    state = PosState(products=list(products))
    return selector, state, backend


def http_backend(handler) -> HttpPosBackend:
    """HTTP backend whose requests are answered by ``handler``."""
    base_url = "http://pos.test"
    client = httpx.AsyncClient(base_url=base_url, transport=httpx.MockTransport(handler))
    return HttpPosBackend(base_url, client=client)
