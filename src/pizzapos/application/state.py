"""Application state shared by the use-case handlers.

One instance exists per session. It is created by the composition root
and handed to every handler that needs it; nothing else holds catalog,
cart or ledger state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pizzapos.domain.model.cart import Cart
from pizzapos.domain.model.ledger import OrderLedger
from pizzapos.domain.model.product import Product


@dataclass
class PosState:
    products: list[Product] = field(default_factory=list)
    cart: Cart = field(default_factory=Cart)
    ledger: OrderLedger = field(default_factory=OrderLedger)

    def find_product(self, product_id: str) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def find_product_by_name(self, name: str) -> Product | None:
        wanted = name.strip().lower()
        for product in self.products:
            if product.name.lower() == wanted:
                return product
        return None
