"""Cart aggregate — the order being rung up at the register.

The cart owns its lines. Each line embeds a snapshot of the product taken
when it was first added. The snapshot only changes when the catalog tells
the cart about an edit (``refresh_product``) or a removal
(``drop_product``).

Every mutation notifies the registered listeners synchronously so a
display can redraw lines and totals straight away.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

from pizzapos.domain.model.product import Product
from pizzapos.domain.model.value_objects import TAX_RATE, Money, Quantity

CartListener = Callable[["Cart"], None]


@dataclass(frozen=True)
class CartLine:
    product_id: str
    quantity: Quantity
    product: Product  # snapshot, see module docstring

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass(frozen=True)
class CartTotals:
    subtotal: Money
    tax: Money
    total: Money

    @staticmethod
    def for_subtotal(subtotal: Money) -> CartTotals:
        tax = subtotal * TAX_RATE
        return CartTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)


class Cart:
    """Aggregate root for the in-progress order.

    Invariants:
    - at most one line per product identifier
    - every line has a quantity of at least 1
    """

    def __init__(self) -> None:
        # Insertion-ordered; keyed by product identifier.
        self._lines: dict[str, CartLine] = {}
        self._listeners: list[CartListener] = []

    # --- Observation ----------------------------------------------------------

    def subscribe(self, listener: CartListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: CartListener) -> None:
        self._listeners.remove(listener)

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._lines

    def get(self, product_id: str) -> CartLine | None:
        return self._lines.get(product_id)

    def totals(self) -> CartTotals:
        """Subtotal, 16% tax and total, computed from the current lines."""
        subtotal = Money.zero()
        for line in self._lines.values():
            subtotal = subtotal + line.line_total
        return CartTotals.for_subtotal(subtotal)

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product) -> None:
        line = self._lines.get(product.id)
        if line is None:
            self._lines[product.id] = CartLine(
                product_id=product.id, quantity=Quantity(1), product=product
            )
        else:
            self._lines[product.id] = replace(line, quantity=line.quantity.increment())
        self._changed()

    def remove_item(self, product_id: str) -> None:
        if self._lines.pop(product_id, None) is not None:
            self._changed()

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line.

        Setting the quantity of a product that is not in the cart does
        nothing.
        """
        if quantity <= 0:
            self.remove_item(product_id)
            return
        line = self._lines.get(product_id)
        if line is None:
            return
        self._lines[product_id] = replace(line, quantity=Quantity(quantity))
        self._changed()

    def clear(self) -> None:
        self._lines.clear()
        self._changed()

    # --- Catalog notifications ------------------------------------------------

    def refresh_product(self, product: Product) -> None:
        """Replace the snapshot of an edited product, keeping its quantity."""
        line = self._lines.get(product.id)
        if line is None:
            return
        self._lines[product.id] = replace(line, product=product)
        self._changed()

    def drop_product(self, product_id: str) -> None:
        """A deleted product cannot stay purchasable."""
        self.remove_item(product_id)

    # --- Internal helpers -----------------------------------------------------

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener(self)
