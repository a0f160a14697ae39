"""Order ledger — the append-only history of completed orders."""

from __future__ import annotations

from typing import Iterable, Iterator

from pizzapos.domain.model.order import Order


class OrderLedger:
    """Most-recent-first history of orders for the session.

    There is no update or delete: orders only ever get prepended.
    """

    def __init__(self, orders: Iterable[Order] = ()) -> None:
        self._orders: list[Order] = list(orders)

    def load(self, orders: Iterable[Order]) -> None:
        """Replace the history with what the backend reports (newest first)."""
        self._orders = list(orders)

    def append(self, order: Order) -> None:
        self._orders.insert(0, order)

    def find_by_id(self, order_id: int) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    @property
    def head(self) -> Order | None:
        return self._orders[0] if self._orders else None

    @property
    def orders(self) -> list[Order]:
        return list(self._orders)

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(list(self._orders))
