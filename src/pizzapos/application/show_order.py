"""Application service: Show Order / List Orders use cases (queries)."""

from __future__ import annotations

from pizzapos.application.dto import OrderDTO, to_order_dto
from pizzapos.application.state import PosState
from pizzapos.domain.exceptions import NotFoundError


class ShowOrderHandler:

    def __init__(self, state: PosState) -> None:
        self._state = state

    def handle(self, order_id: int) -> OrderDTO:
        order = self._state.ledger.find_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")
        return to_order_dto(order)


class ListOrdersHandler:

    def __init__(self, state: PosState) -> None:
        self._state = state

    def handle(self) -> list[OrderDTO]:
        """Every order of the session, most recent first."""
        return [to_order_dto(order) for order in self._state.ledger]
