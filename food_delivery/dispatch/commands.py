"""Place/cancel order commands and the dispatcher that runs them."""

from __future__ import annotations

from collections import deque
from typing import Callable, Protocol, Union

from food_delivery.config.constants import UNDO_HISTORY_LIMIT
from food_delivery.logging.order_log import get_order_logger
from food_delivery.orders.order import Order


class OrderService:
    """Receiver for order commands; only surfaces display messages."""

    def __init__(self, sink: Callable[[str], None]) -> None:
        self._sink = sink

    def place(self, order: Order) -> None:
        self._sink(f"Order #{order.id} placed.")

    def cancel(self, order: Order) -> None:
        self._sink(f"Order #{order.id} canceled.")


class Undoable(Protocol):
    def execute(self) -> None:
        ...

    def undo(self) -> None:
        ...


class PlaceOrder:
    """Places an order; undo cancels it."""

    def __init__(self, service: OrderService, order: Order) -> None:
        self.service = service
        self.order = order

    def execute(self) -> None:
        self.service.place(self.order)

    def undo(self) -> None:
        self.service.cancel(self.order)


class CancelOrder:
    """Cancels an order. Cannot be undone."""

    def __init__(self, service: OrderService, order: Order) -> None:
        self.service = service
        self.order = order

    def execute(self) -> None:
        self.service.cancel(self.order)


Action = Union[PlaceOrder, CancelOrder]


class OrderDispatcher:
    """Executes order actions and remembers the last ``history_limit`` undoable ones."""

    def __init__(self, history_limit: int = UNDO_HISTORY_LIMIT) -> None:
        self._history: deque[Undoable] = deque(maxlen=history_limit)
        self.logger = get_order_logger()

    def execute(self, action: Action) -> None:
        """Run ``action``. No transition checks: re-placing a canceled order is allowed."""
        action.execute()
        if isinstance(action, PlaceOrder):
            self._history.append(action)
        self.logger.debug("executed action=%s order_id=%s", type(action).__name__, action.order.id)

    def undo_last(self) -> bool:
        """Undo the most recent undoable action; False when there is none."""
        if not self._history:
            self.logger.info("skip undo reason=empty_history")
            return False
        action = self._history.pop()
        action.undo()
        return True

    @property
    def history_size(self) -> int:
        return len(self._history)
