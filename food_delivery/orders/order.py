"""Order model and the id counter owned by the app."""

from __future__ import annotations

from dataclasses import dataclass

from food_delivery.config.constants import FIRST_ORDER_ID


@dataclass(frozen=True)
class Order:
    """Customer order; immutable once built."""

    id: int
    items: tuple[str, ...]


def parse_items(items_text: str) -> tuple[str, ...]:
    """Split a comma-separated item list and trim each entry.

    Empty input is kept as a single empty item rather than rejected.
    """
    return tuple(item.strip() for item in items_text.split(","))


class OrderCounter:
    """Issues monotonic order ids starting from ``first_id`` (>= 1)."""

    def __init__(self, first_id: int = FIRST_ORDER_ID) -> None:
        if first_id < 1:
            raise ValueError(f"first_id must be >= 1, got {first_id}")
        self.first_id = first_id
        self._next_id = first_id

    def next_id(self) -> int:
        """Return the next id and advance the counter."""
        issued = self._next_id
        self._next_id += 1
        return issued

    @property
    def last_id(self) -> int:
        """Most recently issued id; 0 until the first id is issued."""
        if self._next_id == self.first_id:
            return 0
        return self._next_id - 1

    def build_order(self, items: tuple[str, ...]) -> Order:
        return Order(id=self.next_id(), items=items)
