"""Session summary helpers."""

from __future__ import annotations

from food_delivery.board import NotificationBoard
from food_delivery.orders.order import OrderCounter


def summarize_session(board: NotificationBoard, counter: OrderCounter) -> dict[str, int]:
    """Build a minimal snapshot of what happened during a session."""
    messages = board.messages
    return {
        "orders_placed": sum(1 for m in messages if m.endswith(" placed.")),
        "cancel_messages": sum(1 for m in messages if m.endswith(" canceled.")),
        "notifications": sum(1 for m in messages if " notified: " in m),
        "last_order_id": counter.last_id,
    }
