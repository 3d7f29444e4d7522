"""Delivery app: turns user triggers into notifier, fee and dispatcher calls."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from food_delivery.board import NotificationBoard
from food_delivery.dispatch.commands import CancelOrder, OrderDispatcher, OrderService, PlaceOrder
from food_delivery.logging.order_log import get_order_logger
from food_delivery.notify.notifier import DeliveryAgent, Notifier
from food_delivery.orders.order import Order, OrderCounter, parse_items
from food_delivery.pricing.fees import FeeTier, compute_fee, format_fee
from food_delivery.summary import summarize_session

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config" / "settings.yaml"


@dataclass
class AppConfig:
    raw: dict[str, Any]

    @classmethod
    def from_yaml(cls, path: str | Path = DEFAULT_CONFIG_PATH) -> "AppConfig":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls(raw=data)


class DeliveryApp:
    """Owns the order counter and wires notifier, fee tiers and dispatcher."""

    def __init__(self, config: AppConfig, board: Optional[NotificationBoard] = None) -> None:
        cfg = config.raw

        self.board = board if board is not None else NotificationBoard()
        self.counter = OrderCounter(first_id=int(cfg["app"]["first_order_id"]))
        self.notifier = Notifier()
        for name in cfg["agents"]:
            self.notifier.register(DeliveryAgent(name, self.render_notification))
        self.service = OrderService(self.render_notification)
        self.dispatcher = OrderDispatcher()

        self.demo_distance = float(cfg["app"]["demo_distance"])
        self.currency = str(cfg["app"]["currency"])
        self.default_tier = FeeTier.parse(cfg["app"]["default_tier"])
        self.order_logger = get_order_logger()
        self.last_fee: float | None = None

    def render_notification(self, text: str) -> None:
        self.board.render_notification(text)

    def on_place_order(self, items_text: str, delivery_tier: FeeTier | str | None = None) -> Order:
        """Build the next order, notify agents, show the fee and place it."""
        tier = FeeTier.parse(delivery_tier if delivery_tier is not None else self.default_tier)
        order = self.counter.build_order(parse_items(items_text))

        self.notifier.publish(order)

        fee = compute_fee(tier, self.demo_distance)
        self.last_fee = fee
        self.board.show_fee(format_fee(fee, self.currency))

        self.dispatcher.execute(PlaceOrder(self.service, order))
        self.order_logger.info(
            "place order_id=%d items=%d tier=%s fee=%.2f",
            order.id,
            len(order.items),
            tier.value,
            fee,
        )
        return order

    def on_cancel_order(self) -> Order | None:
        """Cancel the most recently placed order id, if any."""
        last_id = self.counter.last_id
        if last_id < 1:
            self.order_logger.info("skip cancel reason=no_orders")
            return None
        order = Order(id=last_id, items=())
        self.dispatcher.execute(CancelOrder(self.service, order))
        self.order_logger.info("cancel order_id=%d", order.id)
        return order

    def on_undo(self) -> bool:
        """Undo the last placement."""
        return self.dispatcher.undo_last()

    def summary(self) -> dict[str, int]:
        return summarize_session(self.board, self.counter)

    def shutdown(self) -> None:
        """Print the session summary and flush logs."""
        print("=== SESSION SUMMARY ===")
        for k, v in self.summary().items():
            print(f"{k}: {v}")
        for logger in [self.order_logger, self.board.logger]:
            for handler in logger.handlers:
                handler.flush()
        print("Delivery demo shutdown complete.")
