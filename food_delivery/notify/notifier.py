"""Order notifications fanned out to registered subscribers."""

from __future__ import annotations

from typing import Callable, Protocol

from food_delivery.orders.order import Order

Sink = Callable[[str], None]


class Subscriber(Protocol):
    """Anything that wants to hear about new orders."""

    def notify(self, order: Order) -> None:
        ...


class Notifier:
    """Keeps subscribers in registration order and publishes orders to them."""

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    def register(self, subscriber: Subscriber) -> None:
        """Append a subscriber; the same one may be registered more than once."""
        self._subscribers.append(subscriber)

    def publish(self, order: Order) -> None:
        """Call every subscriber in order. A failing subscriber stops the fan-out."""
        for subscriber in self._subscribers:
            subscriber.notify(order)

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        return tuple(self._subscribers)

    def __len__(self) -> int:
        return len(self._subscribers)


class DeliveryAgent:
    """Named subscriber that posts a line to the notification sink."""

    def __init__(self, name: str, sink: Sink) -> None:
        self.name = name
        self._sink = sink

    def notify(self, order: Order) -> None:
        self._sink(f"{self.name} notified: New order #{order.id} - {', '.join(order.items)}")
