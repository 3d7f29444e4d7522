"""Notification board: the sink every component writes messages to."""

from __future__ import annotations

from typing import Callable, Optional

from food_delivery.logging.notification_log import get_notification_logger


class NotificationBoard:
    """Collects rendered messages plus the current fee line.

    ``output`` receives each line as it arrives (``print`` for the console
    demo, ``None`` to stay quiet). Lines echoed there are logged at DEBUG
    only, so the console shows each message once.
    """

    def __init__(self, output: Optional[Callable[[str], None]] = None) -> None:
        self._output = output
        self._messages: list[str] = []
        self.fee_display = ""
        self.logger = get_notification_logger()

    def render_notification(self, text: str) -> None:
        """Append a plain-text message."""
        self._messages.append(text)
        if self._output is not None:
            self.logger.debug("message=%s", text)
            self._output(text)
        else:
            self.logger.info("message=%s", text)

    def show_fee(self, text: str) -> None:
        """Replace the fee line."""
        self.fee_display = text
        if self._output is not None:
            self._output(text)

    @property
    def messages(self) -> list[str]:
        return list(self._messages)

    def clear(self) -> None:
        self._messages.clear()
        self.fee_display = ""
