"""
Tests for the notification board sink.
"""

import logging

from food_delivery.board import NotificationBoard


def test_quiet_board_logs_each_message(caplog):
    board = NotificationBoard()

    with caplog.at_level(logging.INFO, logger="notification_log"):
        board.render_notification("Order #1 placed.")

    assert board.messages == ["Order #1 placed."]
    assert "message=Order #1 placed." in caplog.text


def test_echoing_board_does_not_repeat_message_at_info(caplog):
    echoed = []
    board = NotificationBoard(output=echoed.append)

    with caplog.at_level(logging.INFO, logger="notification_log"):
        board.render_notification("Order #1 placed.")

    assert echoed == ["Order #1 placed."]
    assert board.messages == ["Order #1 placed."]
    assert caplog.records == []


def test_show_fee_and_clear():
    echoed = []
    board = NotificationBoard(output=echoed.append)
    board.render_notification("Order #1 placed.")
    board.show_fee("Delivery Fee: ₹25")

    assert board.fee_display == "Delivery Fee: ₹25"
    assert echoed[-1] == "Delivery Fee: ₹25"

    board.clear()
    assert board.messages == []
    assert board.fee_display == ""
