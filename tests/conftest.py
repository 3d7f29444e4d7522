"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import food_delivery...' works,
and provides a quiet app wired to an in-memory notification board.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from food_delivery.app import AppConfig, DeliveryApp  # noqa: E402
from food_delivery.board import NotificationBoard  # noqa: E402


@pytest.fixture
def config():
    return AppConfig(
        raw={
            "app": {
                "first_order_id": 1,
                "demo_distance": 5,
                "currency": "₹",
                "default_tier": "standard",
            },
            "agents": ["Agent A", "Agent B"],
        }
    )


@pytest.fixture
def board():
    return NotificationBoard()


@pytest.fixture
def app(config, board):
    return DeliveryApp(config, board=board)
