"""Project-wide constants for the delivery demo."""

from __future__ import annotations

FIRST_ORDER_ID = 1
CURRENCY_SYMBOL = "₹"

# Per-distance-unit fee rates
STANDARD_RATE = 5
EXPRESS_RATE = 10

# Placements kept for undo; oldest dropped first
UNDO_HISTORY_LIMIT = 50
