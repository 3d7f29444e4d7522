"""Entry point for the interactive delivery demo."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import Callable, Iterable

from food_delivery.app import DEFAULT_CONFIG_PATH, AppConfig, DeliveryApp
from food_delivery.board import NotificationBoard

HELP_TEXT = """Commands:
  place <items> [| <tier>]   e.g. place Pizza, Coke | express
  cancel                     cancel the last placed order
  undo                       undo the last placement
  help                       show this text
  quit                       leave the demo"""


def parse_command(line: str) -> tuple[str, str, str | None]:
    """Split an input line into (command, items_text, tier)."""
    command, _, rest = line.strip().partition(" ")
    command = command.lower()
    if command != "place":
        return command, "", None
    items_text, sep, tier = rest.partition("|")
    return command, items_text.strip(), tier.strip() if sep else None


def run_session(app: DeliveryApp, lines: Iterable[str], output: Callable[[str], None] = print) -> None:
    """Feed command lines to ``app`` until quit or input runs out."""
    for line in lines:
        if not line.strip():
            continue
        command, items_text, tier = parse_command(line)
        if command == "place":
            app.on_place_order(items_text, tier)
        elif command == "cancel":
            app.on_cancel_order()
        elif command == "undo":
            if not app.on_undo():
                output("Nothing to undo.")
        elif command == "help":
            output(HELP_TEXT)
        elif command in ("quit", "exit"):
            break
        else:
            output(f"Unknown command: {command!r}. Type 'help' for options.")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Observer/Strategy/Command delivery demo")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to settings.yaml")
    args = parser.parse_args(argv)

    app = DeliveryApp(AppConfig.from_yaml(args.config), board=NotificationBoard(output=print))

    print("Delivery demo started. Type 'help' for commands.")
    try:
        run_session(app, sys.stdin)
    except KeyboardInterrupt:
        print("\nGraceful shutdown initiated...")
    finally:
        app.shutdown()


if __name__ == "__main__":
    main()
