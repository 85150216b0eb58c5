"""Command-line entry point.

Runs one search per invocation and prints the replies a chat user would
receive, separated by blank lines:

    python -m cheap_flights "Kiev Tallinn"
    python -m cheap_flights --help-text "Привет"
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import get_config
from .container import Container
from .logging_config import configure_logging
from .services import FlightSearchService


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cheap_flights",
        description="Find the cheapest round-trip fares between two cities.",
    )
    parser.add_argument("text", nargs="*", help='Message such as "Kiev Tallinn"')
    parser.add_argument(
        "--help-text",
        action="store_true",
        help="Print the bot's help message instead of searching",
    )
    args = parser.parse_args(argv)

    config = get_config()
    configure_logging(config.observability)

    service: FlightSearchService = Container.create_default(config).resolve(
        FlightSearchService
    )

    text = " ".join(args.text).strip()
    if args.help_text:
        print(service.help(text))
        return 0

    if not text:
        text = input("> ").strip()
    if not text:
        print(service.help())
        return 1

    print("\n\n".join(service.search(text)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
