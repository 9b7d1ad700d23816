"""Command-line entry point that runs the API server."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from vista.server import Server

logger = logging.getLogger("vista")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line options."""
    parser = argparse.ArgumentParser(prog="vista")
    parser.add_argument(
        "-port",
        "--port",
        dest="port",
        type=int,
        default=8080,
        help="Port for the API server",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server; return 1 if it cannot start."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s: %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    )
    server = Server(args.port)
    try:
        server.start()
    except (OSError, OverflowError) as exc:
        logger.error("Server error: %s", exc)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())