"""Run the accounts RPC server."""
from __future__ import annotations

import argparse
import logging
import sys

from uvicorn import run

from accounts.core.config import Settings
from accounts.core.logging import setup_logging
from accounts.main import create_app

logger = logging.getLogger("accounts")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="accounts", description="Accounts UserV1 RPC server")
    parser.add_argument("--env", default=".env", help="path to env file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = Settings(_env_file=args.env)
    setup_logging(settings)

    app = create_app(settings)
    logger.info("Server listening at %s", settings.listen_address)
    run(app, host=settings.host, port=settings.port, lifespan="on", log_config=None)


if __name__ == "__main__":
    sys.exit(main())
