"""
Run the API server.

Usage:
    python -m dispo --port 8000
"""

import argparse
import logging

import uvicorn

from dispo.core.config import settings
from dispo.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Dispo Croupiers API server")
    parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    parser.add_argument("--port", type=int, default=8000, help="Bind port")
    args = parser.parse_args(argv)

    configure_logging(level=settings.log_level)
    logger.info("Starting API at http://%s:%d", args.host, args.port)
    uvicorn.run("dispo.main:app", host=args.host, port=args.port, reload=False)


if __name__ == "__main__":
    main()
