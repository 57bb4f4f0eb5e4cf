"""
Greetings API — Server Entry Point
====================================

What:  Binds the application to a TCP port and serves until terminated.
Why:   The only module that opens a socket; app.main stays importable by
       tests without side effects.
How:   Reads host/port from Settings (PORT defaults to 3000), binds the
       listening socket up front, logs the startup notice, then hands the
       bound socket to uvicorn.

Usage:
    greetings-server
    python -m app.server
    PORT=8080 greetings-server

Failure:
    If the port is already in use, uvicorn's bind_socket() logs the OSError
    and exits non-zero before the startup notice is logged. There is no retry.
"""

import logging
import sys
from typing import Optional

import uvicorn

from app.config import Settings, settings
from app.main import app, setup_logging

logger = logging.getLogger(__name__)

# Same exit status uvicorn.run() uses when the server never finished startup
STARTUP_FAILURE = 3


def build_config(cfg: Optional[Settings] = None) -> uvicorn.Config:
    """Build the uvicorn configuration for the given settings."""
    cfg = cfg or settings
    return uvicorn.Config(
        app,
        host=cfg.host,
        port=cfg.port,
        log_level=cfg.log_level.lower(),
        log_config=None,  # uvicorn loggers propagate to the root handler
    )


def main() -> None:
    """Run the Greetings API in the foreground."""
    setup_logging()

    config = build_config()
    server = uvicorn.Server(config)

    sock = config.bind_socket()
    logger.info("Server is running on port %d", config.port)

    server.run(sockets=[sock])
    if not server.started:
        sys.exit(STARTUP_FAILURE)


if __name__ == "__main__":
    main()
