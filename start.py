"""Launcher for the wayfinder HTTP server.

Reads the server settings from the environment (WF_SERVER_*), configures
logging and serves the Flask application with a per-connection socket
timeout.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from werkzeug.serving import WSGIRequestHandler

from wayfinder.api import create_app
from wayfinder.config import get_config
from wayfinder.container import Container
from wayfinder.monitoring import configure_logging


def make_request_handler(timeout_seconds: float) -> type[WSGIRequestHandler]:
    """Request handler class whose sockets time out after timeout_seconds."""

    class TimeoutRequestHandler(WSGIRequestHandler):
        timeout = timeout_seconds

    return TimeoutRequestHandler


def main(argv: Optional[Sequence[str]] = None) -> None:
    config = get_config()

    parser = argparse.ArgumentParser(description="College wayfinder server")
    parser.add_argument("--host", default=config.server.host)
    parser.add_argument("--port", type=int, default=config.server.port)
    parser.add_argument("--debug", action="store_true", default=config.server.debug)
    args = parser.parse_args(argv)

    configure_logging(config.observability)
    log = logging.getLogger("wayfinder.start")

    app = create_app(Container.create_default(config))

    log.info(
        "Server starting",
        extra={"host": args.host, "port": args.port},
    )
    print(f"Server running on http://{args.host}:{args.port}")
    print("API endpoints:")
    print("   GET /api/rooms")
    print("   GET /api/rooms/<id>")
    print("   GET /api/graph")
    print("   GET /api/search?q=query")
    print("   GET /api/route?from=node1&to=node2")
    print("   GET /map?floor=1&from=node1&to=node2")

    app.run(
        host=args.host,
        port=args.port,
        debug=args.debug,
        threaded=True,
        request_handler=make_request_handler(config.server.request_timeout_seconds),
    )


if __name__ == "__main__":
    main()
