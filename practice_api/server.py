"""Process lifecycle: bind the listener, announce, serve until killed."""

from __future__ import annotations

import logging
import socket
from typing import Optional

from flask import Flask
from werkzeug.serving import BaseWSGIServer, make_server, select_address_family

from practice_api.app import create_app
from practice_api.config import ServerSettings
from practice_api.errors import ListenBindFailure
from practice_api.log import LOGGER_NAME, setup_logger

LISTEN_BACKLOG = 128

logger = logging.getLogger(LOGGER_NAME)


def bind_listener(settings: ServerSettings) -> socket.socket:
    """Open a TCP socket bound to ``settings.host:settings.port`` and listening.

    Any socket error is raised as :class:`ListenBindFailure` with the OS error
    chained as its cause.
    """
    family = select_address_family(settings.host, settings.port)
    try:
        sock = socket.socket(family, socket.SOCK_STREAM)
    except OSError as exc:
        raise ListenBindFailure(settings.host, settings.port, str(exc)) from exc

    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((settings.host, settings.port))
        sock.listen(LISTEN_BACKLOG)
    except OSError as exc:
        sock.close()
        raise ListenBindFailure(settings.host, settings.port, str(exc)) from exc
    return sock


def make_http_server(
    settings: ServerSettings, app: Optional[Flask] = None
) -> BaseWSGIServer:
    """Bind the listener and wrap it in a threaded Werkzeug server."""
    app = app or create_app(settings)
    sock = bind_listener(settings)
    try:
        # Werkzeug duplicates the descriptor, so ours can be closed right after.
        return make_server(
            settings.host,
            settings.port,
            app,
            threaded=True,
            fd=sock.fileno(),
        )
    finally:
        sock.close()


def serve(settings: ServerSettings, app: Optional[Flask] = None) -> None:
    """Start serving and block for the rest of the process lifetime."""
    server = make_http_server(settings, app)
    notice = f"Starting guitar practice API server on :{server.port}"
    print(notice, flush=True)
    logger.info(notice)
    server.serve_forever()


def main(settings: Optional[ServerSettings] = None) -> None:
    settings = settings or ServerSettings()
    setup_logger(log_level=settings.log_level)
    try:
        serve(settings)
    except ListenBindFailure as exc:
        logger.critical("Failed to start server: %s", exc.__cause__)
        raise SystemExit(1) from exc
