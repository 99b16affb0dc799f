"""
Liveness server process.

Binds the listening socket up front so a bad or occupied port surfaces as a
BindError at the process boundary, then hands the socket to uvicorn.
"""
import contextlib
import logging
import signal
import socket
import threading
from typing import Optional

import uvicorn
from uvicorn.server import HANDLED_SIGNALS

from liveness.core.config import ListenConfig, ServiceProfile, Settings, resolve_listen_config
from liveness.core.errors import BindError
from liveness.core.logging import setup_logging
from liveness.main import create_app

logger = logging.getLogger(__name__)

LISTEN_BACKLOG = 2048


class _UvicornServer(uvicorn.Server):
    """
    uvicorn.Server that treats SIGINT/SIGTERM as a normal stop.

    Stock uvicorn re-raises the captured signal once serving ends.
    """

    @contextlib.contextmanager
    def capture_signals(self):
        if threading.current_thread() is not threading.main_thread():
            yield
            return

        previous = {sig: signal.signal(sig, self.handle_exit) for sig in HANDLED_SIGNALS}
        try:
            yield
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)


class LivenessServer:
    """Serves one ServiceProfile on one ListenConfig."""

    def __init__(self, profile: ServiceProfile, listen: ListenConfig):
        self.profile = profile
        self.listen = listen
        self._server = _UvicornServer(
            uvicorn.Config(
                create_app(profile),
                host=listen.host,
                port=listen.port,
                log_config=None,
                access_log=False,
            )
        )

    def bind(self) -> socket.socket:
        """Acquire the listening socket or raise BindError."""
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((self.listen.host, self.listen.port))
            sock.listen(LISTEN_BACKLOG)
        except OSError as e:
            sock.close()
            raise BindError(self.listen.port, e.strerror or str(e)) from e
        return sock

    def serve(self):
        """Log the startup line, bind, and serve until stopped."""
        logger.info(
            "%s starting on port %s",
            self.profile.label,
            self.listen.port,
            extra={"service": self.profile.name, "host": self.listen.host, "port": self.listen.port},
        )
        sock = self.bind()
        try:
            self._server.run(sockets=[sock])
        finally:
            sock.close()

    def stop(self):
        self._server.should_exit = True

    @property
    def started(self) -> bool:
        return self._server.started


def run(profile: ServiceProfile, settings: Optional[Settings] = None) -> int:
    """Process boundary: returns the exit status for the service."""
    settings = settings or Settings()
    setup_logging(settings.LOG_LEVEL)

    try:
        listen = resolve_listen_config(profile, settings.PORT, host=settings.HOST)
        logger.debug("Resolved listen config", extra={"env": settings.ENV, "address": listen.address})
        LivenessServer(profile, listen).serve()
    except BindError as e:
        logger.error(
            "Failed to start %s",
            profile.name,
            extra={"service": profile.name, "port": e.port, "error": e.reason},
        )
        return 1

    logger.info("%s stopped", profile.label, extra={"service": profile.name, "env": settings.ENV})
    return 0
