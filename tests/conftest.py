import socket
import threading
import time

import pytest

from liveness.core.config import ListenConfig
from liveness.server import LivenessServer


def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def port_in_use(port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        try:
            s.bind(("0.0.0.0", port))
        except OSError:
            return True
    return False


@pytest.fixture
def occupied_port():
    """A port held by a listening socket for the duration of the test."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("0.0.0.0", 0))
    sock.listen(1)
    yield sock.getsockname()[1]
    sock.close()


@pytest.fixture
def running_server():
    """Start a LivenessServer on a background thread; stop it on teardown."""
    started = []

    def _start(profile, listen: ListenConfig) -> LivenessServer:
        server = LivenessServer(profile, listen)
        thread = threading.Thread(target=server.serve, daemon=True)
        thread.start()
        deadline = time.monotonic() + 10
        while not server.started:
            if not thread.is_alive() or time.monotonic() > deadline:
                raise RuntimeError(f"server on {listen.address} did not start")
            time.sleep(0.05)
        started.append((server, thread))
        return server

    yield _start

    for server, thread in started:
        server.stop()
        thread.join(timeout=10)
