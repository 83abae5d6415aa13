"""
Fixtures that run the real application on a local port
"""
import socket
import threading
import time

import pytest
import uvicorn

from src.config import Settings
from src.index import create_app

SERVER_STARTUP_TIMEOUT = 10


def _find_free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture(scope="module")
def live_server():
    """Start the app (API + UI) in a background thread and yield its base URL."""
    port = _find_free_port()
    app = create_app(settings=Settings(host="127.0.0.1", port=port))
    server = uvicorn.Server(uvicorn.Config(app, host="127.0.0.1", port=port, log_level="warning"))
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + SERVER_STARTUP_TIMEOUT
    while not server.started:
        if time.monotonic() > deadline:
            server.should_exit = True
            pytest.fail("Test server did not start in time")
        time.sleep(0.05)

    yield f"http://127.0.0.1:{port}"

    server.should_exit = True
    thread.join(timeout=5)
