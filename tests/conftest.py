"""Shared fixtures: a greeting server running on an ephemeral port."""

import sys
import threading
from pathlib import Path
from typing import Generator

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import http_server  # noqa: E402


@pytest.fixture
def base_url() -> Generator[str, None, None]:
    """Serve GreetingHandler on 127.0.0.1 in a background thread."""
    server = http_server.build_server(0, host="127.0.0.1")
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


@pytest.fixture(scope="session")
def greeting_bytes() -> bytes:
    return http_server.GREETING.encode("utf-8")
