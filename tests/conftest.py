"""
Pytest fixtures shared by the CORSCheck test suite.

HTTP is never sent over the network: servers are simulated with
httpx.MockTransport handlers or the Flask VulnLab over httpx.WSGITransport.
"""

import threading
from typing import Callable, List, Optional

import httpx
import pytest

from corscheck.core.models import Category, CORSConfig, CORSResult


class RecordingLog:
    """Logger stand-in that keeps messages instead of printing them."""

    def __init__(self, verbose: int = 2):
        self.verbose = verbose
        self.lines: List[tuple] = []

    def _add(self, level, msg):
        self.lines.append((level, msg))

    def info(self, msg):
        self._add("info", msg)

    def warn(self, msg):
        self._add("warn", msg)

    def ok(self, msg):
        self._add("ok", msg)

    def fail(self, msg):
        self._add("fail", msg)

    def debug(self, msg):
        self._add("debug", msg)

    def messages(self, level: str) -> List[str]:
        return [m for lvl, m in self.lines if lvl == level]


class CountingServer:
    """Wraps a request handler and remembers every Origin it was sent."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.origins: List[Optional[str]] = []
        self._lock = threading.Lock()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.origins.append(request.headers.get("Origin"))
        return self.handler(request)

    @property
    def calls(self) -> int:
        return len(self.origins)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def log() -> RecordingLog:
    return RecordingLog()


@pytest.fixture
def server():
    """Factory: server(handler) -> CountingServer."""
    return CountingServer


@pytest.fixture
def make_result():
    """Factory for vulnerable results without any HTTP involved."""
    def _make(url: str, category: Category = Category.WILDCARD, status: int = 200) -> CORSResult:
        config = CORSConfig(allow_origins=("*",), allow_methods=("GET",))
        return CORSResult.finding(url, status, config, category)
    return _make
