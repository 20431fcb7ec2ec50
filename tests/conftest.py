"""
Shared fixtures for the client test suite.
"""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure src/ is on the Python path so that absolute imports like
# ``from core.query import ...`` resolve correctly.
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import Config
from core.interfaces import HttpResult, IHttpExecutor


class FakeExecutor(IHttpExecutor):
    """Records every request and answers from a queue of canned results."""

    def __init__(self, *results: HttpResult):
        self.results = list(results)
        self.calls: list[tuple[str, str, dict]] = []
        self.closed = False

    def queue(self, status: int, body=b"") -> None:
        if not isinstance(body, bytes):
            body = json.dumps(body).encode()
        self.results.append(HttpResult(status=status, body=body))

    @property
    def urls(self) -> list[str]:
        return [url for _, url, _ in self.calls]

    async def execute(self, method: str, url: str, headers: dict[str, str]) -> HttpResult:
        self.calls.append((method, url, headers))
        return self.results.pop(0)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def config() -> Config:
    return Config(
        _env_file=None,
        gamma_base_url="https://gamma.test",
        data_base_url="https://data.test",
        user_agent="tests/1.0",
    )
