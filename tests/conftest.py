"""
Shared fixtures for all tests.

HTTP tests run against create_app() through an in-process ASGI transport.
Unit tests drive the paginator through FakeContext, an in-memory stand-in
for the request context.
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient


class FakeContext:
    def __init__(self, query: dict[str, str] | None = None) -> None:
        self.query = dict(query or {})
        self.values: dict[str, Any] = {}
        self.headers: dict[str, str] = {}

    def get_query(self, key: str, default: str) -> str:
        return self.query.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value

    def set_header(self, key: str, value: str) -> None:
        self.headers[key] = value


def _make_client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
def make_client() -> Callable[[FastAPI], AsyncClient]:
    """Factory for clients wired to an app built inside the test."""
    return _make_client


@pytest.fixture
def fake_context() -> type[FakeContext]:
    return FakeContext


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Return an HTTPX AsyncClient wired to the default host app."""
    from query_pagination.main import create_app

    async with _make_client(create_app()) as ac:
        yield ac
