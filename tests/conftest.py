"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
import strawberry
from httpx import ASGITransport, AsyncClient

from bookshelf.logging import configure_logging
from bookshelf.store import BookStore, get_store


@pytest.fixture(scope="session", autouse=True)
def structured_logging() -> None:
    """Configure structlog before any module logger is first used and cached."""
    configure_logging(debug=False)


@pytest.fixture(autouse=True)
def reset_store() -> Generator[BookStore, None, None]:
    """Restore the process-wide store to its seed data around each test."""
    store = get_store()
    store.reset()
    yield store
    store.reset()


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def store() -> BookStore:
    """A private store, independent of the process-wide one."""
    return BookStore()


@pytest.fixture
def mock_info(store: BookStore) -> MagicMock:
    """Create a mock GraphQL info object whose context carries a private store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": store}
    return info


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the ASGI app."""
    from bookshelf.api.app import create_app

    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def graphql(client: AsyncClient):
    """POST a GraphQL document to /graphql and return the decoded body."""

    async def execute(query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        payload: dict[str, Any] = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        response = await client.post("/graphql", json=payload)
        assert response.status_code == 200, response.text
        return response.json()

    return execute


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
