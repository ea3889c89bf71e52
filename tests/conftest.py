"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
import strawberry

# Add src directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bookstore.config import Settings  # noqa: E402
from bookstore.store import BookStore, seed_records  # noqa: E402


@pytest.fixture
def book_store() -> BookStore:
    """A store holding the two seed books."""
    return BookStore(seed_records())


@pytest.fixture
def empty_store() -> BookStore:
    return BookStore()


@pytest.fixture
def mock_info(book_store: BookStore) -> MagicMock:
    """Create a mock GraphQL info object whose context carries the store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "book_store": book_store}
    return info


@pytest.fixture
def app_settings() -> Settings:
    return Settings(debug=False, graphiql=True, seed_books=True)


@pytest_asyncio.fixture
async def graphql_client(
    app_settings: Settings, book_store: BookStore
) -> AsyncGenerator[Any, None]:
    """HTTP client talking to a fresh app bound to ``book_store``."""
    from httpx import ASGITransport, AsyncClient

    from bookstore.api.app import create_app

    app = create_app(app_settings, book_store=book_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
