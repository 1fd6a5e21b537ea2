"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from src.duplicates.detector import DuplicateDetector
from src.main import app


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Create async test client for FastAPI app."""
    app.state.duplicate_detector = DuplicateDetector(limit=10)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Clean up app state
    del app.state.duplicate_detector
