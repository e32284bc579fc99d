"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from fivetran_client import FivetranClient


@pytest_asyncio.fixture
async def live_client():
    """Client for the live API built from FIVETRAN_API_KEY / FIVETRAN_API_SECRET."""
    if not (os.environ.get("FIVETRAN_API_KEY") and os.environ.get("FIVETRAN_API_SECRET")):
        pytest.skip("FIVETRAN_API_KEY and FIVETRAN_API_SECRET must be set")
    async with FivetranClient.from_env() as client:
        yield client
