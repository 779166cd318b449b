from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from main import app
from stripe_checkout.checkout import get_checkout_client


@pytest.fixture
def stripe_client():
    """Stands in for StripeCheckoutClient; no network."""
    client = SimpleNamespace()
    client.create_session = AsyncMock(return_value=SimpleNamespace(id="cs_test_123"))
    app.dependency_overrides[get_checkout_client] = lambda: client
    yield client
    app.dependency_overrides.pop(get_checkout_client, None)


@pytest_asyncio.fixture
async def http_client(stripe_client):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
