"""
Test configuration for the dollar quote tests.
"""

import sys
from collections.abc import Awaitable, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

# Add project root to path before importing our modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Import our modules after path setup
from dollar_quote.storage.quote_storage import QuoteStorage  # noqa: E402

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@pytest.fixture
def database_path(tmp_path):
    """Path of a database file that does not exist yet."""
    return str(tmp_path / "fc-dolar.db")


@pytest_asyncio.fixture
async def storage(database_path):
    """Create a storage instance with the quote table provisioned."""
    storage = QuoteStorage(database_path)
    await storage.create_schema()
    return storage


@pytest_asyncio.fixture
async def serve():
    """Start throwaway HTTP servers answering a single GET route."""
    servers: list[TestServer] = []

    async def _serve(handler: Handler, path: str = "/") -> TestServer:
        app = web.Application()
        app.router.add_get(path, handler)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return server

    yield _serve

    for server in servers:
        await server.close()


@pytest.fixture
def upstream_body():
    """A trimmed-down response of the exchange rate API."""
    return {
        "USDBRL": {
            "code": "USD",
            "codein": "BRL",
            "name": "Dólar Americano/Real Brasileiro",
            "high": "5.4712",
            "low": "5.4101",
            "bid": "5.4321",
            "ask": "5.4331",
            "timestamp": "1729350000",
        }
    }
