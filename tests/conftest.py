"""
Shared fixtures: a sample balance page and a throwaway local balance endpoint.
"""

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from breeze_balance.config import Settings

SAMPLE_BALANCE_PAGE = (
    "<html><head><title>Card Balance</title></head><body>"
    "<table>"
    '<tr><td class="Header">Breeze Card Balance</td><td class="Content_value">$12.50</td></tr>'
    '<tr class="Content_bold"><td class="Content_bold">'
    "Is your card Balance Protected ? : No<br>Hotlisted Status : No"
    "</td></tr>"
    '<tr class="Content_bold"><td class="Content_bold">Your card will expire on : 12/31/2030</td></tr>'
    '<tr class="Content_bold"><td>Product</td><td>Expires</td><td>Remaining Rides</td></tr>'
    "<tr>"
    '<td class="Content_normal_black"> 10 Trip Pass </td>'
    '<td class="Content_normal_black">01/15/2027</td>'
    '<td class="Content_normal_black">7</td>'
    "</tr>"
    '<tr class="Content_bold"><td>Stored Value:</td></tr>'
    "</table>"
    "</body></html>"
)


@pytest.fixture
def sample_html():
    return SAMPLE_BALANCE_PAGE


@pytest.fixture
def settings():
    return Settings(
        endpoint_url="https://portal.example/balance",
        referrer="https://portal.example/check-balance",
        request_timeout=5.0,
    )


@pytest_asyncio.fixture
async def serve():
    """Start a local server whose POST /balance is `handler`; returns its URL."""
    servers = []

    async def _serve(handler):
        app = web.Application()
        app.router.add_post("/balance", handler)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return str(server.make_url("/balance"))

    yield _serve

    for server in servers:
        await server.close()
