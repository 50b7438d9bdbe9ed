import httpx
import pytest

from gatewaycheck.core.engine import Verifier
from gatewaycheck.suites.default import default_suite

BASE = "http://gateway.test/tymg"


def route_table(routes, default=404):
    """MockTransport handler answering (METHOD, path) -> (status, json) or Response."""
    def handler(request: httpx.Request) -> httpx.Response:
        hit = routes.get((request.method, request.url.path), default)
        if isinstance(hit, httpx.Response):
            return hit
        if isinstance(hit, tuple):
            status, payload = hit
            return httpx.Response(status, json=payload)
        return httpx.Response(hit, text="")
    return handler


@pytest.fixture
def make_verifier():
    clients = []

    def _make(handler, logger=None, **kw):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        kw.setdefault("delay", 0)
        return Verifier(client=client, logger=logger, **kw)

    yield _make
    for c in clients:
        c.close()


@pytest.fixture
def suite():
    return default_suite(BASE)
