"""Shared test fixtures.

``FakeReplitDB`` stands in for the remote database behind an
``httpx.MockTransport``.  Like the real store it form-decodes POST bodies
and query strings, percent-decodes paths, keeps whatever text that leaves
and sends it back verbatim.
"""

from urllib.parse import parse_qsl, unquote, unquote_plus

import httpx
import pytest

from repldb import AsyncReplDBClient, ReplDBClient

DB_URL = "https://kv.replit.com/v0/test-token"
BASE_PATH = "/v0/test-token"


class FakeReplitDB:
    def __init__(self):
        self.data: dict[str, str] = {}
        self.requests: list[httpx.Request] = []

    def keys(self) -> list[str]:
        return [unquote_plus(k) for k in self.data]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        raw = request.url.raw_path.decode("ascii")
        path, _, query = raw.partition("?")

        if request.method == "POST" and path == BASE_PATH:
            for key, value in parse_qsl(request.content.decode("ascii"), keep_blank_values=True):
                self.data[key] = value
            return httpx.Response(200)

        if request.method == "GET" and path == BASE_PATH:
            prefix = dict(parse_qsl(query, keep_blank_values=True)).get("prefix", "")
            matching = [k for k in self.data if k.startswith(prefix)]
            return httpx.Response(200, text="\n".join(matching))

        key = unquote(path.removeprefix(BASE_PATH + "/"))
        if request.method == "GET":
            if key not in self.data:
                return httpx.Response(404, text="")
            return httpx.Response(200, text=self.data[key])
        if request.method == "DELETE":
            self.data.pop(key, None)
            return httpx.Response(204)
        return httpx.Response(405)


@pytest.fixture
def db_url():
    return DB_URL


@pytest.fixture
def fake():
    return FakeReplitDB()


@pytest.fixture
def client(fake):
    http = httpx.Client(transport=httpx.MockTransport(fake.handle))
    with ReplDBClient(DB_URL, http_client=http) as db:
        yield db
    http.close()


@pytest.fixture
async def async_client(fake):
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake.handle))
    async with AsyncReplDBClient(DB_URL, http_client=http) as db:
        yield db
    await http.aclose()


@pytest.fixture
def make_client():
    """Build a client whose transport runs *handler* for every request."""

    def _make(handler):
        http = httpx.Client(transport=httpx.MockTransport(handler))
        return ReplDBClient(DB_URL, http_client=http)

    return _make
