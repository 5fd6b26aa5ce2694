import pytest

from sapadt.auth import Credentials
from sapadt.client import Client, HTTPClient, HttpResponse
from sapadt.endpoint import Endpoint, query
from sapadt.system import ConnectionConfiguration

SESSION_COOKIE = "SAP_SESSIONID_A4H_001=placeholder; path=/"
USER_COOKIE = "sap-usercontext=placeholder; path=/"


class FakeHTTP(HTTPClient):
    def __init__(self):
        self.calls = []
        self.login = HttpResponse(
            status=200,
            headers=(("set-cookie", SESSION_COOKIE), ("set-cookie", USER_COOKIE)),
            body="",
        )
        self.reply = HttpResponse(status=200, headers=(("content-type", "text/xml"),), body="<x/>")

    async def get(self, request):
        self.calls.append(("GET", request))
        return self.login if len(self.calls) == 1 else self.reply

    async def post(self, request):
        self.calls.append(("POST", request))
        return self.reply


class EchoEndpoint(Endpoint):
    def url(self):
        return "sap/bc/adt/echo"


class WrappingEndpoint(Endpoint):
    def url(self):
        return "sap/bc/adt/wrap"

    def parse_response(self, text):
        return ("parsed", text)


class PostingEndpoint(Endpoint):
    METHOD = "POST"

    def url(self):
        return "sap/bc/adt/post"

    def body(self):
        return b"<payload/>"


def make_config():
    password = "password"
    return ConnectionConfiguration(
        server_url="http://localhost:50000",
        client=1,
        language="en",
        credentials=Credentials("DEVELOPER", password),
    )


async def logged_in():
    http = FakeHTTP()
    client = await Client(http, make_config()).login()
    return http, client


@pytest.mark.asyncio
async def test_query_builds_request():
    http, client = await logged_in()
    endpoint = EchoEndpoint()
    response = await query(endpoint, client)
    method, request = http.calls[-1]
    assert method == "GET"
    assert request.method == "GET"
    assert request.url == client.config.join(endpoint.url())
    assert request.headers["Authorization"] == client.config.credentials.basic_auth()
    assert request.headers["Accept"] == "*/*"
    assert request.headers["Accept-Encoding"] == "gzip, deflate, br"
    assert request.body == b""
    assert response.body == "<x/>"
    assert response.status == 200


@pytest.mark.asyncio
async def test_query_applies_parse_response():
    http, client = await logged_in()
    response = await query(WrappingEndpoint(), client)
    assert response.body == ("parsed", "<x/>")
    assert response.header("content-type") == http.reply.header("content-type")


@pytest.mark.asyncio
async def test_query_posts_body():
    http, client = await logged_in()
    await query(PostingEndpoint(), client)
    method, request = http.calls[-1]
    assert method == "POST"
    assert request.body == b"<payload/>"


@pytest.mark.asyncio
async def test_query_requires_login():
    client = Client(FakeHTTP(), make_config())
    with pytest.raises(RuntimeError):
        await query(EchoEndpoint(), client)


def test_endpoint_defaults():
    endpoint = EchoEndpoint()
    assert Endpoint.body(endpoint) is None
    assert Endpoint.parse_response(endpoint, "<a/>") == "<a/>"
    assert Endpoint.METHOD == "GET"
    assert Endpoint.STATEFUL is False


def test_endpoint_is_abstract():
    with pytest.raises(TypeError):
        Endpoint()