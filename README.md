# sapadt

An asynchronous client for the ABAP Development Tools (ADT) REST services that
SAP systems expose under `/sap/bc/adt/`.

## Installation

```
pip install .
```

With the test dependencies (pytest, pytest-asyncio):

```
pip install ".[test]"
```

## Connecting to a system

`sapadt.system.ConnectionConfiguration` holds the details of the system:
`server_url`, `client`, `language`, `credentials`, and optionally
`message_server` and `sap_router`. It raises `ValueError` when the server URL
has no scheme or host. `join(path)` resolves a path against the server URL.

```python
import asyncio

from sapadt.auth import Credentials
from sapadt.client import Client, HttpxClient
from sapadt.discovery import CoreDiscovery
from sapadt.endpoint import query
from sapadt.system import ConnectionConfiguration

password = "password"


async def main():
    config = ConnectionConfiguration(
        server_url="http://localhost:50000",
        client=1,
        language="en",
        credentials=Credentials("DEVELOPER", password),
    )
    async with HttpxClient() as transport:
        client = Client(transport, config)
        await client.login()

        response = await query(CoreDiscovery(), client)
        for workspace in response.body.workspaces:
            print(workspace.title)


asyncio.run(main())
```

`Client.login()` sends a GET to `/sap/bc/adt/core/discovery` with a Basic
`Authorization` header, reads the `Set-Cookie` values of the response and stores
them as a `Connected` in `client.connection` (`client.connected` then reports
`True`). `Connected` keeps the first cookie header mentioning each of
`SAP_SESSIONID_`, `sap-usercontext`, `MYSAPSSO2` and `sap-contextid`, plus the
time of login. `LoginError` is raised when the session id or user context
cookie is missing. `parse_connection(cookies)` does the same parsing on a list
of header values.

`Client.request(request)` sends an `HttpRequest` through the transport — as a
POST when its method is `POST`, otherwise as a GET — and raises `RuntimeError`
if the client has not logged in.

## Authorization

`sapadt.auth.Credentials(username, password)` keeps the password out of its
repr; `basic_auth()` returns the `Basic …` header value.
`BasicAuthorization` and `BearerAuthorization` each offer `header()`, which
returns the matching `Authorization` value (`BearerAuthorization("token")`
gives `"Bearer token"`).

## Endpoints

`sapadt.endpoint.Endpoint` is the base for a resource: `url()` gives its path
relative to the server URL, the class attributes `METHOD` and `STATEFUL` its
HTTP method and statefulness, `body()` the request body (none by default), and
`parse_response(text)` turns the response text into a result (the text itself
by default).

`query(endpoint, client)` builds the request against the configured server
with Basic authorization and `Accept` / `Accept-Encoding` headers, sends it via
`client.request`, and returns an `HttpResponse` whose `body` is the parsed
result.

`sapadt.discovery.CoreDiscovery` is the endpoint for
`sap/bc/adt/core/discovery`. Its result is a `Service`, holding `Workspace`
entries, each with a title and `Collection` entries carrying `title`, `href`,
`accept`, `Category` terms and schemes, and `TemplateLinks` when present.
`parse_service(xml)` parses such a document on its own and raises `ValueError`
when it is malformed.

## ADT request headers

`sapadt.common` holds the names of the ADT headers (`Header`) and session
cookies (`Cookie`), and the header values a request may carry:
`ProfilingKind`, `ServerInstance`, `Softstate` and `RuntimeTracing`.

```python
from sapadt.common import ProfilingKind, RuntimeProfilingKind, Softstate

header = ProfilingKind(RuntimeProfilingKind.SERVER_TIME)
print(header.name(), header.value())   # x-sap-adt-profiling server-time
print(Softstate(True).value())         # 1
```

`name()` returns the header name in lower case. `value()` raises
`InvalidHeaderValue` when the text holds control characters that cannot be sent
in an HTTP header.

## Custom HTTP transport

`Client` works with any `HTTPClient`: subclass it and implement the `get` and
`post` coroutines, which take an `HttpRequest` (`url`, `method`, `headers`,
`body`) and return an `HttpResponse` (`status`, `headers` as ordered pairs,
`body`). `HttpResponse.get_all(name)` and `header(name)` look headers up
case-insensitively. `HttpxClient` wraps an `httpx.AsyncClient`, can be used as
an async context manager, and is closed with `aclose()`.

## What the package does not do

- There is no logout; a session ends when the transport is closed.
- The session cookies stored at login are not sent back on later requests, and
  no CSRF token is fetched or sent; each `query` authenticates with the
  credentials again.
- The ADT header values in `sapadt.common` are not added to requests by
  `query`; a caller must put them into an `HttpRequest` itself.
- `CoreDiscovery` is the only endpoint provided.