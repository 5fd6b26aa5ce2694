"""HTTP plumbing and the logged-in ADT client session."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Generic, Iterable, Optional, TypeVar

import httpx

from .common import Cookie
from .system import ConnectionConfiguration

T = TypeVar("T")

DISCOVERY_PATH = "/sap/bc/adt/core/discovery"


class LoginError(Exception):
    """Raised when a login does not yield a usable session."""


@dataclass
class HttpRequest:
    """An HTTP request to send to the backend."""

    url: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(frozen=True)
class HttpResponse(Generic[T]):
    """An HTTP response: status, all header pairs in order, and the body."""

    status: int
    headers: tuple[tuple[str, str], ...] = ()
    body: T = None  # type: ignore[assignment]

    def get_all(self, name: str) -> list[str]:
        """Return every value of the header ``name``, matched case-insensitively."""
        wanted = name.lower()
        return [value for key, value in self.headers if key.lower() == wanted]

    def header(self, name: str) -> Optional[str]:
        """Return the first value of the header ``name``, or None."""
        return next(iter(self.get_all(name)), None)


class HTTPClient(abc.ABC):
    """The interface an HTTP transport must offer to drive the ADT client."""

    @abc.abstractmethod
    async def get(self, request: HttpRequest) -> HttpResponse[str]:
        """Send ``request`` as a GET and return the response with a text body."""

    @abc.abstractmethod
    async def post(self, request: HttpRequest) -> HttpResponse[str]:
        """Send ``request`` as a POST and return the response with a text body."""


class HttpxClient(HTTPClient):
    """An HTTPClient backed by an ``httpx.AsyncClient``."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None) -> None:
        self._client = client if client is not None else httpx.AsyncClient()

    async def get(self, request: HttpRequest) -> HttpResponse[str]:
        return await self._send("GET", request)

    async def post(self, request: HttpRequest) -> HttpResponse[str]:
        return await self._send("POST", request)

    async def _send(self, method: str, request: HttpRequest) -> HttpResponse[str]:
        response = await self._client.request(
            method,
            request.url,
            headers=request.headers,
            content=request.body or None,
        )
        return HttpResponse(
            status=response.status_code,
            headers=tuple(response.headers.multi_items()),
            body=response.text,
        )

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "HttpxClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


@dataclass(frozen=True)
class Connected:
    """The session cookies obtained at login."""

    session_id: str
    usercontext: str
    sso2_token: Optional[str] = None
    context_id: Optional[str] = None
    start: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def parse_connection(cookies: Iterable[str]) -> Connected:
    """Build the session state from ``Set-Cookie`` header values.

    Each field holds the first cookie header that mentions its cookie name.
    Raises LoginError if the session id or user context cookie is missing.
    """
    values = list(cookies)

    def find(name: str) -> Optional[str]:
        return next((value for value in values if name in value), None)

    session_id = find(Cookie.SAP_SESSIONID)
    if session_id is None:
        raise LoginError(f"no {Cookie.SAP_SESSIONID} cookie in login response")
    usercontext = find(Cookie.USER_CONTEXT)
    if usercontext is None:
        raise LoginError(f"no {Cookie.USER_CONTEXT} cookie in login response")

    return Connected(
        session_id=session_id,
        usercontext=usercontext,
        sso2_token=find(Cookie.SSO2),
        context_id=find(Cookie.SAP_CONTEXT_ID),
    )


class Client:
    """An ADT client: an HTTP transport plus the system's connection settings."""

    def __init__(self, http_client: HTTPClient, config: ConnectionConfiguration) -> None:
        self.http_client = http_client
        self.config = config
        self.connection: Optional[Connected] = None

    @property
    def connected(self) -> bool:
        """Whether a login has succeeded."""
        return self.connection is not None

    async def login(self) -> "Client":
        """Open a session via the discovery service and return this client."""
        request = HttpRequest(
            url=self.config.join(DISCOVERY_PATH),
            headers={
                "Authorization": self.config.credentials.basic_auth(),
                "x-crsf-token": "fetch",
            },
        )
        response = await self.http_client.get(request)
        self.connection = parse_connection(response.get_all("set-cookie"))
        return self

    async def request(self, request: HttpRequest) -> HttpResponse[str]:
        """Send ``request`` over the open session."""
        if self.connection is None:
            raise RuntimeError("client is not logged in")
        if request.method.upper() == "POST":
            return await self.http_client.post(request)
        return await self.http_client.get(request)