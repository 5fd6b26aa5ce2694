"""ADT resources and the query that fetches them."""

from __future__ import annotations

import abc
from dataclasses import replace
from typing import Any, ClassVar, Optional

from .client import Client, HttpRequest, HttpResponse


class Endpoint(abc.ABC):
    """An ADT resource reachable under a path relative to the server URL."""

    STATEFUL: ClassVar[bool] = False
    METHOD: ClassVar[str] = "GET"

    @abc.abstractmethod
    def url(self) -> str:
        """Return the resource path."""

    def body(self) -> Optional[bytes]:
        """Return the request body, or None for no body."""
        return None

    def parse_response(self, text: str) -> Any:
        """Turn the response text into the endpoint's result; the text by default."""
        return text


async def query(endpoint: Endpoint, client: Client) -> HttpResponse[Any]:
    """Send ``endpoint`` over ``client`` and return the response with a parsed body."""
    request = HttpRequest(
        url=client.config.join(endpoint.url()),
        method=endpoint.METHOD,
        headers={
            "Authorization": client.config.credentials.basic_auth(),
            "Accept": "*/*",
            "Accept-Encoding": "gzip, deflate, br",
        },
        body=endpoint.body() or b"",
    )
    response = await client.request(request)
    return replace(response, body=endpoint.parse_response(response.body))