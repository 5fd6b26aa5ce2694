"""Connection settings for an SAP system offering ADT services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urljoin, urlsplit

from .auth import Credentials


@dataclass(frozen=True)
class ConnectionConfiguration:
    """The information needed to connect to the ADT services of a system.

    ``server_url`` is the base URL, for example ``https://my-sap-system.com:8000``.
    """

    server_url: str
    client: int
    language: str
    credentials: Credentials
    message_server: Optional[str] = None
    sap_router: Optional[str] = None

    def __post_init__(self) -> None:
        parts = urlsplit(self.server_url)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"invalid server URL: {self.server_url!r}")
        if not parts.path:
            object.__setattr__(self, "server_url", self.server_url + "/")

    def join(self, path: str) -> str:
        """Resolve ``path`` against the server URL."""
        return urljoin(self.server_url, path)