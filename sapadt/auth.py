"""Credentials and authorization header values for ADT connections."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """A user name and password pair; the password is kept out of the repr."""

    username: str
    password: str = field(repr=False)

    def basic_auth(self) -> str:
        """Return the value of an HTTP Basic ``Authorization`` header."""
        raw = f"{self.username}:{self.password}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")


@dataclass(frozen=True)
class BasicAuthorization:
    """Authorization by user name and password."""

    credentials: Credentials

    def header(self) -> str:
        """Return the ``Authorization`` header value."""
        return self.credentials.basic_auth()


@dataclass(frozen=True)
class BearerAuthorization:
    """Authorization by bearer token."""

    token: str = field(repr=False)

    def header(self) -> str:
        """Return the ``Authorization`` header value."""
        return f"Bearer {self.token}"