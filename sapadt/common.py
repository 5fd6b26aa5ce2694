"""Custom ADT header names, cookie names and header values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InvalidHeaderValue(ValueError):
    """Raised when a value cannot be sent as an HTTP header value."""


class RuntimeProfilingKind(str, Enum):
    """The runtime profiling options that ADT offers."""

    # Capture only the server processing time, returned in ``server_time=x`` (ms).
    SERVER_TIME = "server-time"


class Header:
    """Custom ADT headers for requests to the backend."""

    PROFILING = "X-sap-adt-profiling"
    RUNTIME_TRACING = "X-adt-runtime-tracing"
    SERVER_INSTANCE = "X-sap-adt-server-instance"
    SOFTSTATE = "X-sap-adt-softstate"
    SESSIONTYPE = "X-sap-adt-sessiontype"


class Cookie:
    """Cookie names set by the backend on login."""

    SSO2 = "MYSAPSSO2"
    SAP_SESSIONID = "SAP_SESSIONID_"
    USER_CONTEXT = "sap-usercontext"
    SAP_CONTEXT_ID = "sap-contextid"


def _checked(value: str) -> str:
    for char in value:
        code = ord(char)
        if (code < 0x20 and char != "\t") or code == 0x7F:
            raise InvalidHeaderValue(f"invalid character {char!r} in header value")
    return value


class ADTHeaderValue:
    """A custom ADT header with its value."""

    _header: str = ""

    def name(self) -> str:
        """Return the header name in its canonical lower-case form."""
        return self._header.lower()

    def value(self) -> str:
        """Return the header value; raise InvalidHeaderValue if it is not valid."""
        raise NotImplementedError


@dataclass(frozen=True)
class ProfilingKind(ADTHeaderValue):
    """The profiling mode to use."""

    kind: RuntimeProfilingKind
    _header = Header.PROFILING

    def value(self) -> str:
        return _checked(RuntimeProfilingKind(self.kind).value)


@dataclass(frozen=True)
class ServerInstance(ADTHeaderValue):
    """The server instance that should process the request."""

    instance: str
    _header = Header.SERVER_INSTANCE

    def value(self) -> str:
        return _checked(self.instance)


@dataclass(frozen=True)
class Softstate(ADTHeaderValue):
    """Whether the session is in a soft state."""

    enabled: bool
    _header = Header.SOFTSTATE

    def value(self) -> str:
        return str(int(bool(self.enabled)))


@dataclass(frozen=True)
class RuntimeTracing(ADTHeaderValue):
    """Trace the request."""

    trace: str
    _header = Header.RUNTIME_TRACING

    def value(self) -> str:
        return _checked(self.trace)