"""Error codes and exceptions raised by the client."""

from __future__ import annotations

from enum import IntEnum

from .binary import printable

_UNKNOWN_ERROR = "<Unknown Error>"
_SERVER_MESSAGE_LIMIT = 2048


class ErrorCode(IntEnum):
    """Result codes reported by client operations."""

    OK = 0
    UNINITIALIZED = 1
    OUT_OF_MEMORY = 2
    DNS_RESOLUTION = 3
    CONNECT = 4
    WRITE = 5
    READ = 6
    SERVER_ERROR = 7
    NO_PING = 8
    MESSAGE_FORMAT = 9
    LOGGING = 10
    OUT_OF_RANGE = 11


_MESSAGES = {
    ErrorCode.OK: "Success",
    ErrorCode.UNINITIALIZED: "Object was not initialized",
    ErrorCode.OUT_OF_MEMORY: "Out of memory",
    ErrorCode.DNS_RESOLUTION: "Could not resolve host address",
    ErrorCode.CONNECT: "Could not connect to server",
    ErrorCode.WRITE: "Could not write message",
    ErrorCode.READ: "Could not read message",
    ErrorCode.SERVER_ERROR: "Server returned an error",
    ErrorCode.NO_PING: "No ping response",
    ErrorCode.MESSAGE_FORMAT: "Badly formatted message",
    ErrorCode.LOGGING: "Logging could not be initialized",
    ErrorCode.OUT_OF_RANGE: "Value out of range",
}


def strerror(code: int) -> str:
    """Return the description of an error code, or a marker for unknown codes."""
    try:
        return _MESSAGES[ErrorCode(code)]
    except ValueError:
        return _UNKNOWN_ERROR


class RiakError(Exception):
    """An operation failed with one of the codes in :class:`ErrorCode`."""

    def __init__(self, code: int, detail: str | None = None) -> None:
        self.code = code
        self.detail = detail
        text = strerror(code)
        if detail:
            text = f"{text}: {detail}"
        super().__init__(text)


class ServerError(RiakError):
    """The server answered with an error response."""

    def __init__(self, errcode: int, errmsg: bytes) -> None:
        self.errcode = int(errcode)
        self.errmsg = bytes(errmsg)
        shown = printable(self.errmsg, _SERVER_MESSAGE_LIMIT)
        super().__init__(ErrorCode.SERVER_ERROR, f"ERR #{self.errcode} - {shown}")