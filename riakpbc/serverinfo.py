"""Server information request and response."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import ErrorCode, RiakError
from .printing import PrintState
from .wire import WIRE_LENGTH, MessageCode, PbMessage, iter_fields

_FIELD_NODE = 1
_FIELD_SERVER_VERSION = 2


@dataclass(frozen=True)
class ServerInfo:
    """Node name and server version reported by the server; either may be absent."""

    node: Optional[bytes] = None
    server_version: Optional[bytes] = None

    @property
    def has_node(self) -> bool:
        return self.node is not None

    @property
    def has_server_version(self) -> bool:
        return self.server_version is not None

    def describe(self, state: PrintState) -> int:
        """Write the fields that are present; return characters written."""
        wrote = 0
        if self.node is not None:
            wrote += state.label_binary("Node", self.node)
        if self.server_version is not None:
            wrote += state.label_binary("Version", self.server_version)
        return wrote


def encode_serverinfo_request() -> PbMessage:
    """Build the (empty) server information request."""
    return PbMessage(MessageCode.GET_SERVER_INFO_REQ)


def decode_serverinfo_response(message: PbMessage) -> ServerInfo:
    """Decode a server information response; a malformed body raises."""
    node: Optional[bytes] = None
    version: Optional[bytes] = None
    for field, wire_type, value in iter_fields(message.payload):
        if field not in (_FIELD_NODE, _FIELD_SERVER_VERSION):
            continue
        if wire_type != WIRE_LENGTH:
            raise RiakError(
                ErrorCode.MESSAGE_FORMAT, f"field {field} has wire type {wire_type}"
            )
        if field == _FIELD_NODE:
            node = bytes(value)  # type: ignore[arg-type]
        else:
            version = bytes(value)  # type: ignore[arg-type]
    return ServerInfo(node=node, server_version=version)