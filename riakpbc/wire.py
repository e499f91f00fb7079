"""Message codes and protocol-buffer wire primitives."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, Tuple, Union

from .errors import ErrorCode, RiakError

WIRE_VARINT = 0
WIRE_FIXED64 = 1
WIRE_LENGTH = 2
WIRE_FIXED32 = 5

_UINT64_MASK = (1 << 64) - 1
_MAX_VARINT_SHIFT = 64

FieldValue = Union[int, bytes]


class MessageCode(IntEnum):
    """Identifiers carried in the first byte of every message body."""

    ERROR_RESP = 0
    PING_REQ = 1
    PING_RESP = 2
    GET_CLIENT_ID_REQ = 3
    GET_CLIENT_ID_RESP = 4
    SET_CLIENT_ID_REQ = 5
    SET_CLIENT_ID_RESP = 6
    GET_SERVER_INFO_REQ = 7
    GET_SERVER_INFO_RESP = 8
    GET_REQ = 9
    GET_RESP = 10
    PUT_REQ = 11
    PUT_RESP = 12
    DEL_REQ = 13
    DEL_RESP = 14
    LIST_BUCKETS_REQ = 15
    LIST_BUCKETS_RESP = 16
    LIST_KEYS_REQ = 17
    LIST_KEYS_RESP = 18
    GET_BUCKET_REQ = 19
    GET_BUCKET_RESP = 20
    SET_BUCKET_REQ = 21
    SET_BUCKET_RESP = 22
    MAP_RED_REQ = 23
    MAP_RED_RESP = 24
    INDEX_REQ = 25
    INDEX_RESP = 26
    SEARCH_QUERY_REQ = 27
    SEARCH_QUERY_RESP = 28
    RESET_BUCKET_REQ = 29
    RESET_BUCKET_RESP = 30


@dataclass(frozen=True)
class PbMessage:
    """A message code together with its encoded protocol-buffer payload."""

    code: int
    payload: bytes = field(default=b"")

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", bytes(self.payload))


def _format_error(detail: str) -> RiakError:
    return RiakError(ErrorCode.MESSAGE_FORMAT, detail)


def encode_varint(value: int) -> bytes:
    """Encode an integer as a base-128 varint; negatives use 64-bit two's complement."""
    value = int(value)
    if value < 0:
        value &= _UINT64_MASK
    out = bytearray()
    while True:
        bits = value & 0x7F
        value >>= 7
        if value:
            out.append(bits | 0x80)
        else:
            out.append(bits)
            return bytes(out)


def decode_varint(data: bytes, pos: int = 0) -> Tuple[int, int]:
    """Decode a varint at ``pos``; return the value and the position after it."""
    result = 0
    shift = 0
    for offset, byte in enumerate(data[pos:], start=pos):
        if shift >= _MAX_VARINT_SHIFT + 7:
            raise _format_error("varint too long")
        result |= (byte & 0x7F) << shift
        shift += 7
        if not byte & 0x80:
            return result, offset + 1
    raise _format_error("truncated varint")


def _key(field_number: int, wire_type: int) -> bytes:
    if field_number < 1:
        raise ValueError(f"field number must be positive, got {field_number}")
    return encode_varint((field_number << 3) | wire_type)


def encode_field_varint(field: int, value: int) -> bytes:
    """Encode a varint field (integers, booleans, enums)."""
    return _key(field, WIRE_VARINT) + encode_varint(int(value))


def encode_field_bytes(field: int, value: bytes) -> bytes:
    """Encode a length-delimited field (bytes, strings, embedded messages)."""
    value = bytes(value)
    return _key(field, WIRE_LENGTH) + encode_varint(len(value)) + value


def iter_fields(data: bytes) -> Iterator[Tuple[int, int, FieldValue]]:
    """Yield ``(field, wire_type, value)`` for every field in an encoded message.

    Varint values are ints; length-delimited and fixed-width values are bytes.
    """
    data = bytes(data)
    pos = 0
    end = len(data)
    while pos < end:
        key, pos = decode_varint(data, pos)
        field_number, wire_type = key >> 3, key & 0x07
        if field_number == 0:
            raise _format_error("field number zero")
        value: FieldValue
        if wire_type == WIRE_VARINT:
            value, pos = decode_varint(data, pos)
        elif wire_type in (WIRE_LENGTH, WIRE_FIXED64, WIRE_FIXED32):
            if wire_type == WIRE_LENGTH:
                length, pos = decode_varint(data, pos)
            else:
                length = 8 if wire_type == WIRE_FIXED64 else 4
            stop = pos + length
            if stop > end:
                raise _format_error("truncated field")
            value = data[pos:stop]
            pos = stop
        else:
            raise _format_error(f"unsupported wire type {wire_type}")
        yield field_number, wire_type, value