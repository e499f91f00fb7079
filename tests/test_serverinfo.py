import pytest

from riakpbc.errors import ErrorCode, RiakError
from riakpbc.printing import PrintState
from riakpbc.serverinfo import (
    ServerInfo,
    decode_serverinfo_response,
    encode_serverinfo_request,
)
from riakpbc.wire import MessageCode, PbMessage, encode_field_bytes, encode_field_varint


def _response(payload):
    return PbMessage(MessageCode.GET_SERVER_INFO_RESP, payload)


def test_request_is_empty_serverinfo_message():
    request = encode_serverinfo_request()
    assert request.code == MessageCode.GET_SERVER_INFO_REQ
    assert request.payload == b""


def test_decode_both_fields():
    payload = encode_field_bytes(1, b"riak@127.0.0.1") + encode_field_bytes(2, b"1.4.2")
    info = decode_serverinfo_response(_response(payload))
    assert info == ServerInfo(node=b"riak@127.0.0.1", server_version=b"1.4.2")
    assert info.has_node and info.has_server_version


def test_decode_wire_bytes():
    info = decode_serverinfo_response(_response(b"\x0a\x01n\x12\x01v"))
    assert info.node == b"n"
    assert info.server_version == b"v"


def test_decode_empty_response_has_no_fields():
    info = decode_serverinfo_response(_response(b""))
    assert not info.has_node
    assert not info.has_server_version


def test_decode_truncated_response_raises():
    with pytest.raises(RiakError) as info:
        decode_serverinfo_response(_response(b"\x0a\x10abc"))
    assert info.value.code == ErrorCode.MESSAGE_FORMAT


def test_decode_wrong_wire_type_raises():
    with pytest.raises(RiakError) as info:
        decode_serverinfo_response(_response(encode_field_varint(1, 3)))
    assert info.value.code == ErrorCode.MESSAGE_FORMAT


def test_describe_prints_present_fields():
    state = PrintState(1024)
    info = ServerInfo(node=b"riak@127.0.0.1", server_version=b"1.4.2")
    wrote = info.describe(state)
    assert state.text == "Node: riak@127.0.0.1\nVersion: 1.4.2\n"
    assert wrote == len(state.text)


def test_describe_skips_missing_fields():
    state = PrintState()
    ServerInfo(server_version=b"1.4.2").describe(state)
    assert state.text == "Version: 1.4.2\n"