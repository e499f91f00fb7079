import pytest

from riakpbc.errors import ErrorCode, RiakError, ServerError, strerror


@pytest.mark.parametrize("code", [999, -1, len(ErrorCode)])
def test_strerror_unknown_code(code):
    assert strerror(code) == "<Unknown Error>"


def test_strerror_messages_are_distinct():
    messages = {strerror(code) for code in ErrorCode}
    assert len(messages) == len(ErrorCode)
    assert "<Unknown Error>" not in messages


def test_strerror_accepts_plain_int():
    assert strerror(int(ErrorCode.READ)) == strerror(ErrorCode.READ)


def test_riak_error_carries_code():
    err = RiakError(ErrorCode.CONNECT)
    assert err.code == ErrorCode.CONNECT
    assert str(err) == strerror(ErrorCode.CONNECT)


def test_riak_error_with_detail():
    err = RiakError(ErrorCode.WRITE, "socket closed")
    assert str(err).startswith(strerror(ErrorCode.WRITE))
    assert "socket closed" in str(err)


def test_server_error_fields():
    err = ServerError(12, b"no such bucket")
    assert err.errcode == 12
    assert err.errmsg == b"no such bucket"
    assert err.code == ErrorCode.SERVER_ERROR
    assert "no such bucket" in str(err)


def test_server_error_copies_message():
    raw = bytearray(b"abc")
    err = ServerError(1, raw)
    raw[0] = ord("z")
    assert err.errmsg == b"abc"


def test_server_error_is_riak_error():
    err = ServerError(3, b"bad")
    with pytest.raises(RiakError) as info:
        raise err
    assert info.value is err
    assert err.code == ErrorCode.SERVER_ERROR
    assert err.errcode == 3
    assert err.errmsg == b"bad"


def test_server_error_requires_message():
    with pytest.raises(TypeError):
        ServerError(1, None)