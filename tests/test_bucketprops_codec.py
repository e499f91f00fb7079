import pytest

from riakpbc.bucketprops import BucketProps, CommitHook, ModFun, ReplMode
from riakpbc.bucketprops_codec import (
    decode_bucketprops,
    decode_commit_hook,
    decode_modfun,
    encode_bucketprops,
    encode_commit_hook,
    encode_modfun,
)
from riakpbc.errors import ErrorCode, RiakError
from riakpbc.wire import encode_field_bytes, encode_field_varint


def test_modfun_wire_bytes():
    assert encode_modfun(ModFun(b"m", b"f")) == b"\x0a\x01m\x12\x01f"


def test_modfun_round_trip():
    modfun = ModFun(b"riak_core_util", b"chash_std_keyfun")
    assert decode_modfun(encode_modfun(modfun)) == modfun


def test_modfun_missing_function_is_format_error():
    with pytest.raises(RiakError) as info:
        decode_modfun(encode_field_bytes(1, b"mod"))
    assert info.value.code == ErrorCode.MESSAGE_FORMAT


def test_modfun_wrong_wire_type_is_format_error():
    with pytest.raises(RiakError) as info:
        decode_modfun(encode_field_varint(1, 5) + encode_field_bytes(2, b"f"))
    assert info.value.code == ErrorCode.MESSAGE_FORMAT


@pytest.mark.parametrize(
    "hook",
    [
        CommitHook(name=b"validate"),
        CommitHook(modfun=ModFun(b"mod", b"fun")),
        CommitHook(name=b"both", modfun=ModFun(b"m", b"f")),
    ],
)
def test_commit_hook_round_trip(hook):
    assert decode_commit_hook(encode_commit_hook(hook)) == hook


def test_empty_props_encode_to_nothing():
    assert encode_bucketprops(BucketProps()) == b""


def test_n_val_wire_bytes():
    assert encode_bucketprops(BucketProps(n_val=3)) == b"\x08\x03"


def test_full_props_round_trip():
    props = BucketProps(
        n_val=3,
        allow_mult=True,
        last_write_wins=False,
        has_precommit=True,
        precommit=[CommitHook(name=b"pre"), CommitHook(modfun=ModFun(b"a", b"b"))],
        has_postcommit=True,
        postcommit=[CommitHook(modfun=ModFun(b"c", b"d"))],
        chash_keyfun=ModFun(b"riak_core_util", b"chash_std_keyfun"),
        linkfun=ModFun(b"riak_kv_wm_link_walker", b"mapreduce_linkfun"),
        old_vclock=86400,
        young_vclock=20,
        big_vclock=50,
        small_vclock=50,
        pr=0,
        r=0xFFFFFFFF - 2,
        w=0xFFFFFFFF - 1,
        pw=0,
        dw=0xFFFFFFFF - 3,
        rw=0xFFFFFFFF - 4,
        basic_quorum=False,
        notfound_ok=True,
        backend=b"leveldb",
        search=False,
        repl=ReplMode.REALTIME,
        search_index=b"idx",
    )
    assert decode_bucketprops(encode_bucketprops(props)) == props


def test_has_precommit_false_round_trip_drops_hooks():
    props = BucketProps(has_precommit=False, precommit=[CommitHook(name=b"x")])
    decoded = decode_bucketprops(encode_bucketprops(props))
    assert decoded.has_precommit is False
    assert decoded.precommit == []


def test_hooks_without_flag_are_not_sent():
    props = BucketProps(postcommit=[CommitHook(name=b"x")])
    assert encode_bucketprops(props) == b""


def test_hooks_ignored_when_flag_missing_on_decode():
    data = encode_field_bytes(4, encode_commit_hook(CommitHook(name=b"pre")))
    decoded = decode_bucketprops(data)
    assert decoded.has_precommit is None
    assert decoded.precommit == []


def test_hooks_kept_when_flag_follows():
    hook = CommitHook(name=b"pre")
    data = encode_field_bytes(4, encode_commit_hook(hook)) + encode_field_varint(5, 1)
    assert decode_bucketprops(data).precommit == [hook]


def test_unknown_fields_are_skipped():
    data = encode_field_bytes(26, b"counter") + encode_field_varint(1, 5)
    assert decode_bucketprops(data) == BucketProps(n_val=5)


def test_unknown_repl_mode_is_format_error():
    with pytest.raises(RiakError) as info:
        decode_bucketprops(encode_field_varint(24, 9))
    assert info.value.code == ErrorCode.MESSAGE_FORMAT


def test_wrong_wire_type_for_backend_is_format_error():
    with pytest.raises(RiakError) as info:
        decode_bucketprops(encode_field_varint(22, 1))
    assert info.value.code == ErrorCode.MESSAGE_FORMAT


def test_encoding_is_in_field_order():
    props = BucketProps(search_index=b"i", n_val=1, repl=ReplMode.TRUE)
    encoded = encode_bucketprops(props)
    assert encoded.startswith(encode_field_varint(1, 1))
    assert encoded.endswith(encode_field_bytes(25, b"i"))