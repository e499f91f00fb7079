"""Protocol-buffer encoding of bucket properties, commit hooks and mod/funs."""

from __future__ import annotations

from typing import Dict, List, Optional

from .bucketprops import UINT32_MAX, BucketProps, CommitHook, ModFun, ReplMode
from .errors import ErrorCode, RiakError
from .wire import (
    WIRE_LENGTH,
    WIRE_VARINT,
    FieldValue,
    encode_field_bytes,
    encode_field_varint,
    iter_fields,
)

# RpbModFun
_MODFUN_MODULE = 1
_MODFUN_FUNCTION = 2

# RpbCommitHook
_HOOK_MODFUN = 1
_HOOK_NAME = 2

# RpbBucketProps
_PROPS_PRECOMMIT = 4
_PROPS_HAS_PRECOMMIT = 5
_PROPS_POSTCOMMIT = 6
_PROPS_HAS_POSTCOMMIT = 7
_PROPS_CHASH_KEYFUN = 8
_PROPS_LINKFUN = 9
_PROPS_REPL = 24

_UINT32_FIELDS: Dict[int, str] = {
    1: "n_val",
    10: "old_vclock",
    11: "young_vclock",
    12: "big_vclock",
    13: "small_vclock",
    14: "pr",
    15: "r",
    16: "w",
    17: "pw",
    18: "dw",
    19: "rw",
}
_BOOL_FIELDS: Dict[int, str] = {
    2: "allow_mult",
    3: "last_write_wins",
    20: "basic_quorum",
    21: "notfound_ok",
    23: "search",
}
_BYTES_FIELDS: Dict[int, str] = {
    22: "backend",
    25: "search_index",
}


def _format_error(detail: str) -> RiakError:
    return RiakError(ErrorCode.MESSAGE_FORMAT, detail)


def _expect(field: int, wire_type: int, expected: int) -> None:
    if wire_type != expected:
        raise _format_error(f"field {field} has wire type {wire_type}, expected {expected}")


def encode_modfun(modfun: ModFun) -> bytes:
    """Encode a module/function reference as an RpbModFun message."""
    return encode_field_bytes(_MODFUN_MODULE, modfun.module) + encode_field_bytes(
        _MODFUN_FUNCTION, modfun.function
    )


def decode_modfun(data: bytes) -> ModFun:
    """Decode an RpbModFun message; both module and function are required."""
    module: Optional[bytes] = None
    function: Optional[bytes] = None
    for field, wire_type, value in iter_fields(data):
        if field == _MODFUN_MODULE:
            _expect(field, wire_type, WIRE_LENGTH)
            module = bytes(value)  # type: ignore[arg-type]
        elif field == _MODFUN_FUNCTION:
            _expect(field, wire_type, WIRE_LENGTH)
            function = bytes(value)  # type: ignore[arg-type]
    if module is None or function is None:
        raise _format_error("mod/fun needs both a module and a function")
    return ModFun(module, function)


def encode_commit_hook(hook: CommitHook) -> bytes:
    """Encode a commit hook as an RpbCommitHook message."""
    out = bytearray()
    if hook.modfun is not None:
        out += encode_field_bytes(_HOOK_MODFUN, encode_modfun(hook.modfun))
    if hook.has_name:
        out += encode_field_bytes(_HOOK_NAME, hook.name)  # type: ignore[arg-type]
    return bytes(out)


def decode_commit_hook(data: bytes) -> CommitHook:
    """Decode an RpbCommitHook message."""
    name: Optional[bytes] = None
    modfun: Optional[ModFun] = None
    for field, wire_type, value in iter_fields(data):
        if field == _HOOK_MODFUN:
            _expect(field, wire_type, WIRE_LENGTH)
            modfun = decode_modfun(value)  # type: ignore[arg-type]
        elif field == _HOOK_NAME:
            _expect(field, wire_type, WIRE_LENGTH)
            name = bytes(value)  # type: ignore[arg-type]
    return CommitHook(name=name, modfun=modfun)


def _encode_hooks(
    field_hooks: int, field_flag: int, flag: Optional[bool], hooks: List[CommitHook]
) -> bytes:
    if flag is None:
        return b""
    out = bytearray()
    if flag:
        for hook in hooks:
            out += encode_field_bytes(field_hooks, encode_commit_hook(hook))
    out += encode_field_varint(field_flag, bool(flag))
    return bytes(out)


def encode_bucketprops(props: BucketProps) -> bytes:
    """Encode the properties that are set as an RpbBucketProps message.

    Hook lists are sent only when the matching ``has_*commit`` flag is true.
    """
    out = bytearray()
    by_field: Dict[int, bytes] = {}

    for field, name in _UINT32_FIELDS.items():
        value = getattr(props, name)
        if value is not None:
            by_field[field] = encode_field_varint(field, value)
    for field, name in _BOOL_FIELDS.items():
        value = getattr(props, name)
        if value is not None:
            by_field[field] = encode_field_varint(field, bool(value))
    for field, name in _BYTES_FIELDS.items():
        value = getattr(props, name)
        if value is not None:
            by_field[field] = encode_field_bytes(field, value)

    by_field[_PROPS_PRECOMMIT] = _encode_hooks(
        _PROPS_PRECOMMIT, _PROPS_HAS_PRECOMMIT, props.has_precommit, props.precommit
    )
    by_field[_PROPS_POSTCOMMIT] = _encode_hooks(
        _PROPS_POSTCOMMIT, _PROPS_HAS_POSTCOMMIT, props.has_postcommit, props.postcommit
    )
    if props.chash_keyfun is not None:
        by_field[_PROPS_CHASH_KEYFUN] = encode_field_bytes(
            _PROPS_CHASH_KEYFUN, encode_modfun(props.chash_keyfun)
        )
    if props.linkfun is not None:
        by_field[_PROPS_LINKFUN] = encode_field_bytes(
            _PROPS_LINKFUN, encode_modfun(props.linkfun)
        )
    if props.repl is not None:
        by_field[_PROPS_REPL] = encode_field_varint(_PROPS_REPL, int(props.repl))

    for field in sorted(by_field):
        out += by_field[field]
    return bytes(out)


def _hook_flag(value: FieldValue, field: int, wire_type: int) -> bool:
    _expect(field, wire_type, WIRE_VARINT)
    return bool(value)


def decode_bucketprops(data: bytes) -> BucketProps:
    """Decode an RpbBucketProps message; unknown fields are skipped.

    Hook lists are kept only when the matching ``has_*commit`` flag is true.
    """
    values: Dict[str, object] = {}
    precommit_raw: List[bytes] = []
    postcommit_raw: List[bytes] = []

    for field, wire_type, value in iter_fields(data):
        if field in _UINT32_FIELDS:
            _expect(field, wire_type, WIRE_VARINT)
            values[_UINT32_FIELDS[field]] = int(value) & UINT32_MAX  # type: ignore[arg-type]
        elif field in _BOOL_FIELDS:
            _expect(field, wire_type, WIRE_VARINT)
            values[_BOOL_FIELDS[field]] = bool(value)
        elif field in _BYTES_FIELDS:
            _expect(field, wire_type, WIRE_LENGTH)
            values[_BYTES_FIELDS[field]] = bytes(value)  # type: ignore[arg-type]
        elif field == _PROPS_PRECOMMIT:
            _expect(field, wire_type, WIRE_LENGTH)
            precommit_raw.append(bytes(value))  # type: ignore[arg-type]
        elif field == _PROPS_POSTCOMMIT:
            _expect(field, wire_type, WIRE_LENGTH)
            postcommit_raw.append(bytes(value))  # type: ignore[arg-type]
        elif field == _PROPS_HAS_PRECOMMIT:
            values["has_precommit"] = _hook_flag(value, field, wire_type)
        elif field == _PROPS_HAS_POSTCOMMIT:
            values["has_postcommit"] = _hook_flag(value, field, wire_type)
        elif field == _PROPS_CHASH_KEYFUN:
            _expect(field, wire_type, WIRE_LENGTH)
            values["chash_keyfun"] = decode_modfun(value)  # type: ignore[arg-type]
        elif field == _PROPS_LINKFUN:
            _expect(field, wire_type, WIRE_LENGTH)
            values["linkfun"] = decode_modfun(value)  # type: ignore[arg-type]
        elif field == _PROPS_REPL:
            _expect(field, wire_type, WIRE_VARINT)
            try:
                values["repl"] = ReplMode(value)
            except ValueError as exc:
                raise _format_error(f"unknown replication mode {value}") from exc

    if values.get("has_precommit"):
        values["precommit"] = [decode_commit_hook(raw) for raw in precommit_raw]
    if values.get("has_postcommit"):
        values["postcommit"] = [decode_commit_hook(raw) for raw in postcommit_raw]
    return BucketProps(**values)  # type: ignore[arg-type]