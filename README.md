# riakpbc

Pure-Python encoding and decoding of messages for the Riak protocol buffers
interface. It builds request bodies and reads response bodies for server
information and bucket properties, models bucket properties as plain Python
objects, and renders responses as bounded, human-readable text. It has no
dependencies beyond the standard library.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Modules

- `riakpbc.wire`: `MessageCode` (the message identifiers), `PbMessage` (a
  message code with its encoded payload) and the protocol-buffer primitives
  `encode_varint`, `decode_varint`, `encode_field_varint`,
  `encode_field_bytes` and `iter_fields`, which yields
  `(field, wire_type, value)` for each field of an encoded message.
- `riakpbc.bucketprops`: `BucketProps` (every property optional, `None`
  meaning unset), `ModFun`, `CommitHook`, `ReplMode`, `quorum_name` (names
  the magic quorum values `one`, `quorum`, `all`, `default`) and
  `describe_commit_hooks`. `BucketProps.describe(state)` and
  `ModFun.describe(state, name)` write readable dumps.
- `riakpbc.bucketprops_codec`: `encode_bucketprops` / `decode_bucketprops`,
  `encode_commit_hook` / `decode_commit_hook` and `encode_modfun` /
  `decode_modfun`, converting to and from the protocol-buffer messages.
- `riakpbc.serverinfo`: `encode_serverinfo_request()`,
  `decode_serverinfo_response(message)` and the `ServerInfo` result, with
  `describe(state)`.
- `riakpbc.set_bucketprops`: `encode_set_bucketprops_request(bucket, props)`
  and `decode_set_bucketprops_response(message)`.
- `riakpbc.printing`: `PrintState`, which collects text up to a fixed size
  (at most `maxlen - 1` characters, like a terminated buffer) and offers
  `label_int`, `label_bool`, `label_binary`, `label_string`, `label_time`
  and related helpers.
- `riakpbc.binary`: `printable(data, size)` (control bytes shown as dots)
  and `hex_string(data, size)`.
- `riakpbc.errors`: `ErrorCode`, `strerror(code)`, `RiakError` (with a
  `code` attribute) and `ServerError` (with `errcode` and `errmsg`).

Decoders raise `RiakError` with `ErrorCode.MESSAGE_FORMAT` when a body is
malformed.

## Example

```python
from riakpbc.bucketprops import BucketProps, ReplMode
from riakpbc.bucketprops_codec import decode_bucketprops, encode_bucketprops
from riakpbc.printing import PrintState
from riakpbc.serverinfo import decode_serverinfo_response
from riakpbc.set_bucketprops import encode_set_bucketprops_request
from riakpbc.wire import MessageCode, PbMessage, encode_field_bytes

props = BucketProps(n_val=3, allow_mult=True, repl=ReplMode.REALTIME)
assert decode_bucketprops(encode_bucketprops(props)) == props

request = encode_set_bucketprops_request(b"bucket", props)
print(request.code == MessageCode.SET_BUCKET_REQ, request.payload.hex())

state = PrintState(1024)
props.describe(state)
print(state)

reply = PbMessage(
    MessageCode.GET_SERVER_INFO_RESP,
    encode_field_bytes(1, b"riak@127.0.0.1") + encode_field_bytes(2, b"2.0.0"),
)
info = decode_serverinfo_response(reply)
print(info.node, info.server_version)
```

## What it does not do

The package does not open connections or talk to a Riak node. It has no
client object, no socket handling, no length-prefixed framing of messages
on a stream, no logging configuration and no command-line tool. Its
messages are limited to server information and setting bucket properties;
it produces and consumes message bodies, and sending them is left to the
caller.