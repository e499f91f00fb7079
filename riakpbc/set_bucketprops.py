"""Request and response for setting bucket properties."""

from __future__ import annotations

from .bucketprops import BucketProps
from .bucketprops_codec import encode_bucketprops
from .wire import MessageCode, PbMessage, encode_field_bytes

_FIELD_BUCKET = 1
_FIELD_PROPS = 2


def encode_set_bucketprops_request(bucket: bytes, props: BucketProps) -> PbMessage:
    """Build a request that sets the properties of ``bucket``."""
    payload = encode_field_bytes(_FIELD_BUCKET, bytes(bucket)) + encode_field_bytes(
        _FIELD_PROPS, encode_bucketprops(props)
    )
    return PbMessage(MessageCode.SET_BUCKET_REQ, payload)


def decode_set_bucketprops_response(message: PbMessage) -> None:
    """Accept the server's acknowledgement; the response carries no data."""
    return None